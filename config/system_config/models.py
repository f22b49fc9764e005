# config/system_config/models.py

from django.db import models


class CoreConfig(models.Model):
    # dotted field name, e.g. "general.general.locale_settings.locale"
    code = models.CharField(max_length=255, unique=True)
    value = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["code"]

    def __str__(self) -> str:
        return self.code
