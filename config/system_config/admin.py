from django.contrib import admin

from .models import CoreConfig


@admin.register(CoreConfig)
class CoreConfigAdmin(admin.ModelAdmin):
    list_display = ("code", "value", "updated_at")
    search_fields = ("code",)
