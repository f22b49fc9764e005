from django.apps import AppConfig


class SystemConfigConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "config.system_config"
    label = "system_config"
    verbose_name = "System configuration"
