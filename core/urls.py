"""
URL configuration for core project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from core.views import HealthView, LocaleListView, TimezoneListView, VersionView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health', HealthView.as_view(), name='health'),
    path("api/v1/version/", VersionView.as_view(), name="version"),
    path("api/v1/locales/", LocaleListView.as_view(), name="locales-list"),
    path("api/v1/timezones/", TimezoneListView.as_view(), name="timezones-list"),
    path("api/v1/dictionaries/", include("config.dictionaries.urls")),
    path("api/v1/config/", include("config.system_config.urls")),
]
