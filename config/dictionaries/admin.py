from django.contrib import admin

from .models import Country, CountryState


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ("code", "name")
    search_fields = ("code", "name")


@admin.register(CountryState)
class CountryStateAdmin(admin.ModelAdmin):
    list_display = ("country_code", "code", "name")
    list_filter = ("country_code",)
    search_fields = ("code", "name")
