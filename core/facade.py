# core/facade.py
from __future__ import annotations

import zoneinfo
from typing import Any, Hashable

from django.conf import settings

from core import currency, dates
from core.container import Container
from core.repositories import FindsAll, FindsByField

VERSION = "2.1.2"


class Core:
    """
    Lookup and formatting helpers shared by views and templates.

    Missing reference data never raises: country lookups fall back to "",
    state lookups echo the requested code, collection lookups are empty.
    """

    def __init__(
        self,
        *,
        country_repository: FindsByField | FindsAll,
        country_state_repository: FindsByField | FindsAll,
        system_config,
        container: Container | None = None,
    ) -> None:
        self.country_repository = country_repository
        self.country_state_repository = country_state_repository
        self.system_config = system_config
        self.container = container or Container()

    def version(self) -> str:
        return VERSION

    def timezones(self) -> dict[str, str]:
        return {tz: tz for tz in sorted(zoneinfo.available_timezones())}

    def locales(self) -> list[dict[str, str]]:
        return [{"title": str(title), "value": code} for code, title in settings.LANGUAGES]

    # --- countries / states ---

    def countries(self):
        return self.country_repository.all()

    def country_name(self, code: str) -> str:
        country = self.country_repository.find_one_by_field("code", code)
        return country.name if country else ""

    def state_name(self, code: str) -> str:
        # unlike country_name, an unknown state shows its code
        state = self.country_state_repository.find_one_by_field("code", code)
        return state.name if state else code

    def states(self, country_code: str):
        return self.country_state_repository.find_by_field("country_code", country_code)

    def grouped_states_by_countries(self) -> dict[str, list[dict[str, Any]]]:
        grouped: dict[str, list[dict[str, Any]]] = {}
        for state in self.country_state_repository.all():
            grouped.setdefault(state.country_code, []).append(state.to_dict())
        return grouped

    def find_state_by_country_code(self, country_code: str | None = None, state_code: str | None = None):
        matches = self.country_state_repository.find_where(country_code=country_code, code=state_code)
        for state in matches:
            return state
        return None

    # --- object cache ---

    def get_singleton_instance(self, key: Hashable):
        return self.container.resolve(key)

    # --- formatting ---

    def format_date(self, value=None, fmt: str = dates.DEFAULT_DATE_FORMAT) -> str:
        return dates.format_date(value, fmt)

    def x_week_range(self, value, day) -> str:
        return dates.x_week_range(value, day)

    def currency_symbol(self, code: str) -> str:
        return currency.currency_symbol(code)

    def format_base_price(self, price) -> str:
        return currency.format_price(price, settings.BASE_CURRENCY)

    # --- system configuration ---

    def get_config_field(self, field_name: str) -> dict[str, Any] | None:
        return self.system_config.get_config_field(field_name)

    def get_config_data(self, field_name: str) -> Any:
        return self.system_config.get_config_data(field_name)
