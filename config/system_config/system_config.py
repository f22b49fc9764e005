# config/system_config/system_config.py
from __future__ import annotations

import logging
from typing import Any, Iterable

from core.repositories import FindsByField

logger = logging.getLogger(__name__)


class SystemConfig:
    """
    Read access to configuration fields.

    `items` is the declared field tree (settings.SYSTEM_CONFIG):
        [{"key": "general.general.locale_settings",
          "fields": [{"name": "locale", "default": "en", ...}]}]

    A field is addressed by "<item key>.<field name>". Stored values come
    from the CoreConfig table; fields without a stored value fall back to
    their declared default.
    """

    def __init__(self, *, items: Iterable[dict[str, Any]], repository: FindsByField) -> None:
        self.repository = repository
        self._fields: dict[str, dict[str, Any]] = {}

        for item in items:
            for field in item.get("fields", []):
                name = f"{item['key']}.{field['name']}"
                if name in self._fields:
                    logger.warning("Duplicate config field %s, keeping the first declaration", name)
                    continue
                self._fields[name] = field

    def field_names(self) -> list[str]:
        return sorted(self._fields)

    def get_config_field(self, field_name: str) -> dict[str, Any] | None:
        return self._fields.get(field_name)

    def get_config_data(self, field_name: str) -> Any:
        stored = self.repository.find_one_by_field("code", field_name)
        if stored is not None:
            return stored.value

        field = self.get_config_field(field_name)
        if field is None:
            logger.debug("Config field %s is not declared and has no stored value", field_name)
            return None

        return field.get("default")
