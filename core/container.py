# core/container.py
from __future__ import annotations

import logging
from typing import Any, Callable, Hashable

from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class Container:
    """
    Memoizing object factory owned by the composition root.

    Keys are classes or dotted import paths. Without an explicit binding a
    key is imported (if it is a string) and called with no arguments.
    Every key resolves to the same instance for the lifetime of the container.
    """

    def __init__(self, factories: dict[Hashable, Callable[[], Any]] | None = None) -> None:
        self._factories: dict[Hashable, Callable[[], Any]] = dict(factories or {})
        self._instances: dict[Hashable, Any] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._instances

    def bind(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory
        # a rebound key must not keep serving the old instance
        self._instances.pop(key, None)

    def resolve(self, key: Hashable) -> Any:
        if key in self._instances:
            return self._instances[key]

        factory = self._factories.get(key)
        if factory is None:
            factory = import_string(key) if isinstance(key, str) else key

        instance = factory()
        self._instances[key] = instance
        logger.debug("Container resolved %r", key)
        return instance

    def forget(self, key: Hashable) -> None:
        self._instances.pop(key, None)
