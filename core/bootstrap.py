# core/bootstrap.py
from __future__ import annotations

from functools import lru_cache

from django.conf import settings

from config.dictionaries.repositories import CountryRepository, CountryStateRepository
from config.system_config.repositories import CoreConfigRepository
from config.system_config.system_config import SystemConfig
from core.container import Container
from core.facade import Core


def build_container() -> Container:
    container = Container()
    container.bind(CountryRepository, CountryRepository)
    container.bind(CountryStateRepository, CountryStateRepository)
    container.bind(CoreConfigRepository, CoreConfigRepository)
    container.bind(
        SystemConfig,
        lambda: SystemConfig(
            items=settings.SYSTEM_CONFIG,
            repository=container.resolve(CoreConfigRepository),
        ),
    )
    return container


def build_core(container: Container | None = None) -> Core:
    container = container or build_container()
    return Core(
        country_repository=container.resolve(CountryRepository),
        country_state_repository=container.resolve(CountryStateRepository),
        system_config=container.resolve(SystemConfig),
        container=container,
    )


@lru_cache(maxsize=1)
def get_core() -> Core:
    return build_core()
