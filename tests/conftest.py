# tests/conftest.py
import pytest

from fakes import SYSTEM_CONFIG_ITEMS, FakeConfig, FakeCountry, FakeState, InMemoryRepository


@pytest.fixture
def country_repository():
    return InMemoryRepository(
        [
            FakeCountry(code="US", name="United States"),
            FakeCountry(code="DE", name="Germany"),
        ]
    )


@pytest.fixture
def state_repository():
    return InMemoryRepository(
        [
            FakeState(country_code="US", code="CA", name="California"),
            FakeState(country_code="US", code="NY", name="New York"),
            FakeState(country_code="DE", code="BY", name="Bayern"),
        ]
    )


@pytest.fixture
def config_repository():
    return InMemoryRepository([FakeConfig(code="general.general.locale_settings.locale", value="de")])


@pytest.fixture
def fake_core(country_repository, state_repository, config_repository):
    from config.system_config.system_config import SystemConfig
    from core.container import Container
    from core.facade import Core

    return Core(
        country_repository=country_repository,
        country_state_repository=state_repository,
        system_config=SystemConfig(items=SYSTEM_CONFIG_ITEMS, repository=config_repository),
        container=Container(),
    )


@pytest.fixture
def seeded_dictionaries(db):
    from django.core.management import call_command

    call_command("seed_dictionaries")


@pytest.fixture
def user_factory(db):
    """
    Создаёт пользователя с заданным username/паролем.
    Возвращает объект user.
    """
    def _make_user(username: str, password: str = "pass12345", **kwargs):
        from django.contrib.auth import get_user_model

        User = get_user_model()
        return User.objects.create_user(username=username, password=password, **kwargs)

    return _make_user


@pytest.fixture
def api_client(client, db):
    return client


@pytest.fixture
def staff_client(api_client, user_factory):
    """
    (client, user) где user = staff, сессия уже установлена.
    """
    user = user_factory("staff", is_staff=True)
    api_client.force_login(user)
    return api_client, user


@pytest.fixture
def country_factory(db):
    from config.dictionaries.models import Country

    def _make_country(code: str = "SK", name: str = "Slovakia"):
        return Country.objects.create(code=code, name=name)

    return _make_country


@pytest.fixture
def state_factory(db):
    from config.dictionaries.models import CountryState

    def _make_state(country, code: str, name: str):
        return CountryState.objects.create(country=country, country_code=country.code, code=code, name=name)

    return _make_state
