import pytest

pytestmark = pytest.mark.django_db


def test_core_over_orm_repositories(seeded_dictionaries):
    """
    GIVEN:
        - справочники засеяны через seed_dictionaries
    WHEN:
        - Core собран через composition root (реальные ORM-репозитории)
    THEN:
        - lookup-методы работают так же, как на in-memory фейках
    """
    from core.bootstrap import build_core

    core = build_core()

    assert core.country_name("DE") == "Germany"
    assert core.country_name("XX") == ""
    assert core.state_name("BY") == "Bayern"
    assert core.state_name("XX") == "XX"

    assert [s.code for s in core.states("US")] == ["CA", "FL", "IL", "NY", "TX", "WA"]
    assert list(core.states("XX")) == []

    found = core.find_state_by_country_code("IN", "KA")
    assert found.name == "Karnataka"
    assert core.find_state_by_country_code("IN", "CA") is None

    grouped = core.grouped_states_by_countries()
    assert "SK" not in grouped  # страны без штатов не попадают в группировку
    assert [s["code"] for s in grouped["AT"]][:2] == ["1", "2"]
    assert core.countries().count() == 8


def test_build_core_shares_container_instances():
    from config.dictionaries.repositories import CountryRepository
    from core.bootstrap import build_container, build_core

    container = build_container()
    core = build_core(container)

    assert core.country_repository is container.resolve(CountryRepository)
    assert core.get_singleton_instance(CountryRepository) is core.country_repository


def test_system_config_reads_stored_values_and_defaults():
    from config.system_config.models import CoreConfig
    from core.bootstrap import build_core

    CoreConfig.objects.create(code="general.general.locale_settings.locale", value="tr")
    core = build_core()

    assert core.get_config_data("general.general.locale_settings.locale") == "tr"
    assert core.get_config_data("email.smtp.account.from_name") == "CRM"
    assert core.get_config_field("email.smtp.account.from_address")["type"] == "text"
