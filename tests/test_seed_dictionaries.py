import pytest
from django.core.management import call_command


pytestmark = pytest.mark.django_db


def test_seed_dictionaries_creates_default_records():
    from config.dictionaries.models import Country, CountryState

    assert Country.objects.count() == 0
    assert CountryState.objects.count() == 0

    call_command("seed_dictionaries")

    assert Country.objects.filter(code="SK").exists()
    ca = CountryState.objects.get(country_code="US", code="CA")
    assert ca.country.code == "US"
    assert ca.name == "California"


def test_seed_dictionaries_is_idempotent():
    from config.dictionaries.models import Country, CountryState

    call_command("seed_dictionaries")
    countries = Country.objects.count()
    states = CountryState.objects.count()

    call_command("seed_dictionaries")

    assert Country.objects.count() == countries
    assert CountryState.objects.count() == states
    assert Country.objects.filter(code="SK").count() == 1


def test_seed_dictionaries_restores_renamed_records():
    from config.dictionaries.models import Country

    call_command("seed_dictionaries")
    Country.objects.filter(code="DE").update(name="Deutschland")

    call_command("seed_dictionaries")

    assert Country.objects.get(code="DE").name == "Germany"
