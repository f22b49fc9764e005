import pytest
from django.db import IntegrityError



pytestmark = pytest.mark.django_db


def test_country_str_returns_code():
    from config.dictionaries.models import Country

    sk = Country.objects.create(code="SK", name="Slovakia")
    assert str(sk) == "SK"


def test_country_code_unique():
    from config.dictionaries.models import Country

    Country.objects.create(code="SK", name="Slovakia")

    with pytest.raises(IntegrityError):
        Country.objects.create(code="SK", name="Slovak Republic")


def test_state_code_unique_per_country(country_factory, state_factory):
    from config.dictionaries.models import CountryState

    us = country_factory(code="US", name="United States")
    state_factory(us, "CA", "California")

    with pytest.raises(IntegrityError):
        CountryState.objects.create(country=us, country_code="US", code="CA", name="Calif.")


def test_same_state_code_allowed_in_other_country(country_factory, state_factory):
    us = country_factory(code="US", name="United States")
    de = country_factory(code="DE", name="Germany")

    state_factory(us, "BY", "Not Bavaria")
    state = state_factory(de, "BY", "Bayern")

    assert str(state) == "DE-BY"


def test_state_to_dict(country_factory, state_factory):
    us = country_factory(code="US", name="United States")
    state = state_factory(us, "NY", "New York")

    assert state.to_dict() == {
        "id": state.pk,
        "country_id": us.pk,
        "country_code": "US",
        "code": "NY",
        "name": "New York",
    }
