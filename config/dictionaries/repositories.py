# config/dictionaries/repositories.py
from __future__ import annotations

from core.repositories import ModelRepository

from .models import Country, CountryState


class CountryRepository(ModelRepository):
    model = Country


class CountryStateRepository(ModelRepository):
    model = CountryState

    def query(self):
        return super().query().select_related("country")
