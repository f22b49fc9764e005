# core/repositories.py
from __future__ import annotations

from typing import Any, Iterable, Protocol

from django.db import models


class FindsByField(Protocol):
    """
    Read port over a table of reference records.

    Implementations return model instances (or anything shaped like them);
    "not found" is None for single lookups and an empty iterable otherwise.
    """

    def find_one_by_field(self, field: str, value: Any) -> Any | None:
        ...

    def find_by_field(self, field: str, value: Any) -> Iterable[Any]:
        ...

    def find_where(self, **conditions: Any) -> Iterable[Any]:
        ...


class FindsAll(Protocol):
    def all(self) -> Iterable[Any]:
        ...


class ModelRepository:
    """
    ORM-backed implementation of FindsByField + FindsAll for a single model.
    """

    model: type[models.Model]

    def query(self) -> models.QuerySet:
        return self.model.objects.all()

    def all(self) -> models.QuerySet:
        return self.query()

    def find_one_by_field(self, field: str, value: Any):
        return self.query().filter(**{field: value}).first()

    def find_by_field(self, field: str, value: Any) -> models.QuerySet:
        return self.query().filter(**{field: value})

    def find_where(self, **conditions: Any) -> models.QuerySet:
        return self.query().filter(**conditions)
