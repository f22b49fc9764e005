# -*- coding: utf-8 -*-
# config/dictionaries/models.py

from django.db import models


class Country(models.Model):
    code = models.CharField(max_length=2, unique=True)  # ISO 3166-1 alpha-2
    name = models.CharField(max_length=128)

    class Meta:
        ordering = ["code"]
        verbose_name_plural = "countries"

    def __str__(self) -> str:
        return self.code


class CountryState(models.Model):
    country = models.ForeignKey(
        Country,
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="states",
    )
    # denormalized so states can be filtered without a join
    country_code = models.CharField(max_length=2, db_index=True)
    code = models.CharField(max_length=16)
    name = models.CharField(max_length=128)

    class Meta:
        ordering = ["country_code", "code"]
        constraints = [
            models.UniqueConstraint(fields=["country_code", "code"], name="uniq_state_code_per_country"),
        ]

    def __str__(self) -> str:
        return f"{self.country_code}-{self.code}"

    def to_dict(self) -> dict:
        return {
            "id": self.pk,
            "country_id": self.country_id,
            "country_code": self.country_code,
            "code": self.code,
            "name": self.name,
        }
