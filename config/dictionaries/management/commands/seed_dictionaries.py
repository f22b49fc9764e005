import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from config.dictionaries.models import Country, CountryState
from config.dictionaries.seed_data import COUNTRIES

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Seed base dictionaries (countries, states). Safe to run multiple times."

    @transaction.atomic
    def handle(self, *args, **options):
        states_total = 0

        for code, name, states in COUNTRIES:
            country, _ = Country.objects.update_or_create(code=code, defaults={"name": name})

            for state_code, state_name in states:
                CountryState.objects.update_or_create(
                    country_code=code,
                    code=state_code,
                    defaults={"name": state_name, "country": country},
                )
            states_total += len(states)

        logger.info("Seeded %s countries and %s states", len(COUNTRIES), states_total)
        self.stdout.write(self.style.SUCCESS("Dictionaries seeded."))
