from rest_framework import serializers

from .models import Country, CountryState


class CountrySerializer(serializers.ModelSerializer):
    class Meta:
        model = Country
        fields = ("code", "name")


class CountryStateSerializer(serializers.ModelSerializer):
    class Meta:
        model = CountryState
        fields = ("country_code", "code", "name")


class CurrencyFormatSerializer(serializers.Serializer):
    code = serializers.CharField()
    symbol = serializers.CharField()
    decimal_places = serializers.IntegerField()
    symbol_after = serializers.BooleanField()
