from rest_framework.generics import ListAPIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.bootstrap import get_core
from core.currency import CURRENCIES

from .serializers import CountrySerializer, CountryStateSerializer, CurrencyFormatSerializer


class CurrencyListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        formats = sorted(CURRENCIES.values(), key=lambda fmt: fmt.code)
        return Response(CurrencyFormatSerializer(formats, many=True).data)


class CountryListView(ListAPIView):
    permission_classes = [AllowAny]
    serializer_class = CountrySerializer

    def get_queryset(self):
        return get_core().countries()


class CountryStateListView(ListAPIView):
    permission_classes = [AllowAny]
    serializer_class = CountryStateSerializer

    def get_queryset(self):
        # unknown country -> empty list, not 404
        return get_core().states(self.kwargs["country_code"].upper())


class GroupedStatesView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(get_core().grouped_states_by_countries())
