from django.urls import path

from .api_views import CountryListView, CountryStateListView, CurrencyListView, GroupedStatesView


urlpatterns = [
    path("currencies/", CurrencyListView.as_view(), name="currencies-list"),
    path("countries/", CountryListView.as_view(), name="countries-list"),
    path("countries/<str:country_code>/states/", CountryStateListView.as_view(), name="country-states-list"),
    path("states/grouped/", GroupedStatesView.as_view(), name="states-grouped"),
]
