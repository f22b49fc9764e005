from django.urls import path

from .api_views import ConfigDataView


urlpatterns = [
    path("<str:code>/", ConfigDataView.as_view(), name="config-data"),
]
