from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.bootstrap import get_core


class HealthView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({"status": "ok"})


class VersionView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({"version": get_core().version()})


class LocaleListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(get_core().locales())


class TimezoneListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(get_core().timezones())
