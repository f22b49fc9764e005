from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from core.bootstrap import get_core


class ConfigDataView(APIView):
    permission_classes = [IsAdminUser]

    def get(self, request, code: str):
        core = get_core()
        field = core.get_config_field(code)
        value = core.get_config_data(code)

        if field is None and value is None:
            raise NotFound(f'Unknown config field "{code}"')

        return Response({"code": code, "value": value, "field": field})
