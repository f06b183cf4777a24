# store/views/settings.py

"""
STORE SETTINGS

- GET  /api/settings   public, {key: value} for every stored setting
- POST /api/settings   admin, bulk upsert of a flat JSON object (all or nothing)
"""

from drf_spectacular.utils import OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from store.services import get_settings_map, upsert_settings
from users.permissions import PublicAccessMixin


class StoreSettingsView(PublicAccessMixin, APIView):
    public_methods = {"GET", "HEAD"}
    parser_classes = [JSONParser]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return Response(get_settings_map())

    @extend_schema(
        request=OpenApiTypes.OBJECT,
        responses={
            200: OpenApiResponse(description='{"success": true}'),
            400: OpenApiResponse(description="Payload is not a flat object of scalars"),
        },
    )
    def post(self, request):
        upsert_settings(request.data)
        return Response({"success": True})
