# products/views/stats.py

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from products.serializers import CatalogStatsSerializer
from products.services import catalog_stats


class CatalogStatsView(APIView):
    """
    GET /api/stats

    Dashboard totals (admin only).
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: CatalogStatsSerializer})
    def get(self, request):
        return Response(catalog_stats())
