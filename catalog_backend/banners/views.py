# banners/views.py

"""
BANNER ENDPOINTS

Public:
- GET /api/banners              active banners only

Admin (bearer token):
- GET /api/admin/banners        every banner, active or not
- POST /api/banners             -> {"id"}
- PUT /api/banners/<id>         -> {"success": true}
- DELETE /api/banners/<id>      -> {"success": true}
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from banners.models import Banner
from banners.serializers import BannerSerializer
from users.permissions import PublicAccessMixin

logger = logging.getLogger(__name__)


class BannerViewSet(PublicAccessMixin, viewsets.ModelViewSet):
    serializer_class = BannerSerializer
    public_actions = {"list"}
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_queryset(self):
        qs = Banner.objects.all().order_by("id")
        if self.action == "list":
            return qs.filter(active=True)
        return qs

    @extend_schema(responses={201: OpenApiResponse(description='{"id": <int>}')})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        banner = serializer.save()

        logger.info("Banner created", extra={"banner_id": banner.id})
        return Response({"id": banner.id}, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: OpenApiResponse(description='{"success": true}')})
    def update(self, request, *args, **kwargs):
        banner = self.get_object()
        serializer = self.get_serializer(banner, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"success": True})

    @extend_schema(responses={200: OpenApiResponse(description='{"success": true}')})
    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({"success": True})


class AdminBannerListView(ListAPIView):
    """GET /api/admin/banners"""

    queryset = Banner.objects.all().order_by("id")
    serializer_class = BannerSerializer
    permission_classes = [IsAuthenticated]
    filter_backends = []
