# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Public product browsing for the storefront (list/retrieve, no token needed)
- Admin product management (create/replace/delete, bearer token)

Response shapes:
- list/retrieve: product fields + "category" (joined name or null)
- create: {"id": <new id>} (201)
- update/delete: {"success": true}
"""

import logging

from django.db.models import F
from django_filters import rest_framework as filters
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from products.models import Product
from products.serializers import ProductSerializer
from users.permissions import PublicAccessMixin

logger = logging.getLogger(__name__)


class ProductFilter(filters.FilterSet):
    # raw id match; dangling category ids stay filterable
    category = filters.NumberFilter(field_name="category_id")

    class Meta:
        model = Product
        fields = ["category"]


class ProductViewSet(PublicAccessMixin, viewsets.ModelViewSet):
    """
    Public:
    - GET /api/products[?category=<id>]
    - GET /api/products/<id>

    Admin:
    - POST /api/products
    - PUT /api/products/<id>   (full replace)
    - DELETE /api/products/<id>
    """

    serializer_class = ProductSerializer
    filterset_class = ProductFilter
    public_actions = {"list", "retrieve"}
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_queryset(self):
        # LEFT JOIN: products without a (live) category keep category_name=None
        return Product.objects.annotate(category_name=F("category__name")).order_by("id")

    @extend_schema(responses={201: OpenApiResponse(description='{"id": <int>}')})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info("Product created", extra={"product_id": product.id})
        return Response({"id": product.id}, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: OpenApiResponse(description='{"success": true}')})
    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        logger.info("Product updated", extra={"product_id": instance.id})
        return Response({"success": True})

    @extend_schema(responses={200: OpenApiResponse(description='{"success": true}')})
    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        product_id = instance.id
        instance.delete()

        logger.info("Product deleted", extra={"product_id": product_id})
        return Response({"success": True})
