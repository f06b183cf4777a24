# products/views/category.py

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from products.models import Category
from products.serializers import CategorySerializer
from products.services import create_category, delete_category, update_category
from users.permissions import PublicAccessMixin


class CategoryViewSet(PublicAccessMixin, viewsets.ModelViewSet):
    """
    Category endpoints.

    - Anyone can list categories (storefront filters)
    - Admins create/rename/delete; delete is refused while products reference it
    """

    queryset = Category.objects.all().order_by("id")
    serializer_class = CategorySerializer
    public_actions = {"list", "retrieve"}
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    @extend_schema(
        responses={
            201: OpenApiResponse(description='{"id": <int>}'),
            400: OpenApiResponse(description="Duplicate or invalid name"),
        }
    )
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category = create_category(name=serializer.validated_data["name"])
        return Response({"id": category.id}, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: OpenApiResponse(description='{"success": true}')})
    def update(self, request, *args, **kwargs):
        category = self.get_object()
        serializer = self.get_serializer(category, data=request.data)
        serializer.is_valid(raise_exception=True)
        update_category(category, name=serializer.validated_data["name"])
        return Response({"success": True})

    @extend_schema(
        responses={
            200: OpenApiResponse(description='{"success": true}'),
            400: OpenApiResponse(description="Category still has products"),
        }
    )
    def destroy(self, request, *args, **kwargs):
        delete_category(self.get_object())
        return Response({"success": True})
