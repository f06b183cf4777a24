# products/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- One serializer for the public storefront list and the admin writes.
- Output carries both category_id and the joined category name ("category").
- Writes are full replacements: optional fields left out of a PUT are reset.
"""

import math

from rest_framework import serializers

from products.models import Category, Product

# largest values the integer columns hold (PositiveIntegerField / BigAutoField ids)
MAX_STOCK = 2_147_483_647
MAX_ID = 2**63 - 1


class ProductSerializer(serializers.ModelSerializer):
    """
    GUARANTEES:
    - price is a finite number >= 0
    - stock is an integer in the column range, >= 0 (null/omitted -> 0)
    - category_id is a 64-bit integer or null; it is not checked
      against categories
    """

    price = serializers.FloatField(min_value=0)
    stock = serializers.IntegerField(
        min_value=0, max_value=MAX_STOCK, required=False, allow_null=True
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    category_id = serializers.IntegerField(
        min_value=-MAX_ID - 1, max_value=MAX_ID, required=False, allow_null=True
    )

    category = serializers.SerializerMethodField(read_only=True)

    # values written when a field is omitted (or sent as null)
    REPLACE_DEFAULTS = {
        "stock": 0,
        "description": "",
        "image": "",
        "category_id": None,
    }

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "stock",
            "description",
            "category_id",
            "image",
            "category",
        ]
        read_only_fields = ["id", "category"]

    def validate_price(self, value):
        if not math.isfinite(value):
            raise serializers.ValidationError("A finite number is required.")
        return value

    def validate(self, attrs):
        for field, default in self.REPLACE_DEFAULTS.items():
            if attrs.get(field) is None:
                attrs[field] = default
        return attrs

    def get_category(self, obj):
        # list/retrieve querysets annotate the joined name
        if hasattr(obj, "category_name"):
            return obj.category_name
        if obj.category_id is None:
            return None
        return (
            Category.objects.filter(pk=obj.category_id)
            .values_list("name", flat=True)
            .first()
        )
