# products/serializers/stats.py

from rest_framework import serializers


class CategoryCountSerializer(serializers.Serializer):
    name = serializers.CharField()
    count = serializers.IntegerField()


class CatalogStatsSerializer(serializers.Serializer):
    totalProducts = serializers.IntegerField()
    totalCategories = serializers.IntegerField()
    avgPrice = serializers.FloatField()
    stockValue = serializers.FloatField()
    categoryStats = CategoryCountSerializer(many=True)
