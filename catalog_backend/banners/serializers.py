# banners/serializers.py

from rest_framework import serializers

from banners.models import Banner


class BannerSerializer(serializers.ModelSerializer):
    """
    Rules:
    - create: active defaults to true when omitted
    - replace (PUT): active is coerced to a boolean; omitted means false,
      the way the dashboard toggle submits an unchecked box
    """

    title = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    subtitle = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    image = serializers.CharField(max_length=500)
    active = serializers.BooleanField(required=False)

    class Meta:
        model = Banner
        fields = ["id", "title", "subtitle", "image", "active"]
        read_only_fields = ["id"]

    def validate(self, attrs):
        for field in ("title", "subtitle"):
            if attrs.get(field) is None:
                attrs[field] = ""
        if "active" not in attrs:
            attrs["active"] = self.instance is None
        return attrs
