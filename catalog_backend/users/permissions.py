# users/permissions.py

from __future__ import annotations

from rest_framework.permissions import AllowAny, IsAuthenticated


class PublicAccessMixin:
    """
    Split one view between public reads and token-gated writes.

    - public_actions: viewset actions open to anyone (e.g. {"list"})
    - public_methods: HTTP methods open to anyone on plain APIViews (e.g. {"GET"})

    Public requests skip authentication entirely, so a stale or broken
    Authorization header never breaks the storefront. Everything else goes
    through the default bearer authenticator and requires IsAuthenticated.
    """

    public_actions: set[str] = set()
    public_methods: set[str] = set()

    def initialize_request(self, request, *args, **kwargs):
        # get_authenticators() runs inside initialize_request, before DRF sets self.action
        method = (request.method or "").upper()
        action_map = getattr(self, "action_map", None) or {}
        self.public_request = (
            method in self.public_methods
            or action_map.get(method.lower()) in self.public_actions
        )
        return super().initialize_request(request, *args, **kwargs)

    def get_authenticators(self):
        if getattr(self, "public_request", False):
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if getattr(self, "public_request", False):
            return [AllowAny()]
        return [IsAuthenticated()]
