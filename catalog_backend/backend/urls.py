# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/ (no trailing slashes).

Public (AllowAny, no authentication):
- POST /api/login
- GET  /api/products, /api/categories, /api/banners, /api/settings
- GET  /api/health

Everything else under /api/ requires a bearer token.

Outside /api/:
- /uploads/<name>  read-only view of the managed uploads directory
- any other path   falls through to the single-page application shell
"""

from __future__ import annotations

from pathlib import Path

from django.conf import settings
from django.db import connections
from django.db.utils import OperationalError
from django.http import FileResponse, Http404
from django.urls import include, path, re_path
from django.views.static import serve
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Catalog Backend API is running",
            "auth": {
                "login": "/api/login",
                "me": "/api/me",
            },
            "docs": {
                "swagger": "/api/docs",
                "schema": "/api/schema",
            },
            "modules": {
                "products": "/api/products",
                "categories": "/api/categories",
                "banners": "/api/banners",
                "settings": "/api/settings",
                "stats": "/api/stats",
                "upload": "/api/upload",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        conn = connections["default"]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
        return Response({"status": "ok", "db": "ok"})
    except OperationalError:
        return Response({"status": "degraded", "db": "down"}, status=503)


# ------------------ UPLOADS + SPA SHELL ------------------
def uploaded_file(request, path):
    return serve(request, path, document_root=settings.UPLOADS_DIR)


def spa_shell(request, path=""):
    """
    Serve built frontend assets when they exist; every other route gets index.html
    so client-side routing can take over.
    """
    dist = Path(settings.FRONTEND_DIST_DIR)

    if path:
        try:
            return serve(request, path, document_root=str(dist))
        except Http404:
            pass

    index = dist / "index.html"
    if not index.is_file():
        raise Http404("Frontend build not found")

    return FileResponse(open(index, "rb"), content_type="text/html")


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health check / root
    path("", api_root, name="api-root"),
    path("health", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema", SpectacularAPIView.as_view(), name="schema"),
    path("docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Auth
    path("", include("users.urls")),
    # Catalog
    path("", include("products.urls")),
    path("", include("banners.urls")),
    path("", include("store.urls")),
    path("", include("uploads.urls")),
]

urlpatterns = [
    path("api/", include(api_urlpatterns)),
    re_path(r"^uploads/(?P<path>.+)$", uploaded_file, name="uploaded-file"),
    re_path(r"^(?!api/)(?P<path>.*)$", spa_shell, name="spa-shell"),
]
