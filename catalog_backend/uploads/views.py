# uploads/views.py

"""
UPLOAD / DOWNLOAD (admin only)

- POST /api/upload                 multipart field "image" -> {"imageUrl": "/uploads/<name>"}
- GET  /api/download/<filename>    file as an attachment, 404 when absent
"""

from django.http import FileResponse
from drf_spectacular.utils import OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from uploads.services import resolve_download, save_upload


class UploadView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        request={
            "multipart/form-data": {
                "type": "object",
                "properties": {"image": {"type": "string", "format": "binary"}},
            }
        },
        responses={
            201: OpenApiResponse(description='{"imageUrl": "/uploads/<name>"}'),
            400: OpenApiResponse(description="No file uploaded"),
        },
    )
    def post(self, request):
        image_url = save_upload(request.FILES.get("image"))
        return Response({"imageUrl": image_url}, status=status.HTTP_201_CREATED)


class DownloadView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={
            (200, "application/octet-stream"): OpenApiTypes.BINARY,
            404: OpenApiResponse(description="File not found"),
        }
    )
    def get(self, request, filename):
        path = resolve_download(filename)
        return FileResponse(open(path, "rb"), as_attachment=True)
