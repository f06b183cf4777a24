# uploads/urls.py

from django.urls import path

from uploads.views import DownloadView, UploadView

urlpatterns = [
    path("upload", UploadView.as_view(), name="upload"),
    path("download/<str:filename>", DownloadView.as_view(), name="download"),
]
