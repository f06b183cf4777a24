# store/urls.py

from django.urls import path

from store.views import StoreSettingsView

urlpatterns = [
    path("settings", StoreSettingsView.as_view(), name="store-settings"),
]
