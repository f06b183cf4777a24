from .settings import StoreSettingsView

__all__ = ["StoreSettingsView"]
