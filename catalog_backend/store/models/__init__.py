from .setting import StoreSetting

__all__ = ["StoreSetting"]
