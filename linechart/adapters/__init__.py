from .normalize import normalize_items

__all__ = ["normalize_items"]
