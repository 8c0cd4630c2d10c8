from .search import DropdownSearchView

__all__ = ["DropdownSearchView"]
