from showcase.services.results import Access

__all__ = ["Access"]
