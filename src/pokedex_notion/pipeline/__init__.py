"""Pipeline modules for orchestrating the import."""

from . import importer, stages, page_builder, batch, rate_limiter

__all__ = ["importer", "stages", "page_builder", "batch", "rate_limiter"]
