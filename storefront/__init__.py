"""Storefront catalog browser: search, facet, sort and page a static product dataset."""

__version__ = "1.0.0"
