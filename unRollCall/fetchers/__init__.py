"""Fetchers module exports."""

from .dataverse_fetcher import DataverseFetcher

__all__ = ['DataverseFetcher']
