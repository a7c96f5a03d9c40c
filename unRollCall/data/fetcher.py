"""
Data fetching orchestrator.

This module makes sure every configured source file is present in the
local data directory, downloading the missing ones with the registered
fetchers.
"""

import logging
from pathlib import Path
from typing import Dict, Any

from ..fetchers.dataverse_fetcher import DataverseFetcher
from ..core.abstractions import DatasetFetcher


class DataFetcher:
    """Orchestrates fetching of the configured source files."""

    def __init__(self, config: Dict[str, Any], logger: logging.Logger):
        self.config = config
        self.logger = logger
        self.data_path = Path(config['paths']['data'])

        # Registry of dataset fetchers
        self._dataset_fetchers: Dict[str, DatasetFetcher] = {}
        self._register_default_fetchers()

    def _register_default_fetchers(self):
        """Register a Dataverse fetcher for every configured source."""
        for dataset_type in self.config['data_sources']:
            self._dataset_fetchers[dataset_type] = DataverseFetcher(self.logger, dataset_type)

    def register_fetcher(self, fetcher: DatasetFetcher):
        """Register a new dataset fetcher."""
        self._dataset_fetchers[fetcher.get_dataset_type()] = fetcher

    def local_path(self, dataset_type: str) -> Path:
        """Path of the local copy of a configured source."""
        return self.data_path / self.config['data_sources'][dataset_type]['filename']

    def fetch_all(self, force: bool = False) -> Dict[str, Path]:
        """Download every configured source not yet present locally."""
        paths = {}

        for dataset_type, source_config in self.config['data_sources'].items():
            destination = self.local_path(dataset_type)

            if destination.exists() and not force:
                self.logger.info(f"Using cached {dataset_type} file {destination}")
                paths[dataset_type] = destination
                continue

            if dataset_type in self._dataset_fetchers:
                fetcher = self._dataset_fetchers[dataset_type]
                paths[dataset_type] = fetcher.fetch(source_config, destination)
            else:
                self.logger.warning(f"No fetcher registered for dataset type: {dataset_type}")

        return paths
