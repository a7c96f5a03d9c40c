"""
Harvard Dataverse file fetcher.

This module handles downloading the raw voting data files to the local
data directory.
"""

import logging
import requests
from pathlib import Path
from typing import Dict, Any

from ..core.abstractions import DatasetFetcher
from ..core.exceptions import FetchError

CHUNK_SIZE = 1 << 16


class DataverseFetcher(DatasetFetcher):
    """Downloads one data file from its source URL."""

    def __init__(self, logger: logging.Logger, dataset_type: str = 'dataverse', timeout: float = 60):
        self.logger = logger
        self.dataset_type = dataset_type
        self.timeout = timeout

    def fetch(self, source_config: Dict[str, Any], destination: Path) -> Path:
        """Download source_config['url'] to destination."""
        url = source_config['url']
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)

        self.logger.info(f"Fetching {self.dataset_type} from {url}")
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(destination, 'wb') as out:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        out.write(chunk)
        except requests.RequestException as e:
            self.logger.error(f"Failed to fetch {self.dataset_type}: {e}")
            destination.unlink(missing_ok=True)
            raise FetchError(f"Failed to fetch {url}") from e

        self.logger.info(f"Saved {self.dataset_type} to {destination} ({destination.stat().st_size} bytes)")
        return destination

    def get_dataset_type(self) -> str:
        return self.dataset_type
