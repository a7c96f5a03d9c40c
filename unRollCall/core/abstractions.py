"""
Core abstractions for the UN roll-call pipeline.

This module defines the abstract base classes that all dataset-specific
fetchers and processors must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, List


class DatasetFetcher(ABC):
    """Abstract base class for dataset-specific fetchers."""

    @abstractmethod
    def fetch(self, source_config: Dict[str, Any], destination: Path) -> Path:
        """Retrieve the raw file for this dataset and store it at destination."""
        pass

    @abstractmethod
    def get_dataset_type(self) -> str:
        """Return the dataset type identifier (e.g., 'votes', 'descriptions')."""
        pass


class DatasetProcessor(ABC):
    """Abstract base class for dataset-specific processors."""

    @abstractmethod
    def read(self, path: Path, source_config: Dict[str, Any]) -> List[List[Any]]:
        """Read the raw rows of this dataset from a local file."""
        pass

    @abstractmethod
    def process(self, rows: List[List[Any]], **kwargs) -> Dict[str, Any]:
        """Process raw rows into typed records."""
        pass

    @abstractmethod
    def get_dataset_type(self) -> str:
        """Return the dataset type this processor handles."""
        pass
