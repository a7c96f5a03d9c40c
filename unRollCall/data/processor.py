"""
Data processing orchestrator.

This module runs the registered dataset processors in dependency order:
the country code table first, then the raw votes that need it, then the
resolution descriptions.
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..processors.country_processor import CountryCodeProcessor
from ..processors.vote_processor import VoteProcessor
from ..processors.description_processor import DescriptionProcessor
from ..core.abstractions import DatasetProcessor
from ..core.models import ValidationReport


class DataProcessor:
    """Orchestrates processing of individual datasets."""

    def __init__(self, config: Dict[str, Any], logger: logging.Logger):
        self.config = config
        self.logger = logger

        # Registry of dataset processors
        self._dataset_processors: Dict[str, DatasetProcessor] = {}
        self._register_default_processors()

    def _register_default_processors(self):
        """Register default dataset processors."""
        for processor in (CountryCodeProcessor(self.logger),
                          VoteProcessor(self.logger),
                          DescriptionProcessor(self.logger)):
            self._dataset_processors[processor.get_dataset_type()] = processor

    def register_processor(self, processor: DatasetProcessor):
        """Register a new dataset processor."""
        self._dataset_processors[processor.get_dataset_type()] = processor

    def process_dataset(self, dataset_type: str, path: Path, **kwargs) -> Dict[str, Any]:
        """Read and process one dataset from its local file."""
        if dataset_type not in self._dataset_processors:
            raise ValueError(f"No processor registered for dataset type: {dataset_type}")

        processor = self._dataset_processors[dataset_type]
        source_config = self.config['data_sources'].get(dataset_type, {})
        rows = processor.read(Path(path), source_config)
        return processor.process(rows, **kwargs)

    def process_all(self, paths: Dict[str, Path], report: Optional[ValidationReport] = None) -> Dict[str, Any]:
        """Process the three sources, returning country_codes, vote_records, resolution_votes and descriptions."""
        skip_malformed = self.config.get('processing', {}).get('skip_malformed_records', False)
        processed: Dict[str, Any] = {}

        processed.update(self.process_dataset('country_codes', paths['country_codes']))
        processed.update(self.process_dataset(
            'votes', paths['votes'],
            country_codes=processed['country_codes'],
            skip_malformed=skip_malformed,
            report=report,
        ))
        processed.update(self.process_dataset('descriptions', paths['descriptions']))

        return processed
