"""
Data repository driving the roll-call merge.

This module loads the configuration, sets up logging, makes sure the
source files are available and runs the processing pipeline through to
the merged output file.
"""

import copy
import logging
import sys
import yaml
import requests
from pathlib import Path
from typing import Any, Dict, Optional

from .fetcher import DataFetcher
from .processor import DataProcessor
from .merger import DataMerger
from .assembler import OutputAssembler
from ..core.exceptions import FetchError
from ..core.models import ValidationReport

DEFAULT_CONFIG: Dict[str, Any] = {
    'logs': True,
    'debug': False,
    'paths': {
        'data': 'data',
        'logs': 'logs',
        'output': 'roll-calls.tab',
    },
    'data_sources': {
        'country_codes': {
            'filename': 'idealpoints.tab',
            'url': 'https://dataverse.harvard.edu/api/access/datafile/2699454?format=tab',
            'encoding': 'utf-8',
        },
        'votes': {
            'filename': 'rawvotingdata13.tab',
            'url': 'https://dataverse.harvard.edu/api/access/datafile/2699456?format=tab',
            'encoding': 'utf-8',
        },
        'descriptions': {
            'filename': 'descriptions.xls',
            'url': 'https://dataverse.harvard.edu/api/access/datafile/2696465',
            'sheet': 'descriptions',
        },
    },
    'processing': {
        'download': True,
        'force_download': False,
        'check_urls': False,
        'skip_malformed_records': False,
    },
}


def _merge_config(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


class DataRepository:
    """Runs the roll-call pipeline from source files to the merged table."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
        self.config_path = config_path

        # Load configuration
        self._load_config(config)

        # Initialize Logging
        self._setup_logging()

        self.logger.info("Initializing UN roll-call repository")

    @property
    def output_path(self) -> Path:
        return Path(self.config['paths']['output'])

    def _load_config(self, overrides: Optional[Dict[str, Any]] = None):
        """Load configuration from YAML file on top of the defaults."""
        file_config = {}
        if self.config_path is not None:
            with open(self.config_path, 'r') as file:
                file_config = yaml.safe_load(file) or {}

        self.config = _merge_config(_merge_config(DEFAULT_CONFIG, file_config), overrides or {})

    def _setup_logging(self):
        """Setup logging configuration with file and console handlers."""
        # Create logger
        self.logger = logging.getLogger('UNRollCall')

        if not self.config['logs']:
            self.logger.disabled = True
            return

        self.logger.disabled = False
        self.logger.setLevel(logging.DEBUG if self.config['debug'] else logging.INFO)

        # Clear any existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        # Create formatters
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(levelname)s - %(message)s'
        )

        log_dir = Path(self.config['paths']['logs'])
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / 'un_roll_call.log'

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        self.logger.addHandler(file_handler)

        # Console handler
        if self.config['debug']:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(simple_formatter)
            self.logger.addHandler(console_handler)

        self.logger.info("Logging setup complete.")

    def _check_URLS(self) -> bool:
        """HEAD-check the download URL of every configured source."""
        all_valid = True
        for dataset_type, source in self.config['data_sources'].items():
            url = source.get('url')
            if not url:
                continue
            try:
                response = requests.head(url, allow_redirects=True, timeout=10)
            except requests.RequestException as e:
                self.logger.error(f"Cannot reach {dataset_type} source {url}: {e}")
                all_valid = False
                continue

            if response.status_code != 200:
                self.logger.error(f"{dataset_type} source answered {response.status_code}: {url}")
                all_valid = False
            else:
                self.logger.info(f"{dataset_type} source available: {url}")
        return all_valid

    def _source_files(self) -> Dict[str, Path]:
        """Local paths of the source files, downloading them if configured."""
        processing = self.config['processing']
        fetcher = DataFetcher(self.config, self.logger)

        if processing['check_urls'] and not self._check_URLS():
            self.logger.error("Source check failed, the Dataverse file ids in data_sources may be out of date.")
            raise FetchError("Unreachable source URLs in data_sources.")

        if processing['download']:
            return fetcher.fetch_all(force=processing['force_download'])

        return {dataset_type: fetcher.local_path(dataset_type) for dataset_type in self.config['data_sources']}

    def merge_roll_calls(self) -> ValidationReport:
        """
        Build the merged roll-call table and write it to the output path.

        Nothing is written unless every stage succeeds. Non-fatal issues
        are logged and returned in the report.
        """
        report = ValidationReport()
        paths = self._source_files()

        # Process data
        processor = DataProcessor(self.config, self.logger)
        processed = processor.process_all(paths, report)

        # Join descriptions and check tallies
        merger = DataMerger(self.logger)
        annotated = merger.annotate(processed['resolution_votes'], processed['descriptions'], report)

        OutputAssembler(self.logger).write(annotated, self.output_path)
        report.log_summary(self.logger)

        self.logger.info(f"Roll-call table written to {self.output_path}")
        return report
