"""
UN Roll Call - merge pipeline for UN General Assembly roll-call votes.

This package downloads the raw voting data, the country codes of the ideal
points data set and the resolution descriptions, and merges them into one
table with a row per resolution and a column per country.
"""

# Core abstractions
from .core.abstractions import DatasetFetcher, DatasetProcessor
from .core.exceptions import ParseError, FetchError
from .core.models import VoteValue, VOTE_CODES, ValidationReport

# Fetchers
from .fetchers.dataverse_fetcher import DataverseFetcher

# Processors
from .processors.country_processor import CountryCodeProcessor
from .processors.vote_processor import VoteProcessor
from .processors.description_processor import DescriptionProcessor

# Data orchestration
from .data.fetcher import DataFetcher
from .data.processor import DataProcessor
from .data.merger import DataMerger
from .data.assembler import OutputAssembler
from .data.repository import DataRepository

__version__ = "1.0.0"

# Public API - main classes that users will interact with
__all__ = [
    # Main entry point
    'DataRepository',
    'DataFetcher',
    'DataProcessor',
    'DataMerger',
    'OutputAssembler',

    # Abstract base classes (for extending)
    'DatasetFetcher',
    'DatasetProcessor',

    # Concrete implementations
    'DataverseFetcher',
    'CountryCodeProcessor',
    'VoteProcessor',
    'DescriptionProcessor',

    # Records and errors
    'VoteValue',
    'VOTE_CODES',
    'ValidationReport',
    'ParseError',
    'FetchError',
]
