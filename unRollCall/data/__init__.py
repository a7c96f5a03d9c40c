"""
Package initialization for data orchestration modules.
"""

from .fetcher import DataFetcher
from .processor import DataProcessor
from .merger import DataMerger
from .assembler import OutputAssembler
from .repository import DataRepository

__all__ = [
    'DataFetcher',
    'DataProcessor',
    'DataMerger',
    'OutputAssembler',
    'DataRepository'
]
