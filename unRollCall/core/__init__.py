"""Core module exports."""

from .abstractions import DatasetFetcher, DatasetProcessor
from .exceptions import ParseError, FetchError
from .models import (
    VoteValue,
    VOTE_CODES,
    vote_value,
    Country,
    ResolutionKey,
    RawVoteRecord,
    VoteRecord,
    ResolutionVotes,
    ResolutionDescription,
    AnnotatedResolution,
    ValidationReport,
)

__all__ = [
    'DatasetFetcher', 'DatasetProcessor',
    'ParseError', 'FetchError',
    'VoteValue', 'VOTE_CODES', 'vote_value',
    'Country', 'ResolutionKey', 'RawVoteRecord', 'VoteRecord',
    'ResolutionVotes', 'ResolutionDescription', 'AnnotatedResolution',
    'ValidationReport',
]
