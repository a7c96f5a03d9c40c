"""Processors module exports."""

from .country_processor import CountryCodeProcessor
from .vote_processor import VoteProcessor
from .description_processor import DescriptionProcessor

__all__ = ['CountryCodeProcessor', 'VoteProcessor', 'DescriptionProcessor']
