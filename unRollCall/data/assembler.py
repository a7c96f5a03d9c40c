"""
Output assembler for the merged roll-call table.

This module lays out one row per resolution and one column per country
and writes the result as a tab-delimited file.
"""

import logging
import pandas as pd
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from ..core.models import AnnotatedResolution, ResolutionVotes

HEADER_PREFIX = ['session', 'rcid', 'unres']


def compute_country_headers(resolutions: Iterable[ResolutionVotes]) -> List[str]:
    """Sorted union of every country that voted on any resolution."""
    countries = set()
    for resolution in resolutions:
        countries.update(resolution.votes.keys())
    return sorted(countries)


def render_rows(annotated: Iterable[AnnotatedResolution], headers: Sequence[str]) -> List[List[str]]:
    """
    Render resolutions as rows of strings like
        ['5', '22', 'R/5/22', '3', '1', '', ...]
    with one vote code per country in header order, empty if no vote.
    """
    rows = []
    for resolution in annotated:
        session, rcid = resolution.resolution
        votes = resolution.votes.votes
        rows.append(
            [str(session), str(rcid), resolution.unres]
            + [str(votes[country].code) if country in votes else '' for country in headers]
        )
    return rows


def write_file(path: Union[str, Path], header: Sequence[str], rows: Sequence[Sequence[str]]) -> Path:
    """
    Write header and rows as a tab-delimited file, replacing any old one.

    The table goes to a temporary file next to path first, so a failed
    write leaves an existing output untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + '.tmp')

    df = pd.DataFrame(list(rows), columns=list(header), dtype=str)
    try:
        df.to_csv(tmp_path, sep='\t', index=False, lineterminator='\n')
        tmp_path.replace(path)
    finally:
        tmp_path.unlink(missing_ok=True)
    return path


class OutputAssembler:
    """Builds and writes the roll-call table."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def write(self, annotated: List[AnnotatedResolution], path: Union[str, Path]) -> Path:
        headers = compute_country_headers(resolution.votes for resolution in annotated)
        rows = render_rows(annotated, headers)

        self.logger.info(f"Writing {len(rows)} resolutions x {len(headers)} countries to {path}")
        return write_file(path, HEADER_PREFIX + headers, rows)
