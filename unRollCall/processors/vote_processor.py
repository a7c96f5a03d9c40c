"""
Raw roll-call vote processor.

This module turns the raw voting file, one row per country per roll call,
into one vote map per resolution keyed by country abbreviation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ..core.abstractions import DatasetProcessor
from ..core.exceptions import ParseError
from ..core.models import (
    Country,
    RawVoteRecord,
    ResolutionKey,
    ResolutionVotes,
    ValidationReport,
    VoteRecord,
    VoteValue,
    vote_value,
)
from ..core.parsing import parse_code_number
from ..readers.tabular import count_replaced_cells, read_delimited, to_records


def raw_vote_records(rows: Sequence[Sequence[Any]]) -> List[RawVoteRecord]:
    """Map raw rows onto RawVoteRecord; absent fields become None."""
    return [
        RawVoteRecord(
            session=record.get('session'),
            rcid=record.get('rcid'),
            ccode=record.get('ccode'),
            vote=record.get('vote'),
        )
        for record in to_records(rows)
    ]


def normalize(raw: RawVoteRecord, country_codes: Mapping[int, Country]) -> VoteRecord:
    """
    Convert a raw record such as
        session='5.0', rcid='22.0', ccode='2.0', vote='1.0'
    into
        VoteRecord(resolution=(5, 22), country='USA', vote=VoteValue.YES).

    Unknown country codes keep the numeric code as identifier, unknown
    vote codes give a vote of None.

    Raises:
        ParseError: if one of the fields is not numeric
    """
    session = parse_code_number(raw.session, 'session')
    rcid = parse_code_number(raw.rcid, 'rcid')
    ccode = parse_code_number(raw.ccode, 'ccode')
    vote = parse_code_number(raw.vote, 'vote')

    country = country_codes.get(ccode)
    identifier = country.abbreviation if country is not None and country.abbreviation else str(ccode)

    return VoteRecord(resolution=(session, rcid), country=identifier, vote=vote_value(vote))


def resolution_sort_key(key: ResolutionKey):
    session, rcid = key
    return (session, rcid)


def merge_votes(records: Iterable[VoteRecord]) -> Dict[str, VoteValue]:
    """
    Fold the records of one resolution into a country -> vote map.

    Records are applied in order, so a later vote for the same country
    replaces an earlier one. Records without a vote are left out.
    """
    votes: Dict[str, VoteValue] = {}
    for record in records:
        if record.vote is None:
            continue
        votes[record.country] = record.vote
    return votes


def aggregate(records: Iterable[VoteRecord]) -> List[ResolutionVotes]:
    """Group vote records by resolution, ordered by (session, rcid)."""
    groups: Dict[ResolutionKey, List[VoteRecord]] = {}
    for record in records:
        groups.setdefault(record.resolution, []).append(record)

    return [
        ResolutionVotes(resolution=key, votes=merge_votes(groups[key]))
        for key in sorted(groups, key=resolution_sort_key)
    ]


class VoteProcessor(DatasetProcessor):
    """Processes raw roll-call votes into per-resolution vote maps."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def read(self, path: Path, source_config: Dict[str, Any]) -> List[List[str]]:
        self.logger.info(f"Reading raw votes from {path}")
        encoding = source_config.get('encoding', 'utf-8')
        rows = read_delimited(path, source_config.get('delimiter', '\t'), encoding)

        replaced = count_replaced_cells(rows)
        if replaced:
            self.logger.warning(f"{replaced} cells in {path} had bytes invalid as {encoding}, replaced with U+FFFD")
        return rows

    def process(self, rows: List[List[Any]], **kwargs) -> Dict[str, Any]:
        """
        Normalize and aggregate raw vote rows.

        Keyword Args:
            country_codes: country code table from CountryCodeProcessor
            skip_malformed: skip records with non-numeric fields instead of failing
            report: ValidationReport collecting non-fatal issues
        """
        country_codes: Mapping[int, Country] = kwargs.get('country_codes') or {}
        skip_malformed: bool = kwargs.get('skip_malformed', False)
        report: Optional[ValidationReport] = kwargs.get('report')

        self.logger.info("Processing raw vote data")
        if not country_codes:
            self.logger.warning("No country code table provided, countries will be identified by code")

        raw_records = raw_vote_records(rows)
        vote_records = []

        for line_number, raw in enumerate(raw_records, start=2):
            try:
                record = normalize(raw, country_codes)
            except ParseError as e:
                if not skip_malformed:
                    self.logger.error(f"Malformed vote record on line {line_number}: {e}")
                    raise
                self.logger.debug(f"Skipping malformed vote record on line {line_number}: {e}")
                if report is not None:
                    report.skipped_records.append(f"votes line {line_number}: {e}")
                continue

            if report is not None:
                self._record_unknown_codes(raw, record, country_codes, report)
            vote_records.append(record)

        resolution_votes = aggregate(vote_records)

        self.logger.info(f"Normalized {len(vote_records)} vote records")
        self.logger.info(f"Aggregated votes into {len(resolution_votes)} resolutions")

        return {'vote_records': vote_records, 'resolution_votes': resolution_votes}

    def _record_unknown_codes(self, raw: RawVoteRecord, record: VoteRecord,
                              country_codes: Mapping[int, Country], report: ValidationReport):
        ccode = parse_code_number(raw.ccode, 'ccode')
        country = country_codes.get(ccode)
        if country is None or not country.abbreviation:
            report.unknown_country_codes[ccode] = report.unknown_country_codes.get(ccode, 0) + 1
        if record.vote is None:
            code = parse_code_number(raw.vote, 'vote')
            report.unknown_vote_codes[code] = report.unknown_vote_codes.get(code, 0) + 1

    def get_dataset_type(self) -> str:
        return 'votes'
