"""
Record types shared by every stage of the roll-call pipeline.

Each stage hands the next one explicit, typed records instead of
string-keyed rows, so a missing field fails at the point it is read.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple


class VoteValue(Enum):
    """Symbolic vote recorded for one country on one roll call."""

    YES = 'yes'
    ABSTAIN = 'abstain'
    NO = 'no'
    ABSENT = 'absent'
    NON_MEMBER = 'non-member'

    @property
    def code(self) -> int:
        """Integer code this vote carries in the source data."""
        return _CODES_BY_VOTE[self]


# Codes as published with the voting data set
VOTE_CODES: Mapping[int, VoteValue] = {
    1: VoteValue.YES,
    2: VoteValue.ABSTAIN,
    3: VoteValue.NO,
    8: VoteValue.ABSENT,
    9: VoteValue.NON_MEMBER,
}

_CODES_BY_VOTE = {vote: code for code, vote in VOTE_CODES.items()}


def vote_value(code: int) -> Optional[VoteValue]:
    """Look up a vote code, returning None for codes outside the table."""
    return VOTE_CODES.get(code)


# (session, rcid)
ResolutionKey = Tuple[int, int]


@dataclass(frozen=True)
class Country:
    full_name: str
    abbreviation: str


@dataclass(frozen=True)
class RawVoteRecord:
    """One row of the raw voting file, fields still as source text."""

    session: str
    rcid: str
    ccode: str
    vote: str


@dataclass(frozen=True)
class VoteRecord:
    resolution: ResolutionKey
    country: str
    vote: Optional[VoteValue]


@dataclass(frozen=True)
class ResolutionVotes:
    resolution: ResolutionKey
    votes: Mapping[str, VoteValue] = field(default_factory=dict)

    @property
    def session(self) -> int:
        return self.resolution[0]

    @property
    def rcid(self) -> int:
        return self.resolution[1]


@dataclass(frozen=True)
class ResolutionDescription:
    resolution: ResolutionKey
    unres: str
    yes: int
    no: int
    abstain: int


@dataclass(frozen=True)
class AnnotatedResolution:
    """Votes of one resolution joined with its description, if any."""

    votes: ResolutionVotes
    description: Optional[ResolutionDescription] = None

    @property
    def resolution(self) -> ResolutionKey:
        return self.votes.resolution

    @property
    def unres(self) -> str:
        if self.description is None or self.description.unres is None:
            return ''
        return self.description.unres


@dataclass
class ValidationReport:
    """Non-fatal conditions collected over one pipeline run."""

    unknown_country_codes: Dict[int, int] = field(default_factory=dict)
    unknown_vote_codes: Dict[int, int] = field(default_factory=dict)
    skipped_records: List[str] = field(default_factory=list)
    missing_descriptions: List[ResolutionKey] = field(default_factory=list)
    tally_mismatches: Dict[ResolutionKey, Tuple[Dict[str, int], Dict[str, int]]] = field(default_factory=dict)

    def has_issues(self) -> bool:
        return any([
            self.unknown_country_codes,
            self.unknown_vote_codes,
            self.skipped_records,
            self.missing_descriptions,
            self.tally_mismatches,
        ])

    def log_summary(self, logger) -> None:
        """Write one line per category of issue to the logger."""
        if not self.has_issues():
            logger.info("Validation: no issues found")
            return

        if self.unknown_country_codes:
            logger.warning(f"Validation: {len(self.unknown_country_codes)} country codes without abbreviation "
                           f"(kept as raw codes): {sorted(self.unknown_country_codes)}")
        if self.unknown_vote_codes:
            logger.warning(f"Validation: unknown vote codes omitted from vote maps: "
                           f"{dict(sorted(self.unknown_vote_codes.items()))}")
        if self.skipped_records:
            logger.warning(f"Validation: {len(self.skipped_records)} malformed records skipped")
        if self.missing_descriptions:
            logger.warning(f"Validation: {len(self.missing_descriptions)} resolutions have no description")
        if self.tally_mismatches:
            logger.warning(f"Validation: {len(self.tally_mismatches)} resolutions disagree with official tallies")
            for key, (counted, official) in sorted(self.tally_mismatches.items())[:5]:
                logger.warning(f"  - {key}: counted {counted}, official {official}")
