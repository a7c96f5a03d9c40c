"""
Data merger for joining vote maps with resolution descriptions.

This module attaches each resolution's description and checks the
counted votes against the officially published tallies.
"""

import logging
from collections import Counter
from typing import Dict, List, Mapping, Optional

from ..core.models import (
    AnnotatedResolution,
    ResolutionDescription,
    ResolutionKey,
    ResolutionVotes,
    ValidationReport,
    VoteValue,
)

TALLIED_VOTES = {
    'yes': VoteValue.YES,
    'no': VoteValue.NO,
    'abstain': VoteValue.ABSTAIN,
}


def tally(votes: Mapping[str, VoteValue]) -> Dict[str, int]:
    """Count yes, no and abstain votes in a vote map."""
    counts = Counter(votes.values())
    return {name: counts.get(vote, 0) for name, vote in TALLIED_VOTES.items()}


def official_tally(description: ResolutionDescription) -> Dict[str, int]:
    return {'yes': description.yes, 'no': description.no, 'abstain': description.abstain}


def check_consistency(resolution_votes: ResolutionVotes, description: ResolutionDescription) -> bool:
    """True when the counted votes match the published tallies exactly."""
    return tally(resolution_votes.votes) == official_tally(description)


class DataMerger:
    """Joins resolution votes with their descriptions."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def annotate(self, resolution_votes: List[ResolutionVotes],
                 descriptions: Mapping[ResolutionKey, ResolutionDescription],
                 report: Optional[ValidationReport] = None) -> List[AnnotatedResolution]:
        """Attach descriptions to resolutions, keeping the vote order."""
        self.logger.info("Merging resolution votes with descriptions")

        annotated = []
        missing = 0
        mismatched = 0

        for votes in resolution_votes:
            description = descriptions.get(votes.resolution)

            if description is None:
                missing += 1
                self.logger.debug(f"No description for resolution {votes.resolution}")
                if report is not None:
                    report.missing_descriptions.append(votes.resolution)

            elif not check_consistency(votes, description):
                mismatched += 1
                counted, official = tally(votes.votes), official_tally(description)
                self.logger.debug(f"Tally mismatch for {votes.resolution}: counted {counted}, official {official}")
                if report is not None:
                    report.tally_mismatches[votes.resolution] = (counted, official)

            annotated.append(AnnotatedResolution(votes=votes, description=description))

        self.logger.info(f"Merged {len(annotated)} resolutions "
                         f"({missing} without description, {mismatched} with tally mismatches)")
        return annotated
