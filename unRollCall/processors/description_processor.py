"""
Resolution description processor.

This module reads the descriptions spreadsheet, which carries the UN
document symbol and the officially published tallies of every roll call.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.abstractions import DatasetProcessor
from ..core.models import ResolutionDescription, ResolutionKey
from ..core.parsing import parse_cell_int
from ..readers.tabular import read_spreadsheet_sheet, to_records

DEFAULT_SHEET = 'descriptions'


def _text(value: Any) -> str:
    """Cell as text; whole-number cells lose their float suffix."""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _tally(record: Dict[str, Any], field: str) -> int:
    value = record.get(field)
    if value is None or value == '':
        return 0
    return parse_cell_int(value, field)


def read_descriptions(rows: Sequence[Sequence[Any]]) -> Dict[ResolutionKey, ResolutionDescription]:
    """
    Build the description table keyed by (session, rcid).

    session and rcid may be numeric cells or text. Rows without either are
    skipped; for repeated keys the first row wins.

    Raises:
        ParseError: if a key or tally cell is not numeric
    """
    descriptions: Dict[ResolutionKey, ResolutionDescription] = {}

    for record in to_records(rows):
        if record.get('session') is None or record.get('rcid') is None:
            continue

        key = (parse_cell_int(record['session'], 'session'), parse_cell_int(record['rcid'], 'rcid'))
        if key in descriptions:
            continue

        descriptions[key] = ResolutionDescription(
            resolution=key,
            unres=_text(record.get('unres')),
            yes=_tally(record, 'yes'),
            no=_tally(record, 'no'),
            abstain=_tally(record, 'abstain'),
        )

    return descriptions


class DescriptionProcessor(DatasetProcessor):
    """Processes the resolution description spreadsheet."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def read(self, path: Path, source_config: Dict[str, Any]) -> List[List[Any]]:
        sheet = source_config.get('sheet', DEFAULT_SHEET)
        self.logger.info(f"Reading resolution descriptions from {path} (sheet '{sheet}')")
        return read_spreadsheet_sheet(path, sheet)

    def process(self, rows: List[List[Any]], **kwargs) -> Dict[str, Any]:
        """Build the description table."""
        descriptions = read_descriptions(rows)

        ignored = sum(1 for row in rows[1:] if row) - len(descriptions)
        self.logger.info(f"Read {len(descriptions)} resolution descriptions")
        if ignored > 0:
            self.logger.debug(f"Ignored {ignored} repeated or incomplete description rows")

        return {'descriptions': descriptions}

    def get_dataset_type(self) -> str:
        return 'descriptions'
