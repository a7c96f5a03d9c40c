"""
Country code table processor.

This module builds the integer country code lookup from the ideal points
file. Only the code, the full name and the abbreviation are used; the
ideal point estimates themselves are ignored.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.abstractions import DatasetProcessor
from ..core.models import Country
from ..core.parsing import parse_strict_int
from ..readers.tabular import count_replaced_cells, read_delimited, to_records


def build_country_codes(rows: Sequence[Sequence[Any]]) -> Dict[int, Country]:
    """
    Extract the integer to country mapping from ideal points rows.

    The file lists each country once per year, so a code repeats many
    times; the last occurrence wins. The result is ordered by code.

    Raises:
        ParseError: if a ccode is not an integer
    """
    codes: Dict[int, Country] = {}
    for record in to_records(rows):
        code = parse_strict_int(record.get('ccode'), 'ccode')
        codes[code] = Country(
            full_name=record.get('CountryName') or '',
            abbreviation=record.get('CountryAbb') or '',
        )
    return dict(sorted(codes.items()))


class CountryCodeProcessor(DatasetProcessor):
    """Processes the ideal points file into the country code table."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def read(self, path: Path, source_config: Dict[str, Any]) -> List[List[str]]:
        self.logger.info(f"Reading country codes from {path}")
        encoding = source_config.get('encoding', 'utf-8')
        rows = read_delimited(path, source_config.get('delimiter', '\t'), encoding)

        replaced = count_replaced_cells(rows)
        if replaced:
            self.logger.warning(f"{replaced} cells in {path} had bytes invalid as {encoding}, replaced with U+FFFD")
        return rows

    def process(self, rows: List[List[Any]], **kwargs) -> Dict[str, Any]:
        """Build the country code table."""
        country_codes = build_country_codes(rows)

        self.logger.info(f"Built country code table with {len(country_codes)} countries "
                         f"from {max(len(rows) - 1, 0)} rows")
        missing_abbreviations = [code for code, country in country_codes.items() if not country.abbreviation]
        if missing_abbreviations:
            self.logger.warning(f"Country codes without abbreviation: {missing_abbreviations}")

        return {'country_codes': country_codes}

    def get_dataset_type(self) -> str:
        return 'country_codes'
