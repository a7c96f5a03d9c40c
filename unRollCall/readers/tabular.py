"""
Tabular readers for the roll-call source files.

Both readers hand back plain rows of cells, with the header as the first
row, so the processors can treat delimited text and spreadsheets alike.
An absent cell is always None, never an exception.
"""

from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import pandas as pd

PathLike = Union[str, Path]

# Stands in for bytes that could not be decoded
REPLACEMENT_CHAR = '\ufffd'


def _trim_row(row: List[Any]) -> List[Any]:
    """Drop trailing absent cells so ragged rows stay ragged."""
    end = len(row)
    while end > 0 and row[end - 1] is None:
        end -= 1
    return row[:end]


def _frame_to_rows(df: pd.DataFrame) -> List[List[Any]]:
    return [
        _trim_row([None if pd.isna(cell) else cell for cell in row])
        for row in df.itertuples(index=False, name=None)
    ]


def count_replaced_cells(rows: Sequence[Sequence[Any]]) -> int:
    """Number of cells holding a character that failed to decode."""
    return sum(
        1 for row in rows for cell in row
        if isinstance(cell, str) and REPLACEMENT_CHAR in cell
    )


def read_delimited(path: PathLike, delimiter: str = '\t', encoding: str = 'utf-8') -> List[List[str]]:
    """
    Read a delimited text file into rows of string cells.

    The first line is returned as the first row and fixes the row width:
    longer lines are cut down to it, shorter lines keep only the cells they
    have. Any other parser error propagates. Bytes that are invalid in
    the given encoding are replaced by REPLACEMENT_CHAR rather than
    failing the read; see count_replaced_cells.

    Raises:
        FileNotFoundError: if path does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if path.stat().st_size == 0:
        return []

    read_options = dict(
        sep=delimiter,
        header=None,
        dtype=str,
        keep_default_na=False,
        encoding=encoding,
        encoding_errors='replace',
    )

    width = pd.read_csv(path, nrows=1, **read_options).shape[1]

    df = pd.read_csv(
        path,
        engine='python',
        on_bad_lines=lambda bad_line: bad_line[:width],
        **read_options,
    )
    return _frame_to_rows(df)


def read_spreadsheet_sheet(path: PathLike, sheet_name: str) -> List[List[Any]]:
    """
    Read one sheet of a spreadsheet into rows of cells.

    Cells keep their spreadsheet type (str, int or float); empty cells
    are None.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    df = pd.read_excel(path, sheet_name=sheet_name, header=None, dtype=object)
    return _frame_to_rows(df)


def to_records(rows: Sequence[Sequence[Any]]) -> List[Dict[str, Any]]:
    """
    Zip every data row against the header row.

    Short rows leave their trailing fields out of the record, long rows
    lose their extra cells.
    """
    if not rows:
        return []

    header = [str(cell) if cell is not None else '' for cell in rows[0]]
    return [dict(zip(header, row)) for row in rows[1:]]
