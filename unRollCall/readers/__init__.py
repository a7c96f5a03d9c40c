"""Readers module exports."""

from .tabular import read_delimited, read_spreadsheet_sheet, to_records

__all__ = ['read_delimited', 'read_spreadsheet_sheet', 'to_records']
