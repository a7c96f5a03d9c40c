import logging

import pandas as pd
import pytest
import xlwt

from unRollCall.processors.country_processor import CountryCodeProcessor
from unRollCall.processors.description_processor import read_descriptions
from unRollCall.readers.tabular import count_replaced_cells, read_delimited, read_spreadsheet_sheet, to_records


def test_read_delimited_returns_header_and_rows(raw_votes_file):
    rows = read_delimited(raw_votes_file)
    assert rows[0] == ['rcid', 'session', 'ccode', 'vote']
    assert rows[1] == ['22.0', '5.0', '2.0', '1.0']
    assert len(rows) == 8


def test_read_delimited_keeps_cells_as_strings(tmp_path):
    path = tmp_path / 'cells.tab'
    path.write_text("a\tb\tc\n001\t\tNA\n")
    assert read_delimited(path)[1] == ['001', '', 'NA']


def test_read_delimited_truncates_long_rows(tmp_path):
    path = tmp_path / 'long.tab'
    path.write_text("a\tb\n1\t2\t3\n4\t5\n")
    assert read_delimited(path) == [['a', 'b'], ['1', '2'], ['4', '5']]


def test_read_delimited_keeps_short_rows_short(tmp_path):
    path = tmp_path / 'short.tab'
    path.write_text("a\tb\tc\n1\n2\t3\t4\n")
    assert read_delimited(path) == [['a', 'b', 'c'], ['1'], ['2', '3', '4']]


def test_read_delimited_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_delimited(tmp_path / 'missing.tab')


def test_read_delimited_empty_file(tmp_path):
    path = tmp_path / 'empty.tab'
    path.write_text("")
    assert read_delimited(path) == []


def test_read_spreadsheet_sheet_marks_empty_cells(tmp_path, monkeypatch):
    path = tmp_path / 'descriptions.xls'
    path.write_bytes(b'')
    calls = []

    def fake_read_excel(io, sheet_name, header, dtype):
        calls.append(sheet_name)
        return pd.DataFrame([
            ['session', 'rcid', 'unres', 'note'],
            [5.0, 22.0, None, 'x'],
            [5.0, 23.0, 'R/5/23', None],
            [None, None, None, None],
        ], dtype=object)

    monkeypatch.setattr(pd, 'read_excel', fake_read_excel)

    rows = read_spreadsheet_sheet(path, 'descriptions')

    assert calls == ['descriptions']
    assert rows[1] == [5.0, 22.0, None, 'x']
    assert rows[2] == [5.0, 23.0, 'R/5/23']
    assert rows[3] == []


def test_read_spreadsheet_sheet_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_spreadsheet_sheet(tmp_path / 'missing.xls', 'descriptions')


def test_to_records_zips_against_header():
    rows = [['a', 'b', 'c'], ['1', '2', '3'], ['4'], ['5', '6', '7', '8']]
    assert to_records(rows) == [
        {'a': '1', 'b': '2', 'c': '3'},
        {'a': '4'},
        {'a': '5', 'b': '6', 'c': '7'},
    ]


def test_to_records_without_rows():
    assert to_records([]) == []
    assert to_records([['a', 'b']]) == []


@pytest.fixture
def descriptions_xls(tmp_path):
    workbook = xlwt.Workbook()

    notes = workbook.add_sheet('notes')
    notes.write(0, 0, 'not the descriptions')

    sheet = workbook.add_sheet('descriptions')
    for col, name in enumerate(['rcid', 'session', 'unres', 'yes', 'no', 'abstain']):
        sheet.write(0, col, name)
    for col, value in enumerate([22, 5, 'R/5/22', 1, 1, 0]):
        sheet.write(1, col, value)
    # unres left blank
    for col, value in [(0, 23), (1, 5), (3, 2), (4, 0), (5, 0)]:
        sheet.write(2, col, value)

    path = tmp_path / 'descriptions.xls'
    workbook.save(str(path))
    return path


def test_read_spreadsheet_sheet_reads_xls_file(descriptions_xls):
    rows = read_spreadsheet_sheet(descriptions_xls, 'descriptions')

    assert rows[0] == ['rcid', 'session', 'unres', 'yes', 'no', 'abstain']
    assert rows[1] == [22, 5, 'R/5/22', 1, 1, 0]
    assert rows[2] == [23, 5, None, 2, 0, 0]
    assert all(isinstance(cell, (int, float)) for cell in rows[1][:2] + rows[1][3:])


def test_descriptions_from_xls_file(descriptions_xls):
    descriptions = read_descriptions(read_spreadsheet_sheet(descriptions_xls, 'descriptions'))

    assert descriptions[(5, 22)].unres == 'R/5/22'
    assert (descriptions[(5, 22)].yes, descriptions[(5, 22)].no) == (1, 1)
    assert descriptions[(5, 23)].unres == ''
    assert descriptions[(5, 23)].yes == 2


def test_read_spreadsheet_sheet_unknown_sheet(descriptions_xls):
    with pytest.raises(ValueError):
        read_spreadsheet_sheet(descriptions_xls, 'missing')


def test_read_delimited_marks_undecodable_bytes(tmp_path):
    path = tmp_path / 'latin1.tab'
    path.write_bytes("ccode\tCountryName\tCountryAbb\n437\tC\xf4te d'Ivoire\tCDI\n".encode('latin-1'))

    rows = read_delimited(path)

    assert rows[1][1] == "C\ufffdte d'Ivoire"
    assert count_replaced_cells(rows) == 1


def test_read_delimited_honours_encoding(tmp_path):
    path = tmp_path / 'latin1.tab'
    path.write_bytes("ccode\tCountryName\tCountryAbb\n437\tC\xf4te d'Ivoire\tCDI\n".encode('latin-1'))

    rows = read_delimited(path, encoding='latin-1')

    assert rows[1][1] == "C\xf4te d'Ivoire"
    assert count_replaced_cells(rows) == 0


def test_country_processor_warns_on_replaced_bytes(tmp_path, logger, caplog):
    path = tmp_path / 'idealpoints.tab'
    path.write_bytes("ccode\tCountryName\tCountryAbb\n437\tC\xf4te d'Ivoire\tCDI\n".encode('latin-1'))

    with caplog.at_level(logging.WARNING):
        CountryCodeProcessor(logger).read(path, {})

    assert any("replaced with U+FFFD" in message for message in caplog.messages)
