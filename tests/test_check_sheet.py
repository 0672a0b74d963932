"""Tests for the sheet checking report."""

from goalsheet.services.sheet_loader import iter_sheet_rows
from scripts.check_sheet import check_rows


def test_reports_skipped_rows_with_line_numbers(sample_csv):
    report = check_rows(list(iter_sheet_rows(sample_csv)))
    assert report["skipped"] == [(5, "No Description"), (6, "<no name>")]


def test_reports_goals_without_difficulty(sample_csv):
    report = check_rows(list(iter_sheet_rows(sample_csv)))
    assert report["no_difficulty"] == ["Speed Run"]


def test_reports_duplicates_case_insensitively():
    text = "Name,Description\nDash,first\nDASH,second\nClimb,up\n"
    report = check_rows(list(iter_sheet_rows(text)))
    assert report["duplicates"] == ["dash"]
    assert report["skipped"] == []


def test_multiline_cells_do_not_shift_line_numbers():
    text = 'Name,Description\nClimb,"up\nand up"\n,orphan\n'
    report = check_rows(list(iter_sheet_rows(text)))
    assert report["skipped"] == [(4, "<no name>")]
