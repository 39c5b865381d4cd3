"""Tests for report models and aggregation."""

from __future__ import annotations

import json
from dataclasses import FrozenInstanceError

import pytest

from refcheck.validator.models import FileOutcome, FileStatus, Report, ReportBuilder

from conftest import EMPTY_SHA256


def _outcomes() -> list[FileOutcome]:
    return [
        FileOutcome(path="/r/a", status=FileStatus.intact, expected_hash="a", actual_hash="a"),
        FileOutcome(path="/r/b", status=FileStatus.corrupted, expected_hash=EMPTY_SHA256, actual_hash="f" * 64),
        FileOutcome(path="/r/c", status=FileStatus.invalid_name),
        FileOutcome(path="/r/d", status=FileStatus.invalid_name),
        FileOutcome.errored("/r/e", "Permission denied"),
    ]


class TestReportBuilder:
    def test_empty(self):
        report = ReportBuilder("/r").build()
        assert report == Report(folder_path="/r")
        assert report.is_clean

    def test_counts_partition_total(self):
        builder = ReportBuilder("/r")
        for outcome in _outcomes():
            builder.add(outcome)
            r = builder.build()
            assert r.intact_files + r.corrupted_files + r.invalid_files == r.total_files

        report = builder.build()
        assert report.total_files == 4
        assert report.intact_files == 1
        assert report.corrupted_files == 1
        assert report.invalid_files == 2
        assert report.errored_files == 1

    def test_lists_keep_arrival_order(self):
        builder = ReportBuilder("/r")
        for outcome in _outcomes():
            builder.add(outcome)
        report = builder.build()
        assert report.invalid_file_list == ["/r/c", "/r/d"]
        assert report.corrupted_file_list[0].file_path == "/r/b"
        assert report.corrupted_file_list[0].expected_hash == EMPTY_SHA256
        assert report.errored_file_list[0].error == "Permission denied"

    def test_errored_is_not_clean(self):
        builder = ReportBuilder("/r")
        builder.add(FileOutcome.errored("/r/x", "boom"))
        report = builder.build()
        assert report.total_files == 0
        assert not report.is_clean


def test_report_json_field_names():
    builder = ReportBuilder("/r")
    for outcome in _outcomes():
        builder.add(outcome)
    data = json.loads(builder.build().model_dump_json())
    assert list(data) == [
        "folder_path",
        "total_files",
        "intact_files",
        "corrupted_files",
        "corrupted_file_list",
        "invalid_files",
        "invalid_file_list",
        "errored_files",
        "errored_file_list",
    ]
    assert data["corrupted_file_list"][0] == {
        "file_path": "/r/b",
        "expected_hash": EMPTY_SHA256,
        "actual_hash": "f" * 64,
    }


def test_file_outcome_is_frozen():
    outcome = FileOutcome(path="/r/a", status=FileStatus.intact)
    with pytest.raises(FrozenInstanceError):
        outcome.status = FileStatus.corrupted  # type: ignore[misc]
