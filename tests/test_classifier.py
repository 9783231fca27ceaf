"""
Tests for the result classifier.

Tests cover:
- Each payload kind for Result and ProTableResult envelopes
- Priority of the checks
- Responses that carry nothing to mask
"""

import pytest

from sanitizer.classifier import PayloadKind, classify, payload_of
from sanitizer.models import (
    DataBase,
    ExplainResult,
    History,
    JobInfoDetail,
    ProTableResult,
    Result,
    SqlExplainResult,
)


class TestClassify:
    """Test suite for classify()."""

    def test_explain_batch(self, sample_explains):
        response = Result(code=0, data=ExplainResult(correct=True, total=2, sql_explain_results=sample_explains))

        assert classify(response) is PayloadKind.EXPLAIN_BATCH

    def test_explain_list(self, sample_explains):
        assert classify(Result(code=0, data=sample_explains)) is PayloadKind.EXPLAIN_LIST

    def test_history_list(self, sample_history):
        response = ProTableResult(success=True, total=1, data=[sample_history])

        assert classify(response) is PayloadKind.HISTORY_LIST

    def test_database_list(self, sample_database):
        response = ProTableResult(success=True, total=1, data=[sample_database])

        assert classify(response) is PayloadKind.DATABASE_LIST

    def test_history_record(self, sample_history):
        assert classify(Result(code=0, data=sample_history)) is PayloadKind.HISTORY_RECORD

    def test_job_detail(self, sample_history):
        response = Result(code=0, data=JobInfoDetail(id=1, history=sample_history))

        assert classify(response) is PayloadKind.JOB_DETAIL

    def test_job_detail_without_history(self):
        """A job detail is still recognised when it has no history."""
        assert classify(Result(code=0, data=JobInfoDetail(id=1))) is PayloadKind.JOB_DETAIL

    def test_database_config(self, sample_database):
        assert classify(Result(code=0, data=sample_database)) is PayloadKind.DATABASE_CONFIG

    def test_list_kind_decided_by_first_element(self, sample_history, sample_database):
        """Mixed lists are classified by their first element."""
        response = ProTableResult(data=[sample_database, sample_history])

        assert classify(response) is PayloadKind.DATABASE_LIST

    @pytest.mark.parametrize("response", [
        Result(code=0, data=None),
        Result(code=0, data=[]),
        ProTableResult(success=True, total=0, data=[]),
        Result(code=0, data=42),
        Result(code=0, data="ok"),
        Result(code=0, data=[1, 2, 3]),
        Result(code=0, data={"sql": "'password'='x'"}),
        Result(code=0, data=SqlExplainResult(sql="'password'='x'")),
        None,
        42,
        {"datas": History()},
    ])
    def test_no_match(self, response):
        """Should return None without raising for anything unrecognised."""
        assert classify(response) is None


class TestPayloadOf:
    """Test suite for payload_of()."""

    def test_result(self, sample_history):
        assert payload_of(Result(data=sample_history)) is sample_history

    def test_pro_table_result(self, sample_history):
        rows = [sample_history]

        assert payload_of(ProTableResult(data=rows)) is rows

    def test_unknown_envelope(self):
        assert payload_of(object()) is None
