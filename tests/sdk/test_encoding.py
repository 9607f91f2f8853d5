from datetime import date, datetime, timedelta, timezone

import pytest

from gitlab_sdk import AccessLevel, PipelineStatus, UnsupportedOptionValueError
from gitlab_sdk._utils import (
    encode_query_items,
    encode_query_string,
    encode_scalar,
)


class _Sha:
    encoded_value = "deadbeef"


class TestEncodeScalar:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (1.5, "1.5"),
            ("main", "main"),
            (PipelineStatus.RUNNING, "running"),
            (AccessLevel.MAINTAINER, "40"),
            (date(2023, 1, 2), "20230102"),
        ],
    )
    def test_primitives(self, value, expected):
        assert encode_scalar("key", value) == expected

    def test_datetime_is_utc_iso8601_with_milliseconds(self):
        value = datetime(2023, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)

        assert encode_scalar("since", value) == "2023-05-01T12:30:45.123Z"

    def test_aware_datetime_is_converted_to_utc(self):
        value = datetime(2023, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

        assert encode_scalar("since", value) == "2023-05-01T12:00:00.000Z"

    def test_naive_datetime_is_taken_as_utc(self):
        assert encode_scalar("since", datetime(2023, 5, 1)) == "2023-05-01T00:00:00.000Z"

    def test_object_with_encoded_value(self):
        assert encode_scalar("sha", _Sha()) == "deadbeef"

    def test_unsupported_value_raises(self):
        with pytest.raises(UnsupportedOptionValueError) as exc_info:
            encode_scalar("ids", object())

        assert exc_info.value.key == "ids"
        assert isinstance(exc_info.value, TypeError)


class TestEncodeQueryItems:
    def test_none_contributes_nothing(self):
        assert encode_query_items("search", None) == []

    def test_scalar(self):
        assert encode_query_items("search", "fix") == [("search", "fix")]

    def test_array(self):
        assert encode_query_items("ids", [1, 2, 3]) == [
            ("ids[]", "1"),
            ("ids[]", "2"),
            ("ids[]", "3"),
        ]

    def test_tuple_is_an_array(self):
        assert encode_query_items("labels", ("bug", "ui")) == [
            ("labels[]", "bug"),
            ("labels[]", "ui"),
        ]

    def test_empty_array(self):
        assert encode_query_items("ids", []) == []

    def test_hash(self):
        assert encode_query_items("allowed_to_push", {"user_id": 5}) == [
            ("allowed_to_push[user_id]", "5")
        ]

    def test_hash_skips_none_entries(self):
        assert encode_query_items(
            "allowed_to_push", {"user_id": 5, "group_id": None}
        ) == [("allowed_to_push[user_id]", "5")]

    def test_array_of_hashes(self):
        assert encode_query_items(
            "variables",
            [
                {"key": "VAR1", "value": "hello"},
                {"key": "VAR2", "value": "world"},
            ],
        ) == [
            ("variables[0][key]", "VAR1"),
            ("variables[0][value]", "hello"),
            ("variables[1][key]", "VAR2"),
            ("variables[1][value]", "world"),
        ]

    def test_mixed_array_raises(self):
        with pytest.raises(UnsupportedOptionValueError):
            encode_query_items("mixed", [{"a": 1}, 2])

    def test_nested_value_in_hash_raises(self):
        with pytest.raises(UnsupportedOptionValueError):
            encode_query_items("allowed_to_push", {"user": {"id": 1}})


class TestEncodeQueryString:
    def test_keeps_brackets_literal(self):
        query = encode_query_string([("ids[]", "1"), ("allowed_to_push[user_id]", "5")])

        assert query == "ids[]=1&allowed_to_push[user_id]=5"

    def test_percent_encodes_values(self):
        query = encode_query_string([("search", "a b&c/d"), ("since", "2023-01-01T00:00:00.000Z")])

        assert query == "search=a%20b%26c%2Fd&since=2023-01-01T00%3A00%3A00.000Z"

    def test_empty(self):
        assert encode_query_string([]) == ""
