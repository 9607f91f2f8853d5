import pytest

from gitlab_sdk import Endpoint, MissingPathParameterError


class TestEndpoint:
    def test_placeholders(self):
        endpoint = Endpoint("/projects/{id}/pipelines/{pipeline_id}")

        assert endpoint.placeholders == ["id", "pipeline_id"]

    def test_path_and_query_are_partitioned(self):
        endpoint = Endpoint("/projects/{id}/repository/commits/{sha}")
        items = [("id", "42"), ("sha", "abc"), ("since", "2023-01-01")]

        assert endpoint.expand(items) == "/projects/42/repository/commits/abc"
        assert endpoint.residual_query_items(items) == [("since", "2023-01-01")]

    def test_values_are_percent_encoded(self):
        endpoint = Endpoint("/projects/{id}/repository/branches/{branch}")
        items = [("id", "group/project"), ("branch", "feature/a b")]

        assert (
            endpoint.expand(items)
            == "/projects/group%2Fproject/repository/branches/feature%2Fa%20b"
        )

    def test_first_value_wins(self):
        endpoint = Endpoint("/users/{id}")

        assert endpoint.expand([("id", "1"), ("id", "2")]) == "/users/1"

    def test_missing_placeholder_raises(self):
        endpoint = Endpoint("/projects/{id}/repository/commits/{sha}")

        with pytest.raises(MissingPathParameterError) as exc_info:
            endpoint.expand([("id", "42")])

        assert exc_info.value.name == "sha"
        assert isinstance(exc_info.value, ValueError)

    def test_without_placeholders(self):
        endpoint = Endpoint("/user")
        items = [("search", "x")]

        assert endpoint.expand(items) == "/user"
        assert endpoint.residual_query_items(items) == items
