import json
from datetime import date
from pathlib import Path

import pytest

from gitlab_sdk import (
    AccessLevel,
    InvalidRequestError,
    MissingPathParameterError,
    OptionLocation,
    OptionsCollection,
    RequestSpec,
)


def _commits_options() -> OptionsCollection:
    options = OptionsCollection(per_page=50)
    options.declare("id", 42)
    options.declare("sha", "abc")
    options.declare("since", "2023-01-01")
    return options


class TestRequestSpec:
    def test_endpoint_is_coerced(self):
        spec = RequestSpec(endpoint="/projects/{id}")

        assert spec.endpoint.placeholders == ["id"]

    class TestBuild:
        def test_path_query_partition(self):
            spec = RequestSpec(
                endpoint="/projects/{id}/repository/commits/{sha}",
                options=_commits_options(),
            )

            request = spec.build("https://gitlab.test/api/v4/")

            assert request.method == "GET"
            assert request.url == "https://gitlab.test/api/v4/projects/42/repository/commits/abc"
            assert request.query_items == [("since", "2023-01-01"), ("per_page", "50")]
            assert request.full_url == (
                "https://gitlab.test/api/v4/projects/42/repository/commits/abc"
                "?since=2023-01-01&per_page=50"
            )
            assert request.content is None
            assert request.files is None

        def test_json_body(self):
            options = OptionsCollection()
            options.declare("id", 42)
            options.declare("ref", "main")
            options.declare(
                "variables",
                [{"key": "VAR1", "value": "hello"}],
                OptionLocation.JSON_BODY,
            )
            spec = RequestSpec(
                method="POST", endpoint="/projects/{id}/pipeline", options=options
            )

            request = spec.build("https://gitlab.test/api/v4")

            assert request.url == "https://gitlab.test/api/v4/projects/42/pipeline"
            assert request.query_items == [("ref", "main")]
            assert request.headers["Content-Type"] == "application/json"
            assert json.loads(request.content) == {
                "variables": [{"key": "VAR1", "value": "hello"}]
            }

        def test_json_body_serializes_dates_and_enums(self):
            options = OptionsCollection()
            options.declare("id", 42)
            options.declare("due_date", date(2024, 1, 31), OptionLocation.JSON_BODY)
            options.declare("level", AccessLevel.DEVELOPER, OptionLocation.JSON_BODY)
            spec = RequestSpec(
                method="PUT", endpoint="/projects/{id}", options=options
            )

            request = spec.build("https://gitlab.test/api/v4")

            assert isinstance(request.content, bytes)
            assert json.loads(request.content) == {
                "due_date": "2024-01-31",
                "level": 30,
            }

        def test_multipart_form(self, tmp_path: Path):
            options = OptionsCollection()
            options.declare("id", 42)
            options.declare("file", tmp_path / "logo.png", OptionLocation.FORM_FILE)
            spec = RequestSpec(
                method="POST", endpoint="/projects/{id}/uploads", options=options
            )

            request = spec.build("https://gitlab.test/api/v4")

            assert request.files is not None
            assert request.files[0].path == str(tmp_path / "logo.png")
            assert request.files[0].name == "file"
            assert "Content-Type" not in request.headers

        def test_json_body_with_multipart_form_is_rejected(self, tmp_path: Path):
            options = OptionsCollection()
            options.declare("note", "x", OptionLocation.JSON_BODY)
            options.declare("file", tmp_path / "a.txt", OptionLocation.FORM_FILE)

            with pytest.raises(InvalidRequestError):
                RequestSpec(method="POST", endpoint="/x", options=options).build(
                    "https://gitlab.test"
                )

        def test_missing_path_parameter(self):
            spec = RequestSpec(endpoint="/projects/{id}")

            with pytest.raises(MissingPathParameterError):
                spec.build("https://gitlab.test")

        def test_auth_header(self):
            calls = []

            def auth_provider():
                calls.append(1)
                return "PRIVATE-TOKEN", "secret"

            request = RequestSpec(endpoint="/user").build(
                "https://gitlab.test", auth_provider
            )

            assert request.headers["PRIVATE-TOKEN"] == "secret"
            assert len(calls) == 1

        def test_auth_provider_without_credentials(self):
            request = RequestSpec(endpoint="/user").build(
                "https://gitlab.test", lambda: None
            )

            assert request.headers == {}

        def test_fixed_url_ignores_endpoint_and_options(self):
            spec = RequestSpec(
                endpoint="/projects/{id}",
                options=_commits_options(),
                fixed_url="https://gitlab.test/api/v4/projects?page=2",
            )

            request = spec.build("https://other.test", lambda: ("JOB-TOKEN", "t"))

            assert request.full_url == "https://gitlab.test/api/v4/projects?page=2"
            assert request.headers == {"JOB-TOKEN": "t"}

    def test_with_page(self):
        spec = RequestSpec(endpoint="/projects", options=OptionsCollection(page=2))

        next_spec = spec.with_page(3)

        assert next_spec.options.page == 3
        assert spec.options.page == 2
        assert next_spec.endpoint == spec.endpoint
        assert ("page", "3") in next_spec.build("https://gitlab.test").query_items
