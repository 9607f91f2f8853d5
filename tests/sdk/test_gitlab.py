import logging

import pytest
from pydantic import ValidationError
from pytest_httpx import HTTPXMock

from gitlab_sdk import (
    Config,
    GitLab,
    GitLabAPIError,
    GitLabError,
    HttpxTransport,
    RequestSpec,
    TokenType,
)
from gitlab_sdk._utils.constants import HEADER_USER_AGENT, SDK_VERSION


class TestConfig:
    def test_defaults(self):
        config = Config()

        assert config.base_url == "https://gitlab.com"
        assert config.api_url == "https://gitlab.com/api/v4"
        assert config.token_type is TokenType.BEARER
        assert config.auth_header() is None

    def test_trailing_slash_is_stripped(self):
        assert Config(base_url="https://gitlab.test/").api_url == "https://gitlab.test/api/v4"

    def test_empty_base_url_is_rejected(self):
        with pytest.raises(ValidationError):
            Config(base_url="")

    @pytest.mark.parametrize(
        "token_type,header",
        [
            (TokenType.BEARER, ("Authorization", "Bearer t0k")),
            (TokenType.PRIVATE, ("PRIVATE-TOKEN", "t0k")),
            (TokenType.JOB, ("JOB-TOKEN", "t0k")),
            ("private", ("PRIVATE-TOKEN", "t0k")),
        ],
    )
    def test_auth_header(self, token_type, header):
        assert Config(token="t0k", token_type=token_type).auth_header() == header


class TestGitLab:
    class TestConfiguration:
        def test_explicit_arguments(self, base_url: str):
            gitlab = GitLab(base_url=base_url, token="t", token_type="private", api_version="5")

            assert gitlab.config.api_url == f"{base_url}/api/v5"
            assert gitlab.config.auth_header() == ("PRIVATE-TOKEN", "t")

        def test_environment(self, monkeypatch: pytest.MonkeyPatch):
            monkeypatch.setenv("GITLAB_URL", "https://env.gitlab.test")
            monkeypatch.setenv("GITLAB_TOKEN", "env-token")

            gitlab = GitLab()

            assert gitlab.config.base_url == "https://env.gitlab.test"
            assert gitlab.config.auth_header() == ("Authorization", "Bearer env-token")

        def test_explicit_arguments_win_over_environment(
            self, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("GITLAB_URL", "https://env.gitlab.test")
            monkeypatch.setenv("GITLAB_TOKEN", "env-token")

            gitlab = GitLab(base_url="https://arg.gitlab.test", token="arg-token")

            assert gitlab.config.base_url == "https://arg.gitlab.test"
            assert gitlab.config.token == "arg-token"

        def test_ci_job_token(self, monkeypatch: pytest.MonkeyPatch):
            monkeypatch.setenv("CI_JOB_TOKEN", "job-token")

            gitlab = GitLab()

            assert gitlab.config.auth_header() == ("JOB-TOKEN", "job-token")

        def test_personal_token_preferred_over_job_token(
            self, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("GITLAB_TOKEN", "env-token")
            monkeypatch.setenv("CI_JOB_TOKEN", "job-token")

            assert GitLab().config.token == "env-token"

        def test_without_token(self):
            gitlab = GitLab()

            assert gitlab.config.base_url == "https://gitlab.com"
            assert gitlab.config.auth_header() is None

    class TestExecute:
        def test_request_headers(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str, token: str
        ):
            httpx_mock.add_response(url=f"{api_url}/user", json={"id": 1})

            response = gitlab.execute(RequestSpec(endpoint="/user"))

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.headers["Authorization"] == f"Bearer {token}"
            assert (
                sent_request.headers[HEADER_USER_AGENT]
                == f"gitlab-sdk-python/{SDK_VERSION}"
            )
            assert response.status_code == 200
            assert response.decode() == {"id": 1}

        def test_unauthenticated_request(self, httpx_mock: HTTPXMock, base_url: str):
            httpx_mock.add_response(url=f"{base_url}/api/v4/projects", json=[])

            with GitLab(base_url=base_url) as gitlab:
                gitlab.execute(RequestSpec(endpoint="/projects"))

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert "Authorization" not in sent_request.headers

        def test_error_message_from_body(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
        ):
            httpx_mock.add_response(
                url=f"{api_url}/user", status_code=404, json={"message": "not found"}
            )

            with pytest.raises(GitLabAPIError) as exc_info:
                gitlab.execute(RequestSpec(endpoint="/user"))

            assert exc_info.value.message == "not found"
            assert str(exc_info.value) == "not found"
            assert exc_info.value.status_code == 404
            assert isinstance(exc_info.value, GitLabError)

        @pytest.mark.parametrize(
            "content",
            [b"<html>Not Found</html>", b"", b'{"error": "404"}', b'{"message": {"name": ["taken"]}}'],
        )
        def test_default_error_message(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str, content: bytes
        ):
            httpx_mock.add_response(url=f"{api_url}/user", status_code=404, content=content)

            with pytest.raises(GitLabAPIError) as exc_info:
                gitlab.execute(RequestSpec(endpoint="/user"))

            assert exc_info.value.message == "HTTP response received: 404"
            assert exc_info.value.status_code == 404

        def test_error_keeps_raw_body(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
        ):
            httpx_mock.add_response(url=f"{api_url}/user", status_code=500, text="boom")

            with pytest.raises(GitLabAPIError) as exc_info:
                gitlab.execute(RequestSpec(endpoint="/user"))

            assert exc_info.value.body == "boom"

        def test_request_is_logged_without_token(
            self,
            httpx_mock: HTTPXMock,
            base_url: str,
            api_url: str,
            caplog: pytest.LogCaptureFixture,
        ):
            httpx_mock.add_response(url=f"{api_url}/user", json={"id": 1})
            gitlab = GitLab(base_url=base_url, token="super-secret", debug=True)

            with caplog.at_level(logging.DEBUG, logger="gitlab_sdk"):
                gitlab.execute(RequestSpec(endpoint="/user"))

            assert f"Request: GET {api_url}/user" in caplog.text
            assert "super-secret" not in caplog.text
            gitlab.close()

        def test_fetch(self, httpx_mock: HTTPXMock, gitlab: GitLab, base_url: str):
            url = f"{base_url}/api/v4/projects?page=2&per_page=20"
            httpx_mock.add_response(url=url, json=[{"id": 3}])

            response = gitlab.fetch(url)

            assert response.decode() == [{"id": 3}]
            assert response.request is None

        @pytest.mark.anyio
        async def test_execute_async(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
        ):
            httpx_mock.add_response(
                url=f"{api_url}/user",
                json={"id": 1},
                headers={"X-Request-Id": "abc"},
            )

            response = await gitlab.execute_async(RequestSpec(endpoint="/user"))

            assert response.decode() == {"id": 1}
            assert response.request_id == "abc"

        @pytest.mark.anyio
        async def test_execute_async_error(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
        ):
            httpx_mock.add_response(
                url=f"{api_url}/user", status_code=403, json={"message": "403 Forbidden"}
            )

            with pytest.raises(GitLabAPIError) as exc_info:
                await gitlab.execute_async(RequestSpec(endpoint="/user"))

            assert exc_info.value.message == "403 Forbidden"
            assert exc_info.value.status_code == 403

        @pytest.mark.anyio
        async def test_fetch_async(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
        ):
            httpx_mock.add_response(url=f"{api_url}/user", json={"id": 1})

            response = await gitlab.fetch_async(f"{api_url}/user")

            assert response.decode() == {"id": 1}

    class TestLifecycle:
        def test_context_manager_closes_transport(self, base_url: str):
            transport = HttpxTransport()

            with GitLab(base_url=base_url, transport=transport):
                pass

            assert transport._client.is_closed

        def test_sync_use_never_opens_async_client(
            self, httpx_mock: HTTPXMock, base_url: str, api_url: str
        ):
            httpx_mock.add_response(url=f"{api_url}/user", json={"id": 1})
            transport = HttpxTransport()

            with GitLab(base_url=base_url, transport=transport) as gitlab:
                gitlab.fetch(f"{api_url}/user")

            assert transport._client.is_closed
            assert transport._client_async is None

        @pytest.mark.anyio
        async def test_async_context_manager_closes_transport(
            self, httpx_mock: HTTPXMock, base_url: str, api_url: str
        ):
            httpx_mock.add_response(url=f"{api_url}/user", json={"id": 1})
            transport = HttpxTransport()

            async with GitLab(base_url=base_url, transport=transport) as gitlab:
                await gitlab.fetch_async(f"{api_url}/user")

            assert transport._client.is_closed
            assert transport._client_async is not None
            assert transport._client_async.is_closed
