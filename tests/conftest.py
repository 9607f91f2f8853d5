from typing import Generator

import pytest

from gitlab_sdk import Config, GitLab


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("GITLAB_URL", raising=False)
    monkeypatch.delenv("GITLAB_TOKEN", raising=False)
    monkeypatch.delenv("CI_JOB_TOKEN", raising=False)
    monkeypatch.delenv("GITLAB_API_VERSION", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://gitlab.test"


@pytest.fixture
def token() -> str:
    return "glpat-secret"


@pytest.fixture
def api_url(base_url: str) -> str:
    return f"{base_url}/api/v4"


@pytest.fixture
def config(base_url: str, token: str) -> Config:
    return Config(base_url=base_url, token=token)


@pytest.fixture
def gitlab(base_url: str, token: str) -> Generator[GitLab, None, None]:
    client = GitLab(base_url=base_url, token=token)
    yield client
    client.close()
