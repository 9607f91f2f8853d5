from os import environ as env
from typing import Optional, Tuple

from .constants import (
    ENV_API_VERSION,
    ENV_BASE_URL,
    ENV_CI_JOB_TOKEN,
    ENV_GITLAB_TOKEN,
)


def resolve_config(
    base_url: Optional[str],
    token: Optional[str],
    token_type: Optional[str] = None,
    api_version: Optional[str] = None,
) -> Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]:
    """Resolve connection settings from explicit values and the environment.

    Explicit arguments win. Otherwise ``GITLAB_URL``, ``GITLAB_TOKEN`` and
    ``GITLAB_API_VERSION`` are read; inside a CI job with no personal token,
    ``CI_JOB_TOKEN`` is used with the ``job`` token type.

    Returns:
        The base URL, token, token type and API version; ``None`` entries are
        left to the configuration defaults.
    """
    base_url_value = base_url or env.get(ENV_BASE_URL)
    api_version_value = api_version or env.get(ENV_API_VERSION)

    if token:
        return base_url_value, token, token_type, api_version_value

    env_token = env.get(ENV_GITLAB_TOKEN)
    if env_token:
        return base_url_value, env_token, token_type, api_version_value

    job_token = env.get(ENV_CI_JOB_TOKEN)
    if job_token:
        return base_url_value, job_token, token_type or "job", api_version_value

    return base_url_value, None, token_type, api_version_value
