# Environment variables
ENV_BASE_URL = "GITLAB_URL"
ENV_GITLAB_TOKEN = "GITLAB_TOKEN"
ENV_CI_JOB_TOKEN = "CI_JOB_TOKEN"
ENV_API_VERSION = "GITLAB_API_VERSION"

# Defaults
DEFAULT_BASE_URL = "https://gitlab.com"
DEFAULT_API_VERSION = "4"
DEFAULT_TIMEOUT = 30.0

SDK_VERSION = "0.1.0"

# Request headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_PRIVATE_TOKEN = "PRIVATE-TOKEN"
HEADER_JOB_TOKEN = "JOB-TOKEN"

# Pagination response headers
HEADER_PAGE = "X-Page"
HEADER_PREV_PAGE = "X-Prev-Page"
HEADER_NEXT_PAGE = "X-Next-Page"
HEADER_TOTAL = "X-Total"
HEADER_PER_PAGE = "X-Per-Page"
HEADER_TOTAL_PAGES = "X-Total-Pages"
HEADER_REQUEST_ID = "X-Request-Id"

APPLICATION_JSON = "application/json"
