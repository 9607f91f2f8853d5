"""Wire values accepted by the GitLab API for enumerated parameters."""

from enum import Enum, IntEnum


class Sort(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CommitRefType(str, Enum):
    BRANCH = "branch"
    TAG = "tag"
    ALL = "all"


class CommitOrder(str, Enum):
    DEFAULT = "default"
    TOPO = "topo"


class AccessLevel(IntEnum):
    """Access levels used by protected branches."""

    NO_ACCESS = 0
    MINIMAL_ACCESS = 5
    GUEST = 10
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50
    ADMIN = 60


class PipelineStatus(str, Enum):
    CREATED = "created"
    WAITING_FOR_RESOURCE = "waiting_for_resource"
    PREPARING = "preparing"
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"
    SKIPPED = "skipped"
    MANUAL = "manual"
    SCHEDULED = "scheduled"


class PipelineScope(str, Enum):
    RUNNING = "running"
    PENDING = "pending"
    FINISHED = "finished"
    BRANCHES = "branches"
    TAGS = "tags"


class PipelineSource(str, Enum):
    PUSH = "push"
    WEB = "web"
    TRIGGER = "trigger"
    SCHEDULE = "schedule"
    API = "api"
    EXTERNAL = "external"
    PIPELINE = "pipeline"
    CHAT = "chat"
    WEBIDE = "webide"
    MERGE_REQUEST_EVENT = "merge_request_event"
    EXTERNAL_PULL_REQUEST_EVENT = "external_pull_request_event"
    PARENT_PIPELINE = "parent_pipeline"


class PipelineOrder(str, Enum):
    ID = "id"
    STATUS = "status"
    REF = "ref"
    UPDATED_AT = "updated_at"
    USER_ID = "user_id"


class ProjectVisibility(str, Enum):
    PUBLIC = "public"
    INTERNAL = "internal"
    PRIVATE = "private"


class ProjectOrder(str, Enum):
    ID = "id"
    NAME = "name"
    PATH = "path"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    LAST_ACTIVITY_AT = "last_activity_at"
    SIMILARITY = "similarity"


class UsersOrder(str, Enum):
    ID = "id"
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

