"""Default values applied when a target leaves a field unset."""

# Render target paths and refs
DEFAULT_BRANCH_PREFIX = "ci/metrics-refresh-"
DEFAULT_OUTPUT_DIR = "metrics"
DEFAULT_TEMP_DIR = ".metrics-tmp"
DEFAULT_EXTENSION = "svg"

DEFAULT_TIME_ZONE = "Asia/Ho_Chi_Minh"
DEFAULT_CONTRIBUTORS_BRANCH = "main"

# Profile owner whose dashboard includes private repositories unless told otherwise
PRIVATE_PROFILE_OWNER = "RAprogramm"

# Badge
DEFAULT_BADGE_STYLE = "classic"
DEFAULT_BADGE_COLUMNS = 1
DEFAULT_BADGE_ALIGNMENT = "start"
DEFAULT_BADGE_BORDER_RADIUS = 4
MIN_BADGE_COLUMNS = 1
MAX_BADGE_COLUMNS = 4
MIN_BADGE_BORDER_RADIUS = 0
MAX_BADGE_BORDER_RADIUS = 32

# Open-source workflow
DEFAULT_OPEN_SOURCE_REPOSITORIES = ("masterror", "telegram-webapp-sdk")

# Profile render workflow
DEFAULT_PROFILE_SLUG = "profile"
DEFAULT_PROFILE_DISPLAY_NAME = "profile"

# Environment
LOG_LEVEL_ENV = "METRICS_ORCHESTRATOR_LOG_LEVEL"
GITHUB_REPOSITORY_ENV = "GITHUB_REPOSITORY"
