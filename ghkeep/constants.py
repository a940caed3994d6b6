"""Application constants - centralized configuration values."""

# =============================================================================
# Credential rules
# =============================================================================
EMAIL_PATTERN = r".+@.+\..+"

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 64

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 32

GITHUB_KEY_MIN_LENGTH = 10
GITHUB_KEY_MAX_LENGTH = 128

# Column sizes (upper bounds of the rules above, email has no rule bound)
EMAIL_MAX_LENGTH = 320

# =============================================================================
# Messages
# =============================================================================
AUTH_FAILED_MESSAGE = "Authentication failed"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
VALIDATION_FAILED_MESSAGE = "Invalid credentials submitted"
STORAGE_FAILURE_MESSAGE = "Account storage is unavailable"

# =============================================================================
# Session & Security
# =============================================================================
SESSION_TIMEOUT_DAYS = 7
SESSION_COOKIE_NAME = "ghkeep_session"

# =============================================================================
# HTTP client
# =============================================================================
HTTPX_TIMEOUT = 10.0
