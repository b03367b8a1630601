from enum import StrEnum


class History:
    """Visitor link history limits."""

    CAPACITY = 50  # Most recent links kept in the local history


class Routes:
    """Client-side entry points."""

    LOGIN = '/admin'  # Where an invalidated session is sent


class StorageKey(StrEnum):
    """Key names used in the persistent key-value store."""

    ADMIN_TOKEN = 'admin_token'
    TOKEN_EXPIRES_AT = 'token_expires_at'  # unix seconds, stored as a string
    USER_LINKS = 'user_links'  # JSON array of link records


class Endpoint(StrEnum):
    """Backend HTTP endpoints (relative to the API origin)."""

    SHORTEN = '/api/shorten'
    ADMIN_LOGIN = '/api/admin/login'
    ADMIN_MY_LINKS = '/api/admin/my'
    ADMIN_USER_LINKS = '/api/admin/users'
    ADMIN_LINKS = '/api/admin/links'
    ADMIN_LOGINS = '/api/admin/logins'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOCAL = 'SHORTENER_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        API_URL = 'SHORTENER_API_URL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'


# Default backend origin (the service listens on :8080 unless configured otherwise)
DEFAULT_API_BASE_URL = 'http://localhost:8080'

# Configuration section read from AppConfig by the client
CLIENT_CONFIG_SECTION = 'client'

# User-facing fallback messages when the backend gives no reason
SHORTEN_FAILED_MESSAGE = 'Failed to shorten link. Please try again.'
LOGIN_FAILED_MESSAGE = 'Login failed. Check your credentials.'
CREATE_LINK_FAILED_MESSAGE = 'Failed to create link'
