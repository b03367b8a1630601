class ShortenerClientError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortener_client_error'


class ValidationError(ShortenerClientError):
    """Raised when user input is rejected before reaching the network."""

    error_code = 'app:validation_error'


class SessionLoadingError(ShortenerClientError):
    """Raised when a protected operation runs before the session is initialized."""

    error_code = 'session:session_loading_error'


class APIError(ShortenerClientError):
    """Raised when the backend answers with an error status."""

    error_code = 'api:api_error'

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthorizationError(APIError):
    """Raised after a 401 response; the session has already been invalidated."""

    error_code = 'api:authorization_error'


class ConfigurationError(ShortenerClientError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the client is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
