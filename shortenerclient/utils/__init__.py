from shortenerclient.utils.config import app_env, app_name, app_prefix, api_base_url, load_config
from shortenerclient.utils.helpers import now_ms, parse_timestamp, format_timestamp, normalize_url, require_environment
from shortenerclient.utils.runtime import running_locally
from shortenerclient.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'api_base_url',
    'load_config',
    'now_ms',
    'parse_timestamp',
    'format_timestamp',
    'normalize_url',
    'require_environment',
    'running_locally',
    'initialize_logging',
]
