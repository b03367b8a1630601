"""Utility functions for client configuration management.

Settings that change per deployment are read from the environment; the
persistent store backend is described by a JSON document kept in **AWS
AppConfig**. Each environment (`APP_ENV`) has a dedicated AppConfig
*Environment* within the AppConfig *Application* identified by `APP_NAME`.

The configuration JSON follows this structure:

    {
        "build": 7,
        "active_backend": "redis",
        "configs": {
            "client": {
                "redis": {"host": "...", "port": 6379, "db": 0},
                "memory": {}
            }
        }
    }

When running locally the AppConfig lookup is skipped and the in-memory
backend is used.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key namespace for the persistent store, or None if `APP_NAME` is not set.

    api_base_url() -> str
        Return the backend origin (`SHORTENER_API_URL`).

    load_config(section: str) -> dict
        Load one section of the AppConfig document as `{backend: section_config}`.

Example:
    >>> from shortenerclient.utils.config import load_config
    >>> config = load_config('client')
    >>> config['redis']['host']
    'redis.internal'
"""

import os
import json
import functools
import logging
from collections.abc import Callable

import boto3

from shortenerclient.constants import ENV, DEFAULT_API_BASE_URL
from shortenerclient.exceptions import BadConfigurationError
from shortenerclient.utils.helpers import require_environment
from shortenerclient.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return the key namespace for the persistent store

    Returns:
        str: prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'shortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'shortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def api_base_url() -> str:
    """Return the backend origin without a trailing slash

    Example:
        >>> os.environ['SHORTENER_API_URL'] = 'https://sho.rt/'
        >>> api_base_url()
        'https://sho.rt'
    """
    return (os.environ.get(ENV.App.API_URL) or DEFAULT_API_BASE_URL).rstrip('/')


def _local_config(func: Callable[[str], dict]) -> Callable[[str], dict]:
    """Decorator: serve an in-memory backend config when running locally

    Skips AWS AppConfig entirely so a local client needs no AWS credentials.
    """

    @functools.wraps(func)
    def wrapper(section: str, *args, **kwargs) -> dict:
        if not running_locally():
            return func(section, *args, **kwargs)

        logger.debug('Running locally, using in-memory store config.', extra={'section': section})
        return {'memory': {}}

    return wrapper


def _extract_section(document: dict, section: str) -> dict:
    try:
        backend = document['active_backend']
        return {backend: document['configs'][section][backend]}
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"AppConfig document has no '{section}' config for its active backend.") from e


@_local_config
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(section: str) -> dict:
    """Load one configuration section from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        section (str):
            Name of the configuration section (e.g. "client").

    Returns:
        dict: `{active_backend: section config}`

    Raises:
        MissingEnvironmentVariableError: if an AppConfig identifier is missing.
        BadConfigurationError: if the document lacks the requested section.
        botocore.exceptions.ClientError: on AppConfig API failures.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'section': section})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    try:
        document = json.loads(content.decode('utf-8'))
    except json.JSONDecodeError as e:
        raise BadConfigurationError('AppConfig document is not valid JSON.') from e

    data = _extract_section(document, section)
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'section': section, 'build': document.get('build')})
    return data
