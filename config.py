"""Runtime settings for the meets sync, read from environment variables."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

REQUIRED_KEYS = (
    'DYNAMODB_ENDPOINT_URL',
    'AWS_ACCESS_KEY_ID',
    'AWS_SECRET_ACCESS_KEY',
)


class ConfigurationError(ValueError):
    """Raised when required settings are missing or malformed."""


@dataclass(frozen=True)
class Settings:
    endpoint_url: str
    aws_access_key_id: str
    aws_secret_access_key: str
    aws_session_token: Optional[str] = None
    region_name: str = 'us-east-1'
    table_name: str = 'meets'
    timeout_seconds: int = 30
    max_fetch_attempts: int = 3
    write_delay_seconds: float = 0.5


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a required value is missing or a numeric
            value can't be parsed
    """
    env = os.environ if environ is None else environ

    missing = [key for key in REQUIRED_KEYS if not (env.get(key) or '').strip()]
    if missing:
        raise ConfigurationError(
            f"Missing store credentials. Please set {', '.join(missing)}"
        )

    try:
        timeout_seconds = int(env.get('TIMEOUT_SECONDS', '30'))
        max_fetch_attempts = int(env.get('MAX_FETCH_ATTEMPTS', '3'))
        write_delay_seconds = float(env.get('WRITE_DELAY_SECONDS', '0.5'))
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    return Settings(
        endpoint_url=env['DYNAMODB_ENDPOINT_URL'].strip(),
        aws_access_key_id=env['AWS_ACCESS_KEY_ID'].strip(),
        aws_secret_access_key=env['AWS_SECRET_ACCESS_KEY'].strip(),
        aws_session_token=(env.get('AWS_SESSION_TOKEN') or '').strip() or None,
        region_name=env.get('AWS_REGION', 'us-east-1'),
        table_name=env.get('TABLE_NAME', 'meets'),
        timeout_seconds=timeout_seconds,
        max_fetch_attempts=max_fetch_attempts,
        write_delay_seconds=write_delay_seconds
    )
