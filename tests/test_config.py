"""Unit tests for settings loading."""
import pytest

from config import ConfigurationError, Settings, load_settings

REQUIRED = {
    'DYNAMODB_ENDPOINT_URL': 'https://dynamodb.us-east-1.amazonaws.com',
    'AWS_ACCESS_KEY_ID': 'AKIAEXAMPLE',
    'AWS_SECRET_ACCESS_KEY': 'secret'
}


def test_defaults():
    settings = load_settings(dict(REQUIRED))

    assert settings == Settings(
        endpoint_url='https://dynamodb.us-east-1.amazonaws.com',
        aws_access_key_id='AKIAEXAMPLE',
        aws_secret_access_key='secret'
    )
    assert settings.table_name == 'meets'
    assert settings.max_fetch_attempts == 3
    assert settings.write_delay_seconds == 0.5


def test_overrides():
    env = dict(
        REQUIRED,
        TABLE_NAME='meets-staging',
        AWS_REGION='us-west-2',
        TIMEOUT_SECONDS='10',
        MAX_FETCH_ATTEMPTS='5',
        WRITE_DELAY_SECONDS='0'
    )

    settings = load_settings(env)

    assert settings.table_name == 'meets-staging'
    assert settings.region_name == 'us-west-2'
    assert settings.timeout_seconds == 10
    assert settings.max_fetch_attempts == 5
    assert settings.write_delay_seconds == 0.0


@pytest.mark.parametrize('key', sorted(REQUIRED))
def test_missing_required_value(key):
    env = dict(REQUIRED)
    del env[key]

    with pytest.raises(ConfigurationError, match=key):
        load_settings(env)


def test_blank_required_value():
    env = dict(REQUIRED, AWS_SECRET_ACCESS_KEY='   ')

    with pytest.raises(ConfigurationError, match='AWS_SECRET_ACCESS_KEY'):
        load_settings(env)


def test_invalid_number():
    env = dict(REQUIRED, TIMEOUT_SECONDS='soon')

    with pytest.raises(ConfigurationError):
        load_settings(env)


def test_reads_os_environ(monkeypatch):
    for key, value in REQUIRED.items():
        monkeypatch.setenv(key, value)

    assert load_settings().aws_access_key_id == 'AKIAEXAMPLE'


def test_session_token_optional():
    assert load_settings(dict(REQUIRED)).aws_session_token is None
    assert load_settings(dict(REQUIRED, AWS_SESSION_TOKEN='')).aws_session_token is None


def test_session_token_read():
    """Test the temporary-credential token Lambda sets is picked up."""
    settings = load_settings(dict(REQUIRED, AWS_SESSION_TOKEN='lambda-role-token'))

    assert settings.aws_session_token == 'lambda-role-token'
