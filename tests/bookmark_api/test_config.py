import pytest

from bookmark_api.core.config import Settings, validate_runtime_config


def test_settings_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///./other.db')
    monkeypatch.setenv('JWT_EXPIRES_MINUTES', '30')
    monkeypatch.setenv('DATABASE_ECHO', 'yes')
    monkeypatch.setenv('CORS_ORIGINS', 'http://a.test, http://b.test,')
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    settings = Settings.from_env()

    assert settings.database_url == 'sqlite:///./other.db'
    assert settings.jwt_expires_minutes == 30
    assert settings.database_echo is True
    assert settings.cors_origins == ['http://a.test', 'http://b.test']
    assert settings.log_level == 'DEBUG'


def test_validate_runtime_config_refuses_default_secret_in_production() -> None:
    with pytest.raises(RuntimeError):
        validate_runtime_config(Settings(app_env='production'))


def test_validate_runtime_config_allows_default_secret_in_development() -> None:
    validate_runtime_config(Settings(app_env='development'))


def test_validate_runtime_config_rejects_unknown_log_level() -> None:
    with pytest.raises(RuntimeError) as exception_info:
        validate_runtime_config(Settings(log_level='VERBOSE'))

    assert 'LOG_LEVEL' in str(exception_info.value)
