import logging

from envmerge import Store, create_store
from envmerge.config import Settings, load_settings, settings_from_env
from envmerge.logging_utils import get_logger


def test_defaults(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("ENVMERGE_LOG_DIR", raising=False)
    monkeypatch.delenv("ENVMERGE_LOG_LEVEL", raising=False)
    s = settings_from_env()
    assert s.environment == "development"
    assert s.log_dir is None
    assert s.log_level == "INFO"


def test_environment_from_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", " production ")
    assert settings_from_env().environment == "production"


def test_custom_env_var(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "test")
    s = settings_from_env(env_var="NODE_ENV")
    assert s.environment == "test"
    assert s.env_var == "NODE_ENV"


def test_log_settings(monkeypatch, tmp_path):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("ENVMERGE_LOG_DIR", str(log_dir))
    monkeypatch.setenv("ENVMERGE_LOG_LEVEL", "debug")
    s = load_settings(dotenv=False)
    assert s.log_level == "DEBUG"
    assert log_dir.is_dir()


def test_dotenv_file(monkeypatch, tmp_path):
    # setenv first so monkeypatch restores the variable's absence afterwards
    monkeypatch.setenv("APP_ENV", "placeholder")
    monkeypatch.delenv("APP_ENV")
    (tmp_path / ".env").write_text("APP_ENV=staging\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_settings().environment == "staging"


def test_process_env_wins_over_dotenv(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "production")
    (tmp_path / ".env").write_text("APP_ENV=staging\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_settings().environment == "production"


def test_asdict():
    assert Settings(environment="test").asdict()["environment"] == "test"


def test_get_logger_is_cached():
    logger = get_logger("envmerge.tests.cached")
    assert get_logger("envmerge.tests.cached") is logger
    assert len(logger.handlers) == 1


def test_get_logger_with_file(tmp_path):
    logger = get_logger("envmerge.tests.file", log_dir=str(tmp_path), level="DEBUG")
    assert logger.level == logging.DEBUG
    assert (tmp_path / "envmerge.tests.file.log").exists()


def test_cached_logger_takes_later_level_and_log_dir(tmp_path):
    logger = get_logger("envmerge.tests.later")
    assert logger.level == logging.INFO

    again = get_logger("envmerge.tests.later", log_dir=str(tmp_path), level="DEBUG")
    assert again is logger
    assert logger.level == logging.DEBUG
    assert (tmp_path / "envmerge.tests.later.log").exists()

    # no level given: keep what was configured, no duplicate file handler
    get_logger("envmerge.tests.later", log_dir=str(tmp_path))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2


def test_create_store_applies_log_level_after_default_store():
    Store("test")
    store = create_store(Settings(environment="test", log_level="DEBUG"))
    try:
        assert store.logger.level == logging.DEBUG
        Store("test")
        assert store.logger.level == logging.DEBUG
    finally:
        store.logger.setLevel(logging.INFO)
