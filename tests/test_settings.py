import pytest

from config.settings import Config, TestConfig, str_to_bool


@pytest.mark.parametrize("raw, expected", [
    ("true", True), ("1", True), (" Yes ", True), ("ON", True),
    ("false", False), ("0", False), ("no", False), ("off", False),
])
def test_str_to_bool(raw, expected):
    assert str_to_bool(raw) is expected


def test_str_to_bool_rejects_garbage():
    with pytest.raises(ValueError):
        str_to_bool("maybe")


def test_test_config_uses_memory_sqlite():
    assert TestConfig.SQLALCHEMY_DATABASE_URI == "sqlite://"
    assert TestConfig.TESTING


def test_app_logger_level_follows_config(app):
    assert app.logger.level == 10  # DEBUG
