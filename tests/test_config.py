import pytest
from meal_prep_calculator.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DEFAULT_DIFFICULTY", "DEFAULT_RECIPE_TYPE", "PREFER_SINGLE_SERVE", "LOG_LEVEL"):
        monkeypatch.delenv(f"MEALPREP_{name}", raising=False)


def test_config_defaults():
    config = Config()
    assert config.default_difficulty == "medium"
    assert config.default_recipe_type is None
    assert config.prefer_single_serve is True
    assert config.log_level == "WARNING"


def test_config_reads_env(monkeypatch):
    monkeypatch.setenv("MEALPREP_DEFAULT_DIFFICULTY", "hard")
    monkeypatch.setenv("MEALPREP_DEFAULT_RECIPE_TYPE", "soup")
    monkeypatch.setenv("MEALPREP_PREFER_SINGLE_SERVE", "false")
    config = Config()
    assert config.default_difficulty == "hard"
    assert config.default_recipe_type == "soup"
    assert config.prefer_single_serve is False


def test_config_normalizes_log_level(monkeypatch):
    monkeypatch.setenv("MEALPREP_LOG_LEVEL", "debug")
    assert Config().log_level == "DEBUG"


def test_config_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("MEALPREP_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="log level"):
        Config()


def test_config_rejects_unknown_difficulty(monkeypatch):
    monkeypatch.setenv("MEALPREP_DEFAULT_DIFFICULTY", "impossible")
    with pytest.raises(ValueError):
        Config()
