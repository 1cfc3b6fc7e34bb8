import pytest
from config.settings import load_settings, ConfigurationError, Settings, ViewConfig
from dop.util import views

def test_load_settings_defaults(clean_env):
    """Test defaults when no variables are set."""
    settings = load_settings()

    assert isinstance(settings, Settings)
    assert settings.view.duplicate_key_policy == "error"
    assert settings.factory.include_properties is True
    assert settings.factory.include_private is False
    assert settings.log_level == "INFO"

def test_load_settings_success(mock_env):
    """Test loading settings with valid environment variables."""
    settings = load_settings()

    assert settings.view.duplicate_key_policy == "last"
    assert settings.factory.include_properties is False
    assert settings.factory.include_private is True
    assert settings.log_level == "DEBUG"

def test_load_settings_invalid_policy(clean_env, monkeypatch):
    """Test error when the duplicate key policy is unknown."""
    monkeypatch.setenv("DOP_DUPLICATE_KEYS", "merge")

    with pytest.raises(ConfigurationError, match="DOP_DUPLICATE_KEYS"):
        load_settings()

def test_load_settings_invalid_bool(clean_env, monkeypatch):
    """Test error when a boolean variable cannot be parsed."""
    monkeypatch.setenv("DOP_INCLUDE_PRIVATE", "maybe")

    with pytest.raises(ConfigurationError, match="DOP_INCLUDE_PRIVATE must be a boolean"):
        load_settings()

def test_load_settings_invalid_log_level(clean_env, monkeypatch):
    """Test error when the log level is unknown."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        load_settings()

def test_env_file(clean_env, monkeypatch):
    """Test values are read from an explicit .env file."""
    env_file = clean_env / "custom.env"
    env_file.write_text(
        "# comment\n"
        "\n"
        "DOP_DUPLICATE_KEYS=\"first\"\n"
        "not a setting\n"
        "DOP_INCLUDE_PROPERTIES='no'\n"
    )
    monkeypatch.delenv("DOP_DUPLICATE_KEYS", raising=False)
    monkeypatch.delenv("DOP_INCLUDE_PROPERTIES", raising=False)

    settings = load_settings(env_file=env_file)

    assert settings.view.duplicate_key_policy == "first"
    assert settings.factory.include_properties is False

def test_default_env_file(clean_env, monkeypatch):
    """Test .env in the working directory is picked up."""
    (clean_env / ".env").write_text("DOP_INCLUDE_PRIVATE=yes\n")
    monkeypatch.delenv("DOP_INCLUDE_PRIVATE", raising=False)

    assert load_settings().factory.include_private is True

def test_environment_overrides_env_file(clean_env, monkeypatch):
    """Test existing environment variables win over the file."""
    env_file = clean_env / "custom.env"
    env_file.write_text("DOP_DUPLICATE_KEYS=first\n")
    monkeypatch.setenv("DOP_DUPLICATE_KEYS", "last")

    assert load_settings(env_file=env_file).view.duplicate_key_policy == "last"

def test_view_config_validates():
    """Test the dataclass rejects bad values directly."""
    with pytest.raises(ConfigurationError):
        ViewConfig(duplicate_key_policy="sometimes")

def test_view_config_accepts_view_policies():
    """Test every policy the view constructors know is a valid setting."""
    for policy in views.DUPLICATE_KEY_POLICIES:
        assert ViewConfig(duplicate_key_policy=policy).duplicate_key_policy == policy
