from pathlib import Path

import pytest
from pydantic import ValidationError

from hydroconf.config.defaults import SECRETS_FILE_NAMES, SETTINGS_FILE_NAMES
from hydroconf.config.settings import HydroSettings


def test_defaults():
    settings = HydroSettings()
    assert settings.root_path is None
    assert settings.envvar_prefix is None
    assert settings.envvar_separator == "__"
    assert settings.encoding == "utf-8"
    assert settings.settings_candidates() == SETTINGS_FILE_NAMES
    assert settings.secrets_candidates() == SECRETS_FILE_NAMES


def test_root_path_coerced_to_path():
    settings = HydroSettings(root_path="/srv/app")
    assert settings.root_path == Path("/srv/app")


def test_settings_are_frozen():
    settings = HydroSettings()
    with pytest.raises(ValidationError):
        settings.root_path = Path("/elsewhere")     # type: ignore[misc]


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        HydroSettings(root="/srv/app")              # type: ignore[call-arg]


def test_custom_file_names_narrow_candidates():
    settings = HydroSettings(settings_file="app.yaml", secrets_file="vault.json")
    assert settings.settings_candidates() == ("app.yaml",)
    assert settings.secrets_candidates() == ("vault.json",)


@pytest.mark.parametrize("name", ["", "conf/settings.toml"])
def test_file_names_must_be_bare(name):
    with pytest.raises(ValidationError):
        HydroSettings(settings_file=name)


def test_empty_envvar_prefix_rejected():
    with pytest.raises(ValidationError):
        HydroSettings(envvar_prefix="")
    with pytest.raises(ValidationError):
        HydroSettings(envvar_separator="")
