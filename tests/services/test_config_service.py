import json
import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from update_reporter.services import ConfigService
from update_reporter.services.config_schema import ReporterSettings


@pytest.fixture
def composer_json(tmp_path):
    def _write(content):
        path = tmp_path / "composer.json"
        path.write_text(json.dumps(content))
        return str(path)

    return _write


def test_init_default_path():
    service = ConfigService()
    assert service._path == Path("composer.json")


def test_init_custom_path():
    service = ConfigService("/custom/path.yaml")
    assert service._path == Path("/custom/path.yaml")


def test_load_config_from_composer_extra(composer_json):
    path = composer_json(
        {
            "name": "vendor/project",
            "extra": {
                "update-check": {
                    "slack": {"enable": True, "url": "https://example.org"},
                }
            },
        }
    )
    config = ConfigService(path).load_config()
    assert isinstance(config, ReporterSettings)
    assert config.slack.enable is True
    assert config.slack.url == "https://example.org"
    assert config.mattermost is None


def test_load_config_from_yaml_top_level(tmp_path):
    path = tmp_path / "reporter.yaml"
    path.write_text(
        yaml.dump(
            {
                "update-check": {
                    "mattermost": {
                        "enable": True,
                        "url": "https://example.org",
                        "channel": "updates",
                    }
                }
            }
        )
    )
    configuration = ConfigService(str(path)).load_reporter_configuration()
    assert configuration == {
        "mattermost": {
            "enable": True,
            "url": "https://example.org",
            "channel": "updates",
        }
    }


def test_unset_keys_are_removed(composer_json):
    path = composer_json({"extra": {"update-check": {"slack": {"url": "https://x.org"}}}})
    configuration = ConfigService(path).load_reporter_configuration()
    assert configuration == {"slack": {"enable": False, "url": "https://x.org"}}


def test_unknown_services_and_keys_are_kept(composer_json):
    path = composer_json(
        {
            "extra": {
                "update-check": {
                    "custom": {"enable": True, "token": "abc"},
                    "slack": {"url": "https://x.org", "icon": ":robot:"},
                }
            }
        }
    )
    configuration = ConfigService(path).load_reporter_configuration()
    assert configuration["custom"] == {"enable": True, "token": "abc"}
    assert configuration["slack"]["icon"] == ":robot:"


@pytest.mark.parametrize(
    "content",
    [{}, {"name": "vendor/project"}, {"extra": {}}, {"extra": {"update-check": "nope"}}],
)
def test_missing_section_gives_empty_configuration(composer_json, content):
    assert ConfigService(composer_json(content)).load_reporter_configuration() == {}


def test_load_config_empty_yaml_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert ConfigService(str(path)).load_reporter_configuration() == {}


def test_load_config_file_not_found():
    service = ConfigService("/non/existent/composer.json")
    with pytest.raises(FileNotFoundError):
        service.load_config()


def test_load_config_invalid_section(composer_json):
    path = composer_json({"extra": {"update-check": {"slack": "https://x.org"}}})
    with pytest.raises(ValidationError):
        ConfigService(path).load_config()


def test_get_config_path():
    with tempfile.NamedTemporaryFile() as temp:
        service = ConfigService(temp.name)
        path = service.get_config_path()
        assert path == str(Path(temp.name).absolute())
