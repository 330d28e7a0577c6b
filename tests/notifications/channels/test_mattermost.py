import pytest

from update_reporter.notifications import (
    InvalidConfigurationError,
    MissingConfigurationError,
)
from update_reporter.notifications.channels import Mattermost


@pytest.fixture
def subject(behavior):
    return Mattermost("https://example.org", "foo", "baz").set_behavior(behavior)


def test_constructor_rejects_empty_url():
    with pytest.raises(InvalidConfigurationError) as excinfo:
        Mattermost("", "foo")
    assert excinfo.value.field == "URL"


def test_constructor_rejects_invalid_url():
    with pytest.raises(InvalidConfigurationError) as excinfo:
        Mattermost("foo", "foo")
    assert excinfo.value.field == "URL"


@pytest.mark.parametrize("channel", ["", "   "])
def test_constructor_rejects_blank_channel_name(channel):
    with pytest.raises(InvalidConfigurationError) as excinfo:
        Mattermost("https://example.org", channel)
    assert excinfo.value.field == "channel name"


@pytest.mark.parametrize(
    "configuration",
    [
        {},
        {"mattermost": {}},
        {"mattermost": {"channel": "foo"}},
    ],
    ids=["no service configuration", "empty service configuration", "missing URL"],
)
def test_from_configuration_requires_url(configuration):
    with pytest.raises(MissingConfigurationError) as excinfo:
        Mattermost.from_configuration(configuration)
    assert excinfo.value.field == "URL"
    assert excinfo.value.env_var == "MATTERMOST_URL"
    assert excinfo.value.settings_key == "mattermost.url"


def test_from_configuration_requires_channel_name():
    with pytest.raises(MissingConfigurationError) as excinfo:
        Mattermost.from_configuration({"mattermost": {"url": "https://example.org"}})
    assert excinfo.value.field == "channel name"
    assert excinfo.value.env_var == "MATTERMOST_CHANNEL"


def test_from_configuration_rejects_blank_channel_from_environment(monkeypatch):
    monkeypatch.setenv("MATTERMOST_CHANNEL", "")
    with pytest.raises(InvalidConfigurationError):
        Mattermost.from_configuration(
            {"mattermost": {"url": "https://example.org", "channel": "foo"}}
        )


def test_from_configuration_reads_settings_file():
    subject = Mattermost.from_configuration(
        {
            "mattermost": {
                "url": "https://example.org",
                "channel": "foo",
                "username": "baz",
            }
        }
    )
    assert subject.url == "https://example.org"
    assert subject.channel_name == "foo"
    assert subject.username == "baz"


def test_from_configuration_reads_environment_variables(monkeypatch):
    monkeypatch.setenv("MATTERMOST_URL", "https://example.org")
    monkeypatch.setenv("MATTERMOST_CHANNEL", "foo")
    monkeypatch.setenv("MATTERMOST_USERNAME", "baz")
    subject = Mattermost.from_configuration({})
    assert subject.url == "https://example.org"
    assert subject.channel_name == "foo"
    assert subject.username == "baz"


def test_environment_variables_override_settings_file(monkeypatch):
    monkeypatch.setenv("MATTERMOST_URL", "https://env.example.org")
    monkeypatch.setenv("MATTERMOST_USERNAME", "env-bot")
    subject = Mattermost.from_configuration(
        {
            "mattermost": {
                "url": "https://config.example.org",
                "channel": "config-channel",
                "username": "config-bot",
            }
        }
    )
    assert subject.url == "https://env.example.org"
    assert subject.channel_name == "config-channel"
    assert subject.username == "env-bot"


def test_username_is_optional():
    subject = Mattermost.from_configuration(
        {"mattermost": {"url": "https://example.org", "channel": "foo"}}
    )
    assert subject.username is None


@pytest.mark.parametrize(
    "configuration,env,expected",
    [
        ({}, None, False),
        ({"mattermost": {}}, None, False),
        ({"mattermost": {"enable": True}}, None, True),
        ({"mattermost": {"enable": True}}, "0", True),
        ({"mattermost": {"enable": False}}, "1", True),
        ({"mattermost": {}}, "1", True),
        ({}, "1", True),
    ],
)
def test_is_enabled(monkeypatch, configuration, env, expected):
    if env is not None:
        monkeypatch.setenv("MATTERMOST_ENABLE", env)
    assert Mattermost.is_enabled(configuration) is expected


def test_deliver_skips_empty_result(subject, buffer, empty_result, block_real_webhook_requests):
    assert subject.deliver(empty_result) is True
    assert "Skipped Mattermost report." in buffer.get_output()
    block_real_webhook_requests.assert_not_called()


@pytest.mark.parametrize(
    "insecure,expected_notice",
    [(False, ""), (True, " :warning: **`insecure`**")],
    ids=["secure package", "insecure package"],
)
def test_deliver_sends_report(
    subject, buffer, result_factory, block_real_webhook_requests, insecure, expected_notice
):
    assert subject.deliver(result_factory(("foo/foo", insecure))) is True
    assert "Mattermost report was successful." in buffer.get_output()

    payload = block_real_webhook_requests.call_args.kwargs["json"]
    assert payload["channel"] == "foo"
    assert payload["username"] == "baz"
    assert payload["attachments"][0]["color"] == "#EE0000"

    text = payload["attachments"][0]["text"]
    assert text.startswith("#### :rotating_light: 1 outdated package\n")
    assert (
        "| [foo/foo](https://packagist.org/packages/foo/foo#1.0.5) | 1.0.0 "
        f"| **1.0.5**{expected_notice} |"
    ) in text
    if not insecure:
        assert ":warning:" not in text


def test_payload_without_username(result_factory, block_real_webhook_requests):
    Mattermost("https://example.org", "foo").deliver(result_factory(("foo/foo", False)))
    assert "username" not in block_real_webhook_requests.call_args.kwargs["json"]


def test_title_is_pluralized(subject, result_factory):
    text = subject.render_text(result_factory(("foo/foo", False), ("bar/bar", False)))
    assert "2 outdated packages" in text


def test_deliver_prints_error_on_rejected_report(
    subject, buffer, outdated_result, block_real_webhook_requests
):
    block_real_webhook_requests.return_value.status_code = 404
    assert subject.deliver(outdated_result) is False
    assert "Error during Mattermost report." in buffer.get_output()
