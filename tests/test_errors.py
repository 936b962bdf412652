"""Error hierarchy and formatting tests."""

from spanmark.errors import ConfigError, SpanmarkError


class TestConfigError:
    def test_message_format(self) -> None:
        err = ConfigError("kinds", "emoji", "unknown text kind")
        assert str(err) == "Config 'kinds': unknown text kind (got 'emoji')"

    def test_attributes(self) -> None:
        err = ConfigError("kinds", 3.5, "bad")
        assert err.key == "kinds"
        assert err.value == 3.5

    def test_is_spanmark_error(self) -> None:
        assert isinstance(ConfigError("k", None, "m"), SpanmarkError)
