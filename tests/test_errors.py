"""Tests for the errors module."""

from appconfig.errors import ConfigError, InvalidIntegerError, MissingRequiredError


class TestInvalidIntegerError:
    def test_attributes(self):
        err = InvalidIntegerError("PAGE", "abc")
        assert err.key == "PAGE"
        assert err.raw_value == "abc"

    def test_message_names_key_and_value(self):
        msg = str(InvalidIntegerError("SMTP_PORT", "5x"))
        assert "SMTP_PORT" in msg
        assert "'5x'" in msg

    def test_is_config_error(self):
        assert isinstance(InvalidIntegerError("PAGE", ""), ConfigError)


class TestMissingRequiredError:
    def test_attributes(self):
        assert MissingRequiredError("DB_URI").key == "DB_URI"

    def test_message(self):
        msg = str(MissingRequiredError("DB_URI"))
        assert msg == "DB_URI is required but empty; set it in .env or environment"

    def test_is_config_error(self):
        assert isinstance(MissingRequiredError("DB_URI"), ConfigError)
