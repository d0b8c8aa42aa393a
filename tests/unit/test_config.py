"""Unit tests for configuration management."""

import pytest
import yaml

from prt7_decoder.config.defaults import get_default_config
from prt7_decoder.config.loader import ConfigLoader
from prt7_decoder.config.validation import ConfigValidator
from prt7_decoder.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.serial.port == "/dev/ttyUSB0"
        assert config.serial.baudrate == 9600
        assert config.serial.timeout is None
        assert config.session.frame_budget == 14
        assert config.session.strict_rotation is False
        assert config.output.format == "pretty"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_defaults_only(self) -> None:
        loader = ConfigLoader.create()
        assert loader.config_path is None
        assert loader.load() == get_default_config()

    def test_missing_file_rejected(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path / "absent.yaml")
        with pytest.raises(ConfigurationError, match="does not exist"):
            loader.load()

    def test_yaml_syntax_error_rejected(self, tmp_path) -> None:
        path = tmp_path / "prt7.yaml"
        path.write_text("serial: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(path).load()
        assert exc_info.value.context["path"] == str(path)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_file_overrides_defaults(self, tmp_path) -> None:
        path = tmp_path / "prt7.yaml"
        path.write_text(yaml.safe_dump({
            "serial": {"port": "/dev/ttyACM0", "baudrate": 115200},
            "session": {"frame_budget": 40},
        }))

        config = ConfigLoader.create(path).load()

        assert config.serial.port == "/dev/ttyACM0"
        assert config.serial.baudrate == 115200
        assert config.serial.parity == "N"
        assert config.session.frame_budget == 40

    def test_namespaced_file(self, tmp_path) -> None:
        path = tmp_path / "prt7.yaml"
        path.write_text("prt7:\n  session:\n    strict_rotation: true\n")
        assert ConfigLoader.create(path).load().session.strict_rotation is True

    def test_explicit_overrides_beat_file(self, tmp_path) -> None:
        path = tmp_path / "prt7.yaml"
        path.write_text("serial:\n  port: /dev/ttyS1\n  baudrate: 19200\n")

        config = ConfigLoader.create(path).load({"serial": {"port": "/dev/ttyS2"}})

        assert config.serial.port == "/dev/ttyS2"
        assert config.serial.baudrate == 19200

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "prt7.yaml"
        path.write_text("")
        assert ConfigLoader.create(path).load() == get_default_config()

    def test_non_mapping_file(self, tmp_path) -> None:
        path = tmp_path / "prt7.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(path).load()

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create().load({"serial": {"flow": "rts"}, "extra": {}})
        assert sorted(exc_info.value.errors) == ["extra", "serial.flow"]

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create().load({"serial": {"baudrate": 1200}})
        assert exc_info.value.errors[0].field == "serial.baudrate"


class TestConfigValidator:
    """Test suite for configuration validator."""

    def test_valid_config(self) -> None:
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []

    @pytest.mark.parametrize("params,field", [
        ({"baudrate": 1234}, "serial.baudrate"),
        ({"baudrate": "9600"}, "serial.baudrate"),
        ({"parity": "X"}, "serial.parity"),
        ({"stopbits": 3}, "serial.stopbits"),
        ({"stopbits": True}, "serial.stopbits"),
        ({"timeout": -1}, "serial.timeout"),
        ({"settle_seconds": -0.5}, "serial.settle_seconds"),
        ({"reset_device": "yes"}, "serial.reset_device"),
        ({"max_line_length": 0}, "serial.max_line_length"),
        ({"port": ""}, "serial.port"),
    ])
    def test_invalid_serial_params(self, params, field) -> None:
        errors = ConfigValidator.validate_serial_params(params)
        assert [e.field for e in errors] == [field]

    def test_timeout_may_be_null(self) -> None:
        assert ConfigValidator.validate_serial_params({"timeout": None}) == []

    def test_invalid_session_params(self) -> None:
        errors = ConfigValidator.validate_session_params({"frame_budget": 0, "strict_rotation": 1})
        assert [e.field for e in errors] == ["session.frame_budget", "session.strict_rotation"]

    def test_invalid_logging_and_output(self) -> None:
        errors = ConfigValidator.validate_config({
            "logging": {"level": "LOUD"},
            "output": {"format": "xml"},
        })
        assert [e.field for e in errors] == ["logging.level", "output.format"]
