import pytest
from pydantic import ValidationError

from env_scream.config import DetectorConfig, get_config, reset_config


class TestDetectorConfig:
    def test_defaults(self):
        config = DetectorConfig()
        assert config.env_filename == ".env"
        assert config.placeholder_value == "your_value_here"
        assert config.rule_width == 40
        assert config.log_level == "WARNING"

    def test_log_level_is_normalized(self):
        assert DetectorConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            DetectorConfig(log_level="LOUD")

    def test_rule_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            DetectorConfig(rule_width=0)

    def test_blank_env_filename_rejected(self):
        with pytest.raises(ValidationError):
            DetectorConfig(env_filename="  ")

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            DetectorConfig(json_output=True)


class TestGetConfig:
    def test_is_cached(self):
        assert get_config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
