"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from capability_dispatch.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_plain_and_braced_references(self):
        with patch.dict(os.environ, {"CAR_KEY": "secret-123"}):
            assert expand_env_vars("$CAR_KEY") == "secret-123"
            assert expand_env_vars("${CAR_KEY}") == "secret-123"

    def test_expand_reference_inside_path(self):
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/capdispatch"}):
            assert expand_env_vars("${LOG_ROOT}/app.log") == "/var/log/capdispatch/app.log"

    def test_unset_reference_is_left_as_written(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$CAPDISPATCH_UNSET_VAR") == "$CAPDISPATCH_UNSET_VAR"

    def test_lists_are_walked(self):
        with patch.dict(os.environ, {"LOG_ROOT": "/logs"}):
            assert expand_env_vars(["$LOG_ROOT/a", "plain"]) == ["/logs/a", "plain"]

    def test_non_string_values_unchanged(self):
        config = {"top_speed": 42, "cache_instances": True, "label": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        with patch.dict(os.environ, {"CAR_KEY": "k1", "LOG_ROOT": "/logs"}):
            config = {
                "logging": {"file": {"path": "$LOG_ROOT/capdispatch.log"}},
                "factory": {"variants": {"car": {"apiKey": "${CAR_KEY}", "topSpeed": 120}}},
            }

            result = expand_config_env_vars(config)

            assert result["logging"]["file"]["path"] == "/logs/capdispatch.log"
            assert result["factory"]["variants"]["car"] == {"apiKey": "k1", "topSpeed": 120}
