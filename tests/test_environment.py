# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Tests for FLYWAY_* environment variable translation."""

import os
from unittest.mock import patch

import pytest

from flyway_config import Configuration, UpgradeRequiredError
from flyway_config.config import ENV_VAR_MAPPING, convert_env_var, environment_to_properties, property_key_to_env_var


class TestEnvVarNames:
    """Test derivation of variable names from property keys."""

    @pytest.mark.parametrize(
        ("key", "env_var"),
        [
            ("flyway.url", "FLYWAY_URL"),
            ("flyway.connectRetries", "FLYWAY_CONNECT_RETRIES"),
            ("flyway.oracle.sqlplusWarn", "FLYWAY_ORACLE_SQLPLUS_WARN"),
            ("flyway.db2z.databaseName", "FLYWAY_DB2Z_DATABASE_NAME"),
            ("flyway.configFiles", "FLYWAY_CONFIG_FILES"),
        ],
    )
    def test_property_key_to_env_var(self, key, env_var):
        assert property_key_to_env_var(key) == env_var
        assert ENV_VAR_MAPPING[env_var] == key

    def test_dry_run_alias(self):
        assert convert_env_var("FLYWAY_DRYRUN_OUTPUT") == "flyway.dryRunOutput"
        assert convert_env_var("FLYWAY_DRY_RUN_OUTPUT") == "flyway.dryRunOutput"

    def test_placeholder_names_lowercased(self):
        assert convert_env_var("FLYWAY_PLACEHOLDERS_DB_NAME") == "flyway.placeholders.db_name"

    def test_jdbc_property_names_keep_case(self):
        assert convert_env_var("FLYWAY_JDBC_PROPERTIES_sslMode") == "flyway.jdbcProperties.sslMode"

    def test_unknown_variable(self):
        assert convert_env_var("FLYWAY_NOT_A_SETTING") is None
        assert convert_env_var("FLYWAY_PLACEHOLDERS_") is None


class TestEnvironmentToProperties:
    """Test collection of variables into a property mapping."""

    def test_collects_known_variables(self):
        environ = {
            "FLYWAY_URL": "jdbc:h2:mem:test",
            "FLYWAY_SCHEMAS": "a,b",
            "FLYWAY_PLACEHOLDERS_ENV": "prod",
            "FLYWAY_NOT_A_SETTING": "x",
            "PATH": "/usr/bin",
        }

        assert environment_to_properties(environ) == {
            "flyway.url": "jdbc:h2:mem:test",
            "flyway.schemas": "a,b",
            "flyway.placeholders.env": "prod",
        }

    def test_loader_keys_excluded_by_default(self):
        environ = {"FLYWAY_CONFIG_FILES": "a.conf", "FLYWAY_TABLE": "t"}

        assert environment_to_properties(environ) == {"flyway.table": "t"}
        assert environment_to_properties(environ, include_loader_keys=True) == {
            "flyway.configFiles": "a.conf",
            "flyway.table": "t",
        }

    def test_reads_process_environment(self):
        with patch.dict(os.environ, {"FLYWAY_TABLE": "from_env"}):
            assert environment_to_properties() == {"flyway.table": "from_env"}


class TestConfigureFromEnv:
    """Test applying the environment to a configuration."""

    def test_configure_from_env(self, configuration):
        configuration.configure_from_env(
            {
                "FLYWAY_URL": "jdbc:h2:mem:test",
                "FLYWAY_USER": "sa",
                "FLYWAY_CONNECT_RETRIES": "4",
                "FLYWAY_CONFIG_FILES": "ignored.conf",
            },
        )

        assert configuration.connect_retries == 4
        assert configuration.connection.user == "sa"

    def test_gated_variable_fails_in_community(self, configuration):
        with pytest.raises(UpgradeRequiredError):
            configuration.configure_from_env({"FLYWAY_STREAM": "true"})

    def test_process_environment_is_default(self):
        configuration = Configuration()

        with patch.dict(os.environ, {"FLYWAY_MIXED": "true"}):
            configuration.configure_from_env()

        assert configuration.mixed is True
