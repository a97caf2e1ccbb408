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

"""Tests for the Configuration defaults, setters and field invariants."""

import logging

import pytest

from flyway_config import (
    ClassLoadingContext,
    Configuration,
    ConfigurationError,
    ConnectionDescriptor,
    Edition,
    MigrationVersion,
)

from extension_fixtures import BeforeMigrateCallback, CreateUsersMigration, RecordingCallback, StaticResolver


class TestDefaults:
    """Test the documented default values."""

    def test_defaults(self, configuration):
        assert configuration.locations == ["db/migration"]
        assert configuration.encoding == "utf-8"
        assert configuration.table == "flyway_schema_history"
        assert configuration.schemas == []
        assert configuration.default_schema is None
        assert configuration.target is MigrationVersion.LATEST
        assert configuration.baseline_version == MigrationVersion.from_version("1")
        assert configuration.baseline_description == "<< Flyway Baseline >>"
        assert configuration.placeholder_prefix == "${"
        assert configuration.placeholder_suffix == "}"
        assert configuration.placeholder_replacement is True
        assert configuration.placeholders == {}
        assert configuration.sql_migration_prefix == "V"
        assert configuration.undo_sql_migration_prefix == "U"
        assert configuration.repeatable_sql_migration_prefix == "R"
        assert configuration.sql_migration_separator == "__"
        assert configuration.sql_migration_suffixes == [".sql"]
        assert configuration.connect_retries == 0
        assert configuration.lock_retry_count == 50
        assert configuration.ignore_future_migrations is True
        assert configuration.ignore_missing_migrations is False
        assert configuration.validate_on_migrate is True
        assert configuration.create_schemas is True
        assert configuration.output_query_results is True
        assert configuration.connection is None
        assert configuration.edition is Edition.COMMUNITY

    def test_each_instance_owns_its_class_loader(self):
        first = Configuration()
        second = Configuration()

        assert first.class_loader is not second.class_loader

    def test_explicit_class_loader_is_kept(self):
        loader = ClassLoadingContext()

        assert Configuration(class_loader=loader).class_loader is loader


class TestCollectionAccessors:
    """Test that collection accessors return copies."""

    def test_locations_copy(self, configuration):
        configuration.locations.append("filesystem:other")

        assert configuration.locations == ["db/migration"]

    def test_placeholders_copy(self, configuration):
        configuration.set_placeholders({"env": "dev"})
        configuration.placeholders["env"] = "prod"

        assert configuration.placeholders == {"env": "dev"}

    def test_setter_copies_input(self, configuration):
        schemas = ["app"]
        configuration.set_schemas(schemas)
        schemas.append("other")

        assert configuration.schemas == ["app"]


class TestNumericInvariants:
    """Test validation of counters."""

    def test_connect_retries_negative_rejected(self, configuration):
        configuration.set_connect_retries(5)

        with pytest.raises(ConfigurationError) as exc_info:
            configuration.set_connect_retries(-1)

        assert str(exc_info.value) == "Invalid number of connectRetries (must be 0 or greater): -1"
        assert configuration.connect_retries == 5

    def test_connect_retries_zero_allowed(self, configuration):
        configuration.set_connect_retries(0)

        assert configuration.connect_retries == 0

    def test_lock_retry_count_negative_rejected(self, configuration):
        with pytest.raises(ConfigurationError, match="lockRetryCount"):
            configuration.set_lock_retry_count(-5)

        assert configuration.lock_retry_count == 50

    def test_boolean_is_not_a_count(self, configuration):
        with pytest.raises(ConfigurationError, match="must be an integer"):
            configuration.set_connect_retries(True)


class TestTextInvariants:
    """Test validation of text settings."""

    @pytest.mark.parametrize(
        "setter",
        ["set_placeholder_prefix", "set_placeholder_suffix", "set_sql_migration_separator"],
    )
    def test_empty_rejected(self, configuration, setter):
        with pytest.raises(ConfigurationError, match="cannot be empty"):
            getattr(configuration, setter)("")

    def test_encoding_normalized(self, configuration):
        configuration.set_encoding("UTF8")

        assert configuration.encoding == "utf-8"

    def test_unknown_encoding_rejected(self, configuration):
        with pytest.raises(ConfigurationError, match="Unknown encoding"):
            configuration.set_encoding("no-such-charset")

        assert configuration.encoding == "utf-8"

    def test_installed_by_empty_means_unset(self, configuration):
        configuration.set_installed_by("deployer")
        configuration.set_installed_by("")

        assert configuration.installed_by is None

    def test_locations_none_rejected(self, configuration):
        with pytest.raises(ConfigurationError, match="cannot be None"):
            configuration.set_locations(None)

    def test_bare_string_is_one_location(self, configuration):
        configuration.set_locations("filesystem:sql")

        assert configuration.locations == ["filesystem:sql"]


class TestVersions:
    """Test target and baseline settings."""

    def test_target_none_means_latest(self, configuration):
        configuration.set_target_as_string("2")
        configuration.set_target(None)

        assert configuration.target is MigrationVersion.LATEST

    def test_target_from_text(self, configuration):
        configuration.set_target_as_string("current")

        assert configuration.target is MigrationVersion.CURRENT

    def test_invalid_baseline_version(self, configuration):
        with pytest.raises(ConfigurationError):
            configuration.set_baseline_version_as_string("1.x")

        assert str(configuration.baseline_version) == "1"


class TestConnection:
    """Test connection settings and the derived descriptor."""

    def test_scalar_setter_invalidates_descriptor(self, configuration):
        configuration.set_connection_from_url("jdbc:h2:mem:test", "sa", "")
        assert configuration.connection is not None

        configuration.set_user("other")

        assert configuration.connection is None
        assert configuration.url == "jdbc:h2:mem:test"

    def test_set_connection_clears_scalars(self, configuration):
        configuration.set_url("jdbc:h2:mem:a")
        configuration.set_user("sa")
        descriptor = ConnectionDescriptor(url="jdbc:h2:mem:b")

        configuration.set_connection(descriptor)

        assert configuration.connection is descriptor
        assert configuration.url is None
        assert configuration.user is None

    def test_derive_connection_uses_jdbc_properties(self, configuration):
        configuration.set_driver("org.h2.Driver")
        configuration.set_url("jdbc:h2:mem:test")

        configuration.derive_connection({"ssl": "true"})

        assert configuration.connection.driver == "org.h2.Driver"
        assert configuration.connection.properties == {"ssl": "true"}
        assert configuration.connection.class_loader is configuration.class_loader
        assert configuration.url == "jdbc:h2:mem:test"

    def test_incomplete_connection_warns(self, configuration, caplog):
        configuration.set_user("sa")

        with caplog.at_level(logging.WARNING, logger="flyway_config"):
            configuration.derive_connection()
            assert configuration.connection is None

        assert "Discarding INCOMPLETE connection configuration! flyway.url must be set." in caplog.text

    def test_password_hidden_from_repr(self):
        descriptor = ConnectionDescriptor(url="jdbc:h2:mem:test", password="s3cret")

        assert "s3cret" not in repr(descriptor)

    def test_blank_url_rejected_by_descriptor(self):
        with pytest.raises(ValueError):
            ConnectionDescriptor(url="  ")


class TestExtensions:
    """Test callbacks, resolvers and code migrations."""

    def test_callbacks_keep_order(self, configuration):
        first, second = RecordingCallback(), BeforeMigrateCallback()

        configuration.set_callbacks([first, second])

        assert configuration.callbacks == [first, second]

    def test_callbacks_from_class_names(self, configuration):
        configuration.set_callbacks_as_class_names(
            ["extension_fixtures.RecordingCallback", "extension_fixtures.BeforeMigrateCallback"],
        )

        assert [type(cb).__name__ for cb in configuration.callbacks] == [
            "RecordingCallback",
            "BeforeMigrateCallback",
        ]

    def test_wrong_callback_type_rejected(self, configuration):
        with pytest.raises(ConfigurationError, match="must implement Callback"):
            configuration.set_callbacks_as_class_names(["extension_fixtures.NotACallback"])

    def test_unknown_class_rejected(self, configuration):
        with pytest.raises(ConfigurationError, match="Unable to load class"):
            configuration.set_resolvers_as_class_names(["extension_fixtures.Missing"])

    def test_failing_constructor_reported(self, configuration):
        with pytest.raises(ConfigurationError, match="Unable to instantiate"):
            configuration.set_callbacks_as_class_names(["extension_fixtures.ExplodingCallback"])

    def test_resolver_instances(self, configuration):
        resolver = StaticResolver()

        configuration.set_resolvers([resolver])

        assert configuration.resolvers == [resolver]

    def test_non_resolver_instance_rejected(self, configuration):
        with pytest.raises(ConfigurationError):
            configuration.set_resolvers([object()])

    def test_code_migrations(self, configuration):
        migration = CreateUsersMigration()

        configuration.set_code_migrations([migration])

        assert configuration.code_migrations == [migration]

    def test_code_migrations_none_rejected(self, configuration):
        with pytest.raises(ConfigurationError):
            configuration.set_code_migrations(None)

    def test_default_package_for_short_names(self):
        configuration = Configuration(class_loader=ClassLoadingContext("extension_fixtures"))

        configuration.set_callbacks_as_class_names(["RecordingCallback"])

        assert type(configuration.callbacks[0]).__name__ == "RecordingCallback"
