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

"""Configurators that assemble a :class:`Configuration` from external sources.

- :class:`PropertyConfigurator` applies a flat ``flyway.*`` property mapping
- :class:`ConfigurationCopier` copies every field of another configuration
- :func:`export_properties` renders a configuration back into a property mapping

A :class:`PropertyConfigurator` pass is best-effort and fail-fast: properties
are applied one by one, and when one of them is invalid the error surfaces
immediately while the properties applied before it stay applied. There is no
rollback.
"""

from collections.abc import Callable, Mapping
import logging
from typing import TYPE_CHECKING, Any

from . import constants
from .coercion import coerce_boolean, coerce_int, tokenize
from .connection import has_text
from .exceptions import UnrecognizedPropertyError
from .models import MigrationVersion
from .namespace import extract_namespace

if TYPE_CHECKING:
    from .configuration import Configuration

logger = logging.getLogger(__name__)


def _text(raw: str, key: str) -> str:
    return raw


def _tokens(raw: str, key: str) -> list[str]:
    return tokenize(raw, ",")


# Coercion applied to a raw value before it is handed to the setter
_COERCERS: dict[str, Callable[[str, str], Any]] = {
    "text": _text,
    "bool": coerce_boolean,
    "int": coerce_int,
    "list": _tokens,
    # Class-name lists: an empty value is consumed without touching the field
    "classes": _tokens,
}

# (property key, value kind, setter name), applied in this order
PROPERTY_SETTERS: tuple[tuple[str, str, str], ...] = (
    (constants.CONNECT_RETRIES, "int", "set_connect_retries"),
    (constants.INIT_SQL, "text", "set_init_sql"),
    (constants.LOCATIONS, "list", "set_locations"),
    (constants.PLACEHOLDER_REPLACEMENT, "bool", "set_placeholder_replacement"),
    (constants.PLACEHOLDER_PREFIX, "text", "set_placeholder_prefix"),
    (constants.PLACEHOLDER_SUFFIX, "text", "set_placeholder_suffix"),
    (constants.SQL_MIGRATION_PREFIX, "text", "set_sql_migration_prefix"),
    (constants.UNDO_SQL_MIGRATION_PREFIX, "text", "set_undo_sql_migration_prefix"),
    (constants.REPEATABLE_SQL_MIGRATION_PREFIX, "text", "set_repeatable_sql_migration_prefix"),
    (constants.SQL_MIGRATION_SEPARATOR, "text", "set_sql_migration_separator"),
    (constants.SQL_MIGRATION_SUFFIXES, "list", "set_sql_migration_suffixes"),
    (constants.ENCODING, "text", "set_encoding"),
    (constants.DEFAULT_SCHEMA, "text", "set_default_schema"),
    (constants.SCHEMAS, "list", "set_schemas"),
    (constants.TABLE, "text", "set_table"),
    (constants.TABLESPACE, "text", "set_tablespace"),
    (constants.CLEAN_ON_VALIDATION_ERROR, "bool", "set_clean_on_validation_error"),
    (constants.CLEAN_DISABLED, "bool", "set_clean_disabled"),
    (constants.VALIDATE_ON_MIGRATE, "bool", "set_validate_on_migrate"),
    (constants.BASELINE_VERSION, "text", "set_baseline_version_as_string"),
    (constants.BASELINE_DESCRIPTION, "text", "set_baseline_description"),
    (constants.BASELINE_ON_MIGRATE, "bool", "set_baseline_on_migrate"),
    (constants.IGNORE_MISSING_MIGRATIONS, "bool", "set_ignore_missing_migrations"),
    (constants.IGNORE_IGNORED_MIGRATIONS, "bool", "set_ignore_ignored_migrations"),
    (constants.IGNORE_PENDING_MIGRATIONS, "bool", "set_ignore_pending_migrations"),
    (constants.IGNORE_FUTURE_MIGRATIONS, "bool", "set_ignore_future_migrations"),
    (constants.VALIDATE_MIGRATION_NAMING, "bool", "set_validate_migration_naming"),
    (constants.TARGET, "text", "set_target_as_string"),
    (constants.CHERRY_PICK, "list", "set_cherry_pick"),
    (constants.LOCK_RETRY_COUNT, "int", "set_lock_retry_count"),
    (constants.OUT_OF_ORDER, "bool", "set_out_of_order"),
    (constants.SKIP_EXECUTING_MIGRATIONS, "bool", "set_skip_executing_migrations"),
    (constants.OUTPUT_QUERY_RESULTS, "bool", "set_output_query_results"),
    (constants.RESOLVERS, "classes", "set_resolvers_as_class_names"),
    (constants.SKIP_DEFAULT_RESOLVERS, "bool", "set_skip_default_resolvers"),
    (constants.CALLBACKS, "classes", "set_callbacks_as_class_names"),
    (constants.SKIP_DEFAULT_CALLBACKS, "bool", "set_skip_default_callbacks"),
    (constants.MIXED, "bool", "set_mixed"),
    (constants.GROUP, "bool", "set_group"),
    (constants.INSTALLED_BY, "text", "set_installed_by"),
    (constants.DRYRUN_OUTPUT, "text", "set_dry_run_output_as_file_name"),
    (constants.ERROR_OVERRIDES, "list", "set_error_overrides"),
    (constants.STREAM, "bool", "set_stream"),
    (constants.BATCH, "bool", "set_batch"),
    (constants.ORACLE_SQLPLUS, "bool", "set_oracle_sqlplus"),
    (constants.ORACLE_SQLPLUS_WARN, "bool", "set_oracle_sqlplus_warn"),
    (constants.ORACLE_KERBEROS_CONFIG_FILE, "text", "set_oracle_kerberos_config_file"),
    (constants.ORACLE_KERBEROS_CACHE_FILE, "text", "set_oracle_kerberos_cache_file"),
    (constants.DB2Z_DATABASE_NAME, "text", "set_db2z_database_name"),
    (constants.CREATE_SCHEMAS, "bool", "set_create_schemas"),
    (constants.LICENSE_KEY, "text", "set_license_key"),
    (constants.VAULT_URL, "text", "set_vault_url"),
    (constants.VAULT_TOKEN, "text", "set_vault_token"),
    (constants.VAULT_SECRETS, "list", "set_vault_secrets"),
)

_CONNECTION_SETTERS: tuple[tuple[str, str], ...] = (
    (constants.DRIVER, "set_driver"),
    (constants.URL, "set_url"),
    (constants.USER, "set_user"),
    (constants.PASSWORD, "set_password"),
)


class PropertyConfigurator:
    """Applies flat ``flyway.*`` property mappings to a configuration."""

    def __init__(self, configuration: "Configuration", prefix: str = constants.PROPERTY_PREFIX) -> None:
        self.configuration = configuration
        self.prefix = prefix

    def apply(self, properties: Mapping[str, str]) -> None:
        """Apply ``properties`` to the configuration.

        Absent keys leave their field untouched. Placeholders and JDBC
        properties are merged into what is already configured. The connection
        descriptor is re-derived last, and only when this mapping carried a
        connection setting. Unknown keys under the prefix are reported together
        once everything else has been applied.

        Args:
            properties: Flat mapping of property keys to string values. Not modified.

        Raises:
            ConfigurationError: On the first invalid value
            UpgradeRequiredError: When a property needs a higher edition
            UnrecognizedPropertyError: When keys under the prefix remain unconsumed
        """
        remaining = dict(properties)
        configuration = self.configuration

        connection_values: dict[str, str] = {}
        for key, setter_name in _CONNECTION_SETTERS:
            raw = remaining.pop(key, None)
            if raw is not None:
                getattr(configuration, setter_name)(raw)
                connection_values[key] = raw

        for key, kind, setter_name in PROPERTY_SETTERS:
            raw = remaining.pop(key, None)
            if raw is None:
                continue
            if kind == "classes" and not raw.strip():
                continue
            value = _COERCERS[kind](raw, key)
            getattr(configuration, setter_name)(value)

        placeholders, remaining = extract_namespace(
            remaining,
            constants.PLACEHOLDERS_PROPERTY_PREFIX,
            configuration.placeholders,
        )
        configuration.set_placeholders(placeholders)

        jdbc_properties, remaining = extract_namespace(
            remaining,
            constants.JDBC_PROPERTIES_PREFIX,
            configuration.jdbc_properties,
        )
        if configuration.edition_gate.allows("jdbcProperties"):
            configuration.set_jdbc_properties(jdbc_properties)

        # Runs last so the descriptor sees every setting from this pass
        if any(has_text(value) for value in connection_values.values()):
            configuration.derive_connection(jdbc_properties)

        self._check_unrecognized(remaining)
        logger.debug("Applied %d configuration properties", len(properties) - len(remaining))

    def _check_unrecognized(self, remaining: Mapping[str, str]) -> None:
        unrecognized = [key for key in remaining if key.startswith(self.prefix)]
        if unrecognized:
            raise UnrecognizedPropertyError(unrecognized)


class ConfigurationCopier:
    """Copies every setting of one configuration into another.

    Values flow through the destination's own setters, so its validation and
    defaulting rules apply. Edition-gated fields are only copied when the
    destination's edition enables them.
    """

    # (source property, destination setter) for fields copied unconditionally
    FIELDS: tuple[tuple[str, str], ...] = (
        ("baseline_description", "set_baseline_description"),
        ("baseline_on_migrate", "set_baseline_on_migrate"),
        ("baseline_version", "set_baseline_version"),
        ("callbacks", "set_callbacks"),
        ("clean_disabled", "set_clean_disabled"),
        ("clean_on_validation_error", "set_clean_on_validation_error"),
        ("connection_descriptor", "set_connection"),
        ("connect_retries", "set_connect_retries"),
        ("init_sql", "set_init_sql"),
        ("encoding", "set_encoding"),
        ("group", "set_group"),
        ("validate_migration_naming", "set_validate_migration_naming"),
        ("ignore_future_migrations", "set_ignore_future_migrations"),
        ("ignore_missing_migrations", "set_ignore_missing_migrations"),
        ("ignore_ignored_migrations", "set_ignore_ignored_migrations"),
        ("ignore_pending_migrations", "set_ignore_pending_migrations"),
        ("installed_by", "set_installed_by"),
        ("code_migrations", "set_code_migrations"),
        ("locations", "set_locations"),
        ("mixed", "set_mixed"),
        ("out_of_order", "set_out_of_order"),
        ("placeholder_prefix", "set_placeholder_prefix"),
        ("placeholder_replacement", "set_placeholder_replacement"),
        ("placeholders", "set_placeholders"),
        ("placeholder_suffix", "set_placeholder_suffix"),
        ("repeatable_sql_migration_prefix", "set_repeatable_sql_migration_prefix"),
        ("resolvers", "set_resolvers"),
        ("default_schema", "set_default_schema"),
        ("schemas", "set_schemas"),
        ("skip_default_callbacks", "set_skip_default_callbacks"),
        ("skip_default_resolvers", "set_skip_default_resolvers"),
        ("sql_migration_prefix", "set_sql_migration_prefix"),
        ("sql_migration_separator", "set_sql_migration_separator"),
        ("sql_migration_suffixes", "set_sql_migration_suffixes"),
        ("table", "set_table"),
        ("tablespace", "set_tablespace"),
        ("target", "set_target"),
        ("validate_on_migrate", "set_validate_on_migrate"),
        ("resource_provider", "set_resource_provider"),
        ("code_migration_class_provider", "set_code_migration_class_provider"),
        ("create_schemas", "set_create_schemas"),
        ("lock_retry_count", "set_lock_retry_count"),
        ("db2z_database_name", "set_db2z_database_name"),
    )

    # (feature, source property, destination setter) for edition-gated fields
    GATED_FIELDS: tuple[tuple[str, str, str], ...] = (
        ("cherryPick", "cherry_pick", "set_cherry_pick"),
        ("dryRunOutput", "dry_run_output", "set_dry_run_output"),
        ("errorOverrides", "error_overrides", "set_error_overrides"),
        ("stream", "stream", "set_stream"),
        ("batch", "batch", "set_batch"),
        ("undoSqlMigrationPrefix", "undo_sql_migration_prefix", "set_undo_sql_migration_prefix"),
        ("outputQueryResults", "output_query_results", "set_output_query_results"),
        ("skipExecutingMigrations", "skip_executing_migrations", "set_skip_executing_migrations"),
        ("jdbcProperties", "jdbc_properties", "set_jdbc_properties"),
        ("licenseKey", "license_key", "set_license_key"),
        ("oracle.sqlplus", "oracle_sqlplus", "set_oracle_sqlplus"),
        ("oracle.sqlplusWarn", "oracle_sqlplus_warn", "set_oracle_sqlplus_warn"),
        ("oracle.kerberosConfigFile", "oracle_kerberos_config_file", "set_oracle_kerberos_config_file"),
        ("oracle.kerberosCacheFile", "oracle_kerberos_cache_file", "set_oracle_kerberos_cache_file"),
        ("vaultUrl", "vault_url", "set_vault_url"),
        ("vaultToken", "vault_token", "set_vault_token"),
        ("vaultSecrets", "vault_secrets", "set_vault_secrets"),
    )

    def __init__(self, configuration: "Configuration") -> None:
        self.configuration = configuration

    def apply(self, source: "Configuration") -> None:
        """Copy every setting of ``source`` into the configuration."""
        destination = self.configuration

        for attribute, setter_name in self.FIELDS:
            getattr(destination, setter_name)(getattr(source, attribute))

        gate = destination.edition_gate
        for feature, attribute, setter_name in self.GATED_FIELDS:
            if gate.allows(feature):
                getattr(destination, setter_name)(getattr(source, attribute))

        # set_connection cleared these; they are restored without re-deriving
        destination.restore_identity(source.url, source.user, source.password)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _class_name(instance: Any) -> str:
    cls = type(instance)
    return f"{cls.__module__}.{cls.__qualname__}"


def export_properties(configuration: "Configuration") -> dict[str, str]:
    """Render the ungated settings of ``configuration`` as a property mapping.

    Applying the result to a fresh configuration reproduces every ungated
    setting that has a textual form. Fields holding None are omitted.
    """
    c = configuration
    values: dict[str, str | None] = {
        constants.DRIVER: c.driver,
        constants.URL: c.url,
        constants.USER: c.user,
        constants.PASSWORD: c.password,
        constants.CONNECT_RETRIES: str(c.connect_retries),
        constants.INIT_SQL: c.init_sql,
        constants.LOCATIONS: ",".join(c.locations),
        constants.PLACEHOLDER_REPLACEMENT: _format_bool(c.placeholder_replacement),
        constants.PLACEHOLDER_PREFIX: c.placeholder_prefix,
        constants.PLACEHOLDER_SUFFIX: c.placeholder_suffix,
        constants.SQL_MIGRATION_PREFIX: c.sql_migration_prefix,
        constants.REPEATABLE_SQL_MIGRATION_PREFIX: c.repeatable_sql_migration_prefix,
        constants.SQL_MIGRATION_SEPARATOR: c.sql_migration_separator,
        constants.SQL_MIGRATION_SUFFIXES: ",".join(c.sql_migration_suffixes),
        constants.ENCODING: c.encoding,
        constants.DEFAULT_SCHEMA: c.default_schema,
        constants.SCHEMAS: ",".join(c.schemas),
        constants.TABLE: c.table,
        constants.TABLESPACE: c.tablespace,
        constants.CLEAN_ON_VALIDATION_ERROR: _format_bool(c.clean_on_validation_error),
        constants.CLEAN_DISABLED: _format_bool(c.clean_disabled),
        constants.VALIDATE_ON_MIGRATE: _format_bool(c.validate_on_migrate),
        constants.VALIDATE_MIGRATION_NAMING: _format_bool(c.validate_migration_naming),
        constants.BASELINE_VERSION: (
            None if c.baseline_version == MigrationVersion.EMPTY else str(c.baseline_version)
        ),
        constants.BASELINE_DESCRIPTION: c.baseline_description,
        constants.BASELINE_ON_MIGRATE: _format_bool(c.baseline_on_migrate),
        constants.IGNORE_MISSING_MIGRATIONS: _format_bool(c.ignore_missing_migrations),
        constants.IGNORE_IGNORED_MIGRATIONS: _format_bool(c.ignore_ignored_migrations),
        constants.IGNORE_PENDING_MIGRATIONS: _format_bool(c.ignore_pending_migrations),
        constants.IGNORE_FUTURE_MIGRATIONS: _format_bool(c.ignore_future_migrations),
        constants.TARGET: None if c.target == MigrationVersion.EMPTY else str(c.target),
        constants.LOCK_RETRY_COUNT: str(c.lock_retry_count),
        constants.OUT_OF_ORDER: _format_bool(c.out_of_order),
        constants.RESOLVERS: ",".join(_class_name(r) for r in c.resolvers) or None,
        constants.SKIP_DEFAULT_RESOLVERS: _format_bool(c.skip_default_resolvers),
        constants.CALLBACKS: ",".join(_class_name(cb) for cb in c.callbacks) or None,
        constants.SKIP_DEFAULT_CALLBACKS: _format_bool(c.skip_default_callbacks),
        constants.MIXED: _format_bool(c.mixed),
        constants.GROUP: _format_bool(c.group),
        constants.INSTALLED_BY: c.installed_by,
        constants.DB2Z_DATABASE_NAME: c.db2z_database_name,
        constants.CREATE_SCHEMAS: _format_bool(c.create_schemas),
    }
    for name, value in c.placeholders.items():
        values[constants.PLACEHOLDERS_PROPERTY_PREFIX + name] = value

    return {key: value for key, value in values.items() if value is not None}
