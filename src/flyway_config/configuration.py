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

"""The typed migration configuration.

A :class:`Configuration` starts out with the documented defaults and is
mutated only through its ``set_*`` methods, either directly, through
:meth:`Configuration.configure` (flat property mapping) or through
:meth:`Configuration.configure_from` (copy of another configuration). Every
field is exposed read-only through a property; collection properties return
copies.

Example:
    >>> configuration = Configuration()
    >>> configuration.configure({"flyway.table": "my_history"})
    >>> configuration.table
    'my_history'

Note:
    A Configuration is not safe for concurrent mutation. Callers must
    serialize setter and ``configure`` calls against one instance.
"""

import codecs
from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
from typing import IO, Any, TypeVar

from . import constants
from .connection import ConnectionDescriptor, derive_connection_descriptor, has_text
from .edition import Edition, EditionGate, requires_edition
from .exceptions import ConfigurationError
from .interfaces import Callback, CodeMigration, MigrationResolver
from .loading import ClassLoadingContext
from .models import ErrorOverride, MigrationPattern, MigrationVersion

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _as_list(values: Iterable[T] | T, field: str) -> list[T]:
    """Copy ``values`` into a list, treating a bare string as a single element."""
    if values is None:
        raise ConfigurationError(f"{field} cannot be None", field=field)
    if isinstance(values, str):
        return [values]  # type: ignore[list-item]
    return list(values)  # type: ignore[arg-type]


def _require_non_empty(value: str | None, field: str) -> str:
    if not value:
        raise ConfigurationError(f"{field} cannot be empty!", field=field, value=value)
    return value


def _require_non_negative(value: int, field: str, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"Invalid {label} (must be an integer): {value}", field=field, value=value)
    if value < 0:
        raise ConfigurationError(
            f"Invalid {label} (must be 0 or greater): {value}",
            field=field,
            value=value,
        )
    return value


def _require_instances(values: list[Any], expected: type, field: str) -> list[Any]:
    for value in values:
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"Invalid {field} entry: {value!r} (must implement {expected.__name__})",
                field=field,
            )
    return values


class Configuration:
    """Strongly-typed configuration consumed by the migration engine."""

    def __init__(
        self,
        class_loader: ClassLoadingContext | None = None,
        edition: Edition = Edition.COMMUNITY,
    ) -> None:
        """Create a configuration holding the default settings.

        Args:
            class_loader: Context used to instantiate callbacks and resolvers
                by class name. A default context is created when omitted.
            edition: Product edition deciding which gated setters are enabled
        """
        self._class_loader = class_loader or ClassLoadingContext()
        self.edition_gate = EditionGate(edition)

        # Connection
        self._driver: str | None = None
        self._url: str | None = None
        self._user: str | None = None
        self._password: str | None = None
        self._connection: ConnectionDescriptor | None = None
        self._connect_retries = 0
        self._init_sql: str | None = None

        # Migration discovery
        self._locations: list[str] = [constants.DEFAULT_LOCATION]
        self._encoding = constants.DEFAULT_ENCODING
        self._sql_migration_prefix = constants.DEFAULT_SQL_MIGRATION_PREFIX
        self._undo_sql_migration_prefix = constants.DEFAULT_UNDO_SQL_MIGRATION_PREFIX
        self._repeatable_sql_migration_prefix = constants.DEFAULT_REPEATABLE_SQL_MIGRATION_PREFIX
        self._sql_migration_separator = constants.DEFAULT_SQL_MIGRATION_SEPARATOR
        self._sql_migration_suffixes: list[str] = list(constants.DEFAULT_SQL_MIGRATION_SUFFIXES)
        self._code_migrations: list[CodeMigration] = []
        self._resource_provider: Any = None
        self._code_migration_class_provider: Any = None

        # Schema history
        self._default_schema: str | None = None
        self._schemas: list[str] = []
        self._table = constants.DEFAULT_TABLE
        self._tablespace: str | None = None
        self._create_schemas = True
        self._installed_by: str | None = None
        self._db2z_database_name: str | None = None

        # Versions
        self._target: MigrationVersion = MigrationVersion.LATEST
        self._baseline_version = MigrationVersion.from_version(constants.DEFAULT_BASELINE_VERSION)
        self._baseline_description = constants.DEFAULT_BASELINE_DESCRIPTION
        self._baseline_on_migrate = False

        # Placeholders
        self._placeholder_replacement = True
        self._placeholders: dict[str, str] = {}
        self._placeholder_prefix = constants.DEFAULT_PLACEHOLDER_PREFIX
        self._placeholder_suffix = constants.DEFAULT_PLACEHOLDER_SUFFIX

        # Policy switches
        self._ignore_missing_migrations = False
        self._ignore_ignored_migrations = False
        self._ignore_pending_migrations = False
        self._ignore_future_migrations = True
        self._validate_migration_naming = False
        self._validate_on_migrate = True
        self._clean_on_validation_error = False
        self._clean_disabled = False
        self._out_of_order = False
        self._mixed = False
        self._group = False
        self._lock_retry_count = constants.DEFAULT_LOCK_RETRY_COUNT

        # Extensions
        self._callbacks: list[Callback] = []
        self._skip_default_callbacks = False
        self._resolvers: list[MigrationResolver] = []
        self._skip_default_resolvers = False

        # Edition-gated
        self._cherry_pick: list[MigrationPattern] = []
        self._dry_run_output: IO[bytes] | None = None
        self._dry_run_output_path: Path | None = None
        self._stream = False
        self._batch = False
        self._output_query_results = True
        self._skip_executing_migrations = False
        self._error_overrides: list[ErrorOverride] = []
        self._jdbc_properties: dict[str, str] = {}
        self._license_key: str | None = None
        self._oracle_sqlplus = False
        self._oracle_sqlplus_warn = False
        self._oracle_kerberos_config_file: str | None = None
        self._oracle_kerberos_cache_file: str | None = None
        self._vault_url: str | None = None
        self._vault_token: str | None = None
        self._vault_secrets: list[str] = []

    @classmethod
    def from_configuration(cls, source: "Configuration") -> "Configuration":
        """Create a new configuration with the same values as ``source``."""
        configuration = cls(class_loader=source.class_loader, edition=source.edition)
        configuration.configure_from(source)
        return configuration

    # ------------------------------------------------------------------
    # Bulk configuration
    # ------------------------------------------------------------------

    def configure(self, properties: Mapping[str, str]) -> None:
        """Apply a flat ``flyway.*`` property mapping.

        Raises:
            ConfigurationError: If a value is invalid or a property is unknown
            UpgradeRequiredError: If a property needs a higher edition
        """
        from .configurator import PropertyConfigurator

        PropertyConfigurator(self).apply(properties)

    def configure_from(self, source: "Configuration") -> None:
        """Copy every setting of ``source`` into this configuration."""
        from .configurator import ConfigurationCopier

        ConfigurationCopier(self).apply(source)

    def configure_from_env(self, environ: Mapping[str, str] | None = None) -> None:
        """Apply ``FLYWAY_*`` environment variables."""
        from .config.environment import environment_to_properties

        self.configure(environment_to_properties(environ))

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def class_loader(self) -> ClassLoadingContext:
        return self._class_loader

    @property
    def edition(self) -> Edition:
        return self.edition_gate.edition

    @property
    def driver(self) -> str | None:
        return self._driver

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def user(self) -> str | None:
        return self._user

    @property
    def password(self) -> str | None:
        return self._password

    @property
    def connection_descriptor(self) -> ConnectionDescriptor | None:
        """The connection descriptor as stored, without the incomplete-connection check."""
        return self._connection

    @property
    def connection(self) -> ConnectionDescriptor | None:
        """The connection descriptor, None until a URL has been configured."""
        if self._connection is None and (
            has_text(self._driver) or has_text(self._user) or has_text(self._password)
        ):
            logger.warning(
                "Discarding INCOMPLETE connection configuration! %s must be set.",
                constants.URL,
            )
        return self._connection

    @property
    def connect_retries(self) -> int:
        return self._connect_retries

    @property
    def init_sql(self) -> str | None:
        return self._init_sql

    @property
    def locations(self) -> list[str]:
        return list(self._locations)

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def default_schema(self) -> str | None:
        return self._default_schema

    @property
    def schemas(self) -> list[str]:
        return list(self._schemas)

    @property
    def table(self) -> str:
        return self._table

    @property
    def tablespace(self) -> str | None:
        return self._tablespace

    @property
    def target(self) -> MigrationVersion:
        return self._target

    @property
    def cherry_pick(self) -> list[MigrationPattern]:
        return list(self._cherry_pick)

    @property
    def placeholder_replacement(self) -> bool:
        return self._placeholder_replacement

    @property
    def placeholders(self) -> dict[str, str]:
        return dict(self._placeholders)

    @property
    def placeholder_prefix(self) -> str:
        return self._placeholder_prefix

    @property
    def placeholder_suffix(self) -> str:
        return self._placeholder_suffix

    @property
    def sql_migration_prefix(self) -> str:
        return self._sql_migration_prefix

    @property
    def undo_sql_migration_prefix(self) -> str:
        return self._undo_sql_migration_prefix

    @property
    def repeatable_sql_migration_prefix(self) -> str:
        return self._repeatable_sql_migration_prefix

    @property
    def sql_migration_separator(self) -> str:
        return self._sql_migration_separator

    @property
    def sql_migration_suffixes(self) -> list[str]:
        return list(self._sql_migration_suffixes)

    @property
    def code_migrations(self) -> list[CodeMigration]:
        return list(self._code_migrations)

    @property
    def resource_provider(self) -> Any:
        return self._resource_provider

    @property
    def code_migration_class_provider(self) -> Any:
        return self._code_migration_class_provider

    @property
    def ignore_missing_migrations(self) -> bool:
        return self._ignore_missing_migrations

    @property
    def ignore_ignored_migrations(self) -> bool:
        return self._ignore_ignored_migrations

    @property
    def ignore_pending_migrations(self) -> bool:
        return self._ignore_pending_migrations

    @property
    def ignore_future_migrations(self) -> bool:
        return self._ignore_future_migrations

    @property
    def validate_migration_naming(self) -> bool:
        return self._validate_migration_naming

    @property
    def validate_on_migrate(self) -> bool:
        return self._validate_on_migrate

    @property
    def clean_on_validation_error(self) -> bool:
        return self._clean_on_validation_error

    @property
    def clean_disabled(self) -> bool:
        return self._clean_disabled

    @property
    def baseline_version(self) -> MigrationVersion:
        return self._baseline_version

    @property
    def baseline_description(self) -> str:
        return self._baseline_description

    @property
    def baseline_on_migrate(self) -> bool:
        return self._baseline_on_migrate

    @property
    def out_of_order(self) -> bool:
        return self._out_of_order

    @property
    def skip_executing_migrations(self) -> bool:
        return self._skip_executing_migrations

    @property
    def callbacks(self) -> list[Callback]:
        return list(self._callbacks)

    @property
    def skip_default_callbacks(self) -> bool:
        return self._skip_default_callbacks

    @property
    def resolvers(self) -> list[MigrationResolver]:
        return list(self._resolvers)

    @property
    def skip_default_resolvers(self) -> bool:
        return self._skip_default_resolvers

    @property
    def mixed(self) -> bool:
        return self._mixed

    @property
    def group(self) -> bool:
        return self._group

    @property
    def installed_by(self) -> str | None:
        return self._installed_by

    @property
    def create_schemas(self) -> bool:
        return self._create_schemas

    @property
    def error_overrides(self) -> list[ErrorOverride]:
        return list(self._error_overrides)

    @property
    def dry_run_output(self) -> IO[bytes] | None:
        return self._dry_run_output

    @property
    def dry_run_output_path(self) -> Path | None:
        return self._dry_run_output_path

    @property
    def stream(self) -> bool:
        return self._stream

    @property
    def batch(self) -> bool:
        return self._batch

    @property
    def output_query_results(self) -> bool:
        return self._output_query_results

    @property
    def license_key(self) -> str | None:
        return self._license_key

    @property
    def lock_retry_count(self) -> int:
        return self._lock_retry_count

    @property
    def jdbc_properties(self) -> dict[str, str]:
        return dict(self._jdbc_properties)

    @property
    def oracle_sqlplus(self) -> bool:
        return self._oracle_sqlplus

    @property
    def oracle_sqlplus_warn(self) -> bool:
        return self._oracle_sqlplus_warn

    @property
    def oracle_kerberos_config_file(self) -> str | None:
        return self._oracle_kerberos_config_file

    @property
    def oracle_kerberos_cache_file(self) -> str | None:
        return self._oracle_kerberos_cache_file

    @property
    def db2z_database_name(self) -> str | None:
        return self._db2z_database_name

    @property
    def vault_url(self) -> str | None:
        return self._vault_url

    @property
    def vault_token(self) -> str | None:
        return self._vault_token

    @property
    def vault_secrets(self) -> list[str]:
        return list(self._vault_secrets)

    # ------------------------------------------------------------------
    # Connection setters
    # ------------------------------------------------------------------

    def set_driver(self, driver: str | None) -> None:
        """Set the driver class; invalidates any derived connection descriptor."""
        self._connection = None
        self._driver = driver

    def set_url(self, url: str | None) -> None:
        """Set the JDBC URL; invalidates any derived connection descriptor."""
        self._connection = None
        self._url = url

    def set_user(self, user: str | None) -> None:
        """Set the database user; invalidates any derived connection descriptor."""
        self._connection = None
        self._user = user

    def set_password(self, password: str | None) -> None:
        """Set the database password; invalidates any derived connection descriptor."""
        self._connection = None
        self._password = password

    def set_connection(self, connection: ConnectionDescriptor | None) -> None:
        """Use a pre-built connection descriptor.

        Clears driver, url, user and password so the scalar settings cannot
        silently disagree with the descriptor.
        """
        self._driver = None
        self._url = None
        self._user = None
        self._password = None
        self._connection = connection

    def set_connection_from_url(self, url: str, user: str | None, password: str | None) -> None:
        """Set url, user and password and build the connection descriptor from them."""
        self._url = url
        self._user = user
        self._password = password
        self._connection = derive_connection_descriptor(
            None,
            url,
            user,
            password,
            self._jdbc_properties,
            self._class_loader,
        )

    def derive_connection(self, jdbc_properties: Mapping[str, str] | None = None) -> None:
        """(Re)derive the connection descriptor from the scalar connection settings.

        Keeps driver, url, user and password in place. Leaves the descriptor
        unset, with a warning, when no URL is configured.
        """
        properties = self._jdbc_properties if jdbc_properties is None else jdbc_properties
        self._connection = derive_connection_descriptor(
            self._driver,
            self._url,
            self._user,
            self._password,
            properties,
            self._class_loader,
        )

    def restore_identity(self, url: str | None, user: str | None, password: str | None) -> None:
        """Copy url, user and password verbatim, leaving the descriptor untouched."""
        self._url = url
        self._user = user
        self._password = password

    def set_connect_retries(self, connect_retries: int) -> None:
        """Set the maximum number of connection retries (0 or greater)."""
        self._connect_retries = _require_non_negative(
            connect_retries,
            "connectRetries",
            "number of connectRetries",
        )

    def set_init_sql(self, init_sql: str | None) -> None:
        self._init_sql = init_sql

    # ------------------------------------------------------------------
    # Migration discovery setters
    # ------------------------------------------------------------------

    def set_locations(self, locations: Iterable[str]) -> None:
        """Set the locations to scan for migrations, e.g. ``filesystem:sql``."""
        self._locations = _as_list(locations, "locations")

    def set_encoding(self, encoding: str) -> None:
        """Set the encoding of SQL migrations.

        Raises:
            ConfigurationError: If Python has no codec of that name
        """
        try:
            self._encoding = codecs.lookup(encoding).name
        except (LookupError, TypeError) as e:
            raise ConfigurationError(
                f"Unknown encoding: {encoding}",
                field="encoding",
                value=encoding,
            ) from e

    def set_sql_migration_prefix(self, sql_migration_prefix: str) -> None:
        self._sql_migration_prefix = sql_migration_prefix

    @requires_edition("undoSqlMigrationPrefix")
    def set_undo_sql_migration_prefix(self, undo_sql_migration_prefix: str) -> None:
        self._undo_sql_migration_prefix = undo_sql_migration_prefix

    def set_repeatable_sql_migration_prefix(self, repeatable_sql_migration_prefix: str) -> None:
        self._repeatable_sql_migration_prefix = repeatable_sql_migration_prefix

    def set_sql_migration_separator(self, sql_migration_separator: str) -> None:
        self._sql_migration_separator = _require_non_empty(sql_migration_separator, "sqlMigrationSeparator")

    def set_sql_migration_suffixes(self, sql_migration_suffixes: Iterable[str]) -> None:
        """Set the file name suffixes of SQL migrations, e.g. ``[".sql", ".pkg"]``."""
        self._sql_migration_suffixes = _as_list(sql_migration_suffixes, "sqlMigrationSuffixes")

    def set_code_migrations(self, code_migrations: Iterable[CodeMigration] | None) -> None:
        """Register migrations written in code, in addition to discovered ones.

        Raises:
            ConfigurationError: If ``code_migrations`` is None or holds non-migrations
        """
        migrations = _as_list(code_migrations, "codeMigrations")
        self._code_migrations = _require_instances(migrations, CodeMigration, "codeMigrations")

    def set_resource_provider(self, resource_provider: Any) -> None:
        self._resource_provider = resource_provider

    def set_code_migration_class_provider(self, class_provider: Any) -> None:
        self._code_migration_class_provider = class_provider

    # ------------------------------------------------------------------
    # Schema history setters
    # ------------------------------------------------------------------

    def set_default_schema(self, schema: str | None) -> None:
        self._default_schema = schema

    def set_schemas(self, schemas: Iterable[str]) -> None:
        """Set the schemas managed by the tool, in cleaning order."""
        self._schemas = _as_list(schemas, "schemas")

    def set_table(self, table: str) -> None:
        self._table = table

    def set_tablespace(self, tablespace: str | None) -> None:
        self._tablespace = tablespace

    def set_create_schemas(self, create_schemas: bool) -> None:
        self._create_schemas = create_schemas

    def set_installed_by(self, installed_by: str | None) -> None:
        """Set the user recorded as having applied migrations.

        An empty string means "the current database user" and is stored as None.
        """
        self._installed_by = installed_by or None

    def set_db2z_database_name(self, db2z_database_name: str | None) -> None:
        self._db2z_database_name = db2z_database_name

    # ------------------------------------------------------------------
    # Version setters
    # ------------------------------------------------------------------

    def set_target(self, target: MigrationVersion | None) -> None:
        self._target = MigrationVersion.LATEST if target is None else target

    def set_target_as_string(self, target: str) -> None:
        """Set the target version from text such as ``1.2``, ``latest`` or ``current``."""
        self.set_target(MigrationVersion.from_version(target))

    def set_baseline_version(self, baseline_version: MigrationVersion) -> None:
        self._baseline_version = baseline_version

    def set_baseline_version_as_string(self, baseline_version: str) -> None:
        self.set_baseline_version(MigrationVersion.from_version(baseline_version))

    def set_baseline_description(self, baseline_description: str) -> None:
        self._baseline_description = baseline_description

    def set_baseline_on_migrate(self, baseline_on_migrate: bool) -> None:
        self._baseline_on_migrate = baseline_on_migrate

    # ------------------------------------------------------------------
    # Placeholder setters
    # ------------------------------------------------------------------

    def set_placeholder_replacement(self, placeholder_replacement: bool) -> None:
        self._placeholder_replacement = placeholder_replacement

    def set_placeholders(self, placeholders: Mapping[str, str]) -> None:
        """Replace the placeholder name -> value mapping."""
        self._placeholders = dict(placeholders)

    def set_placeholder_prefix(self, placeholder_prefix: str) -> None:
        self._placeholder_prefix = _require_non_empty(placeholder_prefix, "placeholderPrefix")

    def set_placeholder_suffix(self, placeholder_suffix: str) -> None:
        self._placeholder_suffix = _require_non_empty(placeholder_suffix, "placeholderSuffix")

    # ------------------------------------------------------------------
    # Policy switch setters
    # ------------------------------------------------------------------

    def set_ignore_missing_migrations(self, ignore_missing_migrations: bool) -> None:
        self._ignore_missing_migrations = ignore_missing_migrations

    def set_ignore_ignored_migrations(self, ignore_ignored_migrations: bool) -> None:
        self._ignore_ignored_migrations = ignore_ignored_migrations

    def set_ignore_pending_migrations(self, ignore_pending_migrations: bool) -> None:
        self._ignore_pending_migrations = ignore_pending_migrations

    def set_ignore_future_migrations(self, ignore_future_migrations: bool) -> None:
        self._ignore_future_migrations = ignore_future_migrations

    def set_validate_migration_naming(self, validate_migration_naming: bool) -> None:
        self._validate_migration_naming = validate_migration_naming

    def set_validate_on_migrate(self, validate_on_migrate: bool) -> None:
        self._validate_on_migrate = validate_on_migrate

    def set_clean_on_validation_error(self, clean_on_validation_error: bool) -> None:
        self._clean_on_validation_error = clean_on_validation_error

    def set_clean_disabled(self, clean_disabled: bool) -> None:
        self._clean_disabled = clean_disabled

    def set_out_of_order(self, out_of_order: bool) -> None:
        self._out_of_order = out_of_order

    def set_mixed(self, mixed: bool) -> None:
        self._mixed = mixed

    def set_group(self, group: bool) -> None:
        self._group = group

    def set_lock_retry_count(self, lock_retry_count: int) -> None:
        """Set how often to retry acquiring the schema history lock (0 or greater)."""
        self._lock_retry_count = _require_non_negative(
            lock_retry_count,
            "lockRetryCount",
            "number of lockRetryCount",
        )

    # ------------------------------------------------------------------
    # Extension setters
    # ------------------------------------------------------------------

    def set_callbacks(self, callbacks: Iterable[Callback]) -> None:
        """Replace the lifecycle callbacks, keeping their order."""
        self._callbacks = _require_instances(_as_list(callbacks, "callbacks"), Callback, "callbacks")

    def set_callbacks_as_class_names(self, class_names: Iterable[str]) -> None:
        """Replace the callbacks with instances of the named classes."""
        self._callbacks = self._class_loader.instantiate_all(_as_list(class_names, "callbacks"), Callback)

    def set_skip_default_callbacks(self, skip_default_callbacks: bool) -> None:
        self._skip_default_callbacks = skip_default_callbacks

    def set_resolvers(self, resolvers: Iterable[MigrationResolver]) -> None:
        """Replace the custom migration resolvers, keeping their order."""
        self._resolvers = _require_instances(
            _as_list(resolvers, "resolvers"),
            MigrationResolver,
            "resolvers",
        )

    def set_resolvers_as_class_names(self, class_names: Iterable[str]) -> None:
        """Replace the resolvers with instances of the named classes."""
        self._resolvers = self._class_loader.instantiate_all(
            _as_list(class_names, "resolvers"),
            MigrationResolver,
        )

    def set_skip_default_resolvers(self, skip_default_resolvers: bool) -> None:
        self._skip_default_resolvers = skip_default_resolvers

    # ------------------------------------------------------------------
    # Edition-gated setters
    # ------------------------------------------------------------------

    @requires_edition("cherryPick")
    def set_cherry_pick(self, cherry_pick: Iterable[MigrationPattern | str]) -> None:
        """Restrict migrate and undo to the migrations matching these patterns."""
        self._cherry_pick = [
            pattern if isinstance(pattern, MigrationPattern) else MigrationPattern(pattern)
            for pattern in _as_list(cherry_pick, "cherryPick")
        ]

    def _close_dry_run_file(self, replacement: IO[bytes] | None) -> None:
        # Only files opened by set_dry_run_output_as_file are owned here
        owned = self._dry_run_output_path is not None and self._dry_run_output is not None
        if owned and self._dry_run_output is not replacement:
            self._dry_run_output.close()

    @requires_edition("dryRunOutput")
    def set_dry_run_output(self, dry_run_output: IO[bytes] | None) -> None:
        """Write dry-run SQL to ``dry_run_output`` instead of executing it."""
        self._close_dry_run_file(dry_run_output)
        self._dry_run_output = dry_run_output
        self._dry_run_output_path = None

    @requires_edition("dryRunOutput")
    def set_dry_run_output_as_file(self, dry_run_output: Path) -> None:
        """Write dry-run SQL to a file, creating its parent directories.

        Raises:
            ConfigurationError: If the path is a directory or cannot be opened
        """
        path = Path(dry_run_output)
        if path.is_dir():
            raise ConfigurationError(
                f"Invalid dryRunOutput: {path} is a directory",
                field="dryRunOutput",
                value=str(path),
            )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            stream = path.open("wb")
        except OSError as e:
            raise ConfigurationError(
                f"Unable to open dryRunOutput file {path}: {e}",
                field="dryRunOutput",
                value=str(path),
            ) from e
        logger.info("Writing dry run output to %s", path)
        self._close_dry_run_file(stream)
        self._dry_run_output = stream
        self._dry_run_output_path = path

    @requires_edition("dryRunOutput")
    def set_dry_run_output_as_file_name(self, dry_run_output_file_name: str) -> None:
        self.set_dry_run_output_as_file(Path(dry_run_output_file_name))

    @requires_edition("errorOverrides")
    def set_error_overrides(self, error_overrides: Iterable[ErrorOverride | str]) -> None:
        """Set rules such as ``99999:17110:E`` overriding how SQL errors are reported."""
        self._error_overrides = [
            override if isinstance(override, ErrorOverride) else ErrorOverride.parse(override)
            for override in _as_list(error_overrides, "errorOverrides")
        ]

    @requires_edition("stream")
    def set_stream(self, stream: bool) -> None:
        self._stream = stream

    @requires_edition("batch")
    def set_batch(self, batch: bool) -> None:
        self._batch = batch

    @requires_edition("outputQueryResults")
    def set_output_query_results(self, output_query_results: bool) -> None:
        self._output_query_results = output_query_results

    @requires_edition("skipExecutingMigrations")
    def set_skip_executing_migrations(self, skip_executing_migrations: bool) -> None:
        self._skip_executing_migrations = skip_executing_migrations

    @requires_edition("jdbcProperties")
    def set_jdbc_properties(self, jdbc_properties: Mapping[str, str]) -> None:
        self._jdbc_properties = dict(jdbc_properties)

    @requires_edition("licenseKey")
    def set_license_key(self, license_key: str | None) -> None:
        self._license_key = license_key

    @requires_edition("oracle.sqlplus")
    def set_oracle_sqlplus(self, oracle_sqlplus: bool) -> None:
        self._oracle_sqlplus = oracle_sqlplus

    @requires_edition("oracle.sqlplusWarn")
    def set_oracle_sqlplus_warn(self, oracle_sqlplus_warn: bool) -> None:
        self._oracle_sqlplus_warn = oracle_sqlplus_warn

    @requires_edition("oracle.kerberosConfigFile")
    def set_oracle_kerberos_config_file(self, oracle_kerberos_config_file: str | None) -> None:
        self._oracle_kerberos_config_file = oracle_kerberos_config_file

    @requires_edition("oracle.kerberosCacheFile")
    def set_oracle_kerberos_cache_file(self, oracle_kerberos_cache_file: str | None) -> None:
        self._oracle_kerberos_cache_file = oracle_kerberos_cache_file

    @requires_edition("vaultUrl")
    def set_vault_url(self, vault_url: str | None) -> None:
        self._vault_url = vault_url

    @requires_edition("vaultToken")
    def set_vault_token(self, vault_token: str | None) -> None:
        self._vault_token = vault_token

    @requires_edition("vaultSecrets")
    def set_vault_secrets(self, vault_secrets: Iterable[str]) -> None:
        self._vault_secrets = _as_list(vault_secrets, "vaultSecrets")
