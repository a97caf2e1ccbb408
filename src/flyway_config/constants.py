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

"""Property keys recognized by the configuration layer.

Every key lives under :data:`PROPERTY_PREFIX`. Values supplied through a
property mapping are always strings; array values are comma separated.
"""

PROPERTY_PREFIX = "flyway."

DRIVER = "flyway.driver"
URL = "flyway.url"
USER = "flyway.user"
PASSWORD = "flyway.password"
CONNECT_RETRIES = "flyway.connectRetries"
INIT_SQL = "flyway.initSql"

LOCATIONS = "flyway.locations"
ENCODING = "flyway.encoding"
DEFAULT_SCHEMA = "flyway.defaultSchema"
SCHEMAS = "flyway.schemas"
TABLE = "flyway.table"
TABLESPACE = "flyway.tablespace"
TARGET = "flyway.target"
CHERRY_PICK = "flyway.cherryPick"

PLACEHOLDER_REPLACEMENT = "flyway.placeholderReplacement"
PLACEHOLDER_PREFIX = "flyway.placeholderPrefix"
PLACEHOLDER_SUFFIX = "flyway.placeholderSuffix"
PLACEHOLDERS_PROPERTY_PREFIX = "flyway.placeholders."

SQL_MIGRATION_PREFIX = "flyway.sqlMigrationPrefix"
UNDO_SQL_MIGRATION_PREFIX = "flyway.undoSqlMigrationPrefix"
REPEATABLE_SQL_MIGRATION_PREFIX = "flyway.repeatableSqlMigrationPrefix"
SQL_MIGRATION_SEPARATOR = "flyway.sqlMigrationSeparator"
SQL_MIGRATION_SUFFIXES = "flyway.sqlMigrationSuffixes"

CLEAN_ON_VALIDATION_ERROR = "flyway.cleanOnValidationError"
CLEAN_DISABLED = "flyway.cleanDisabled"
VALIDATE_ON_MIGRATE = "flyway.validateOnMigrate"
VALIDATE_MIGRATION_NAMING = "flyway.validateMigrationNaming"

BASELINE_VERSION = "flyway.baselineVersion"
BASELINE_DESCRIPTION = "flyway.baselineDescription"
BASELINE_ON_MIGRATE = "flyway.baselineOnMigrate"

IGNORE_MISSING_MIGRATIONS = "flyway.ignoreMissingMigrations"
IGNORE_IGNORED_MIGRATIONS = "flyway.ignoreIgnoredMigrations"
IGNORE_PENDING_MIGRATIONS = "flyway.ignorePendingMigrations"
IGNORE_FUTURE_MIGRATIONS = "flyway.ignoreFutureMigrations"

LOCK_RETRY_COUNT = "flyway.lockRetryCount"
OUT_OF_ORDER = "flyway.outOfOrder"
SKIP_EXECUTING_MIGRATIONS = "flyway.skipExecutingMigrations"
OUTPUT_QUERY_RESULTS = "flyway.outputQueryResults"

RESOLVERS = "flyway.resolvers"
SKIP_DEFAULT_RESOLVERS = "flyway.skipDefaultResolvers"
CALLBACKS = "flyway.callbacks"
SKIP_DEFAULT_CALLBACKS = "flyway.skipDefaultCallbacks"

MIXED = "flyway.mixed"
GROUP = "flyway.group"
INSTALLED_BY = "flyway.installedBy"
CREATE_SCHEMAS = "flyway.createSchemas"

DRYRUN_OUTPUT = "flyway.dryRunOutput"
ERROR_OVERRIDES = "flyway.errorOverrides"
STREAM = "flyway.stream"
BATCH = "flyway.batch"

ORACLE_SQLPLUS = "flyway.oracle.sqlplus"
ORACLE_SQLPLUS_WARN = "flyway.oracle.sqlplusWarn"
ORACLE_KERBEROS_CONFIG_FILE = "flyway.oracle.kerberosConfigFile"
ORACLE_KERBEROS_CACHE_FILE = "flyway.oracle.kerberosCacheFile"
DB2Z_DATABASE_NAME = "flyway.db2z.databaseName"

LICENSE_KEY = "flyway.licenseKey"
VAULT_URL = "flyway.vault.url"
VAULT_TOKEN = "flyway.vault.token"
VAULT_SECRETS = "flyway.vault.secrets"

JDBC_PROPERTIES_PREFIX = "flyway.jdbcProperties."

# Consumed by the source loader before the property mapping is applied
CONFIG_FILES = "flyway.configFiles"
CONFIG_FILE_ENCODING = "flyway.configFileEncoding"

CONNECTION_KEYS = (DRIVER, URL, USER, PASSWORD)

NAMESPACE_PREFIXES = (PLACEHOLDERS_PROPERTY_PREFIX, JDBC_PROPERTIES_PREFIX)

LOADER_KEYS = (CONFIG_FILES, CONFIG_FILE_ENCODING)

RECOGNIZED_KEYS = (
    DRIVER,
    URL,
    USER,
    PASSWORD,
    CONNECT_RETRIES,
    INIT_SQL,
    LOCATIONS,
    PLACEHOLDER_REPLACEMENT,
    PLACEHOLDER_PREFIX,
    PLACEHOLDER_SUFFIX,
    SQL_MIGRATION_PREFIX,
    UNDO_SQL_MIGRATION_PREFIX,
    REPEATABLE_SQL_MIGRATION_PREFIX,
    SQL_MIGRATION_SEPARATOR,
    SQL_MIGRATION_SUFFIXES,
    ENCODING,
    DEFAULT_SCHEMA,
    SCHEMAS,
    TABLE,
    TABLESPACE,
    CLEAN_ON_VALIDATION_ERROR,
    CLEAN_DISABLED,
    VALIDATE_ON_MIGRATE,
    VALIDATE_MIGRATION_NAMING,
    BASELINE_VERSION,
    BASELINE_DESCRIPTION,
    BASELINE_ON_MIGRATE,
    IGNORE_MISSING_MIGRATIONS,
    IGNORE_IGNORED_MIGRATIONS,
    IGNORE_PENDING_MIGRATIONS,
    IGNORE_FUTURE_MIGRATIONS,
    TARGET,
    CHERRY_PICK,
    LOCK_RETRY_COUNT,
    OUT_OF_ORDER,
    SKIP_EXECUTING_MIGRATIONS,
    OUTPUT_QUERY_RESULTS,
    RESOLVERS,
    SKIP_DEFAULT_RESOLVERS,
    CALLBACKS,
    SKIP_DEFAULT_CALLBACKS,
    MIXED,
    GROUP,
    INSTALLED_BY,
    DRYRUN_OUTPUT,
    ERROR_OVERRIDES,
    STREAM,
    BATCH,
    ORACLE_SQLPLUS,
    ORACLE_SQLPLUS_WARN,
    ORACLE_KERBEROS_CONFIG_FILE,
    ORACLE_KERBEROS_CACHE_FILE,
    DB2Z_DATABASE_NAME,
    CREATE_SCHEMAS,
    LICENSE_KEY,
    VAULT_URL,
    VAULT_TOKEN,
    VAULT_SECRETS,
)

# Defaults applied when a Configuration is created
DEFAULT_LOCATION = "db/migration"
DEFAULT_ENCODING = "utf-8"
DEFAULT_TABLE = "flyway_schema_history"
DEFAULT_PLACEHOLDER_PREFIX = "${"
DEFAULT_PLACEHOLDER_SUFFIX = "}"
DEFAULT_SQL_MIGRATION_PREFIX = "V"
DEFAULT_UNDO_SQL_MIGRATION_PREFIX = "U"
DEFAULT_REPEATABLE_SQL_MIGRATION_PREFIX = "R"
DEFAULT_SQL_MIGRATION_SEPARATOR = "__"
DEFAULT_SQL_MIGRATION_SUFFIXES = (".sql",)
DEFAULT_BASELINE_VERSION = "1"
DEFAULT_BASELINE_DESCRIPTION = "<< Flyway Baseline >>"
DEFAULT_LOCK_RETRY_COUNT = 50
