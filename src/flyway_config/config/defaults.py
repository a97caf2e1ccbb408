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

"""Default source locations and environment variable mapping."""

from pathlib import Path
import re

from .. import constants

ENV_PREFIX = "FLYWAY_"
ENV_PLACEHOLDERS_PREFIX = "FLYWAY_PLACEHOLDERS_"
ENV_JDBC_PROPERTIES_PREFIX = "FLYWAY_JDBC_PROPERTIES_"

# Searched in order when no config file is given explicitly; later files win
DEFAULT_CONFIG_FILES = [
    Path.home() / "flyway.conf",
    Path("flyway.conf"),
]

DEFAULT_CONFIG_FILE_ENCODING = "utf-8"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def property_key_to_env_var(key: str) -> str:
    """Derive the environment variable name for a property key.

    Example:
        >>> property_key_to_env_var("flyway.oracle.sqlplusWarn")
        'FLYWAY_ORACLE_SQLPLUS_WARN'
    """
    segments = key.split(".")
    return "_".join(_CAMEL_BOUNDARY.sub("_", segment).upper() for segment in segments if segment)


# Environment variable name -> property key
ENV_VAR_MAPPING: dict[str, str] = {
    property_key_to_env_var(key): key for key in constants.RECOGNIZED_KEYS + constants.LOADER_KEYS
}
ENV_VAR_MAPPING["FLYWAY_DRYRUN_OUTPUT"] = constants.DRYRUN_OUTPUT
