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

"""Settings controlling where configuration is read from."""

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .defaults import DEFAULT_CONFIG_FILE_ENCODING, ENV_PREFIX


class SourceSettings(BaseModel):
    """Which sources a :class:`ConfigurationLoader` reads, and how."""

    config_files: list[Path] = Field(
        default_factory=list,
        description="Config files to load in precedence order; missing files are an error",
    )
    config_file_encoding: str = Field(
        default=DEFAULT_CONFIG_FILE_ENCODING,
        description="Text encoding of the config files",
    )
    use_default_locations: bool = Field(
        default=True,
        description="Load flyway.conf from the default locations when no file is given",
    )
    read_environment: bool = Field(
        default=True,
        description=f"Apply {ENV_PREFIX}* environment variables",
    )

    @field_validator("config_file_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to Python."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown config file encoding: {v}") from e
