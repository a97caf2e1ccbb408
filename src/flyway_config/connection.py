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

"""Connection descriptors and their derivation from scalar settings."""

from collections.abc import Mapping
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import URL
from .loading import ClassLoadingContext

logger = logging.getLogger(__name__)


class ConnectionDescriptor(BaseModel):
    """Resolved description of how to open a database connection.

    Opening the connection is the job of the database adapter; this model
    only carries what it needs.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str = Field(description="JDBC URL of the database")
    driver: str | None = Field(default=None, description="Driver class, None to detect from the URL")
    user: str | None = None
    password: str | None = Field(default=None, repr=False)
    properties: dict[str, str] = Field(
        default_factory=dict,
        description="Extra properties handed to the driver",
    )
    class_loader: ClassLoadingContext | None = Field(default=None, repr=False, exclude=True)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the URL is not blank."""
        if not v or not v.strip():
            raise ValueError("url cannot be empty")
        return v


def has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def derive_connection_descriptor(
    driver: str | None,
    url: str | None,
    user: str | None,
    password: str | None,
    properties: Mapping[str, str] | None = None,
    class_loader: ClassLoadingContext | None = None,
) -> ConnectionDescriptor | None:
    """Build a connection descriptor from the scalar connection settings.

    A descriptor is only built when ``url`` has text. When the URL is missing
    but a driver, user or password was given, the partial settings are
    discarded with a warning.

    Returns:
        ConnectionDescriptor, or None if no URL is configured
    """
    if not has_text(url):
        if has_text(driver) or has_text(user) or has_text(password):
            logger.warning("Discarding INCOMPLETE connection configuration! %s must be set.", URL)
        return None

    descriptor_args: dict[str, Any] = {
        "url": url,
        "driver": driver or None,
        "user": user,
        "password": password,
        "properties": dict(properties or {}),
        "class_loader": class_loader,
    }
    descriptor = ConnectionDescriptor(**descriptor_args)
    logger.debug("Derived connection descriptor for %s", descriptor.url)
    return descriptor
