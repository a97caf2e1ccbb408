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

"""Tests for MigrationVersion, MigrationPattern and ErrorOverride."""

import pytest

from flyway_config.exceptions import ConfigurationError
from flyway_config.models import ErrorBehavior, ErrorOverride, MigrationPattern, MigrationVersion


class TestMigrationVersion:
    """Test version parsing and ordering."""

    def test_numeric_version(self):
        version = MigrationVersion.from_version("1.2.3")

        assert version.version == "1.2.3"
        assert str(version) == "1.2.3"
        assert version.parts == (1, 2, 3)

    def test_underscores_are_dots(self):
        assert MigrationVersion.from_version("1_2") == MigrationVersion.from_version("1.2")

    def test_trailing_zeros_ignored(self):
        assert MigrationVersion.from_version("1") == MigrationVersion.from_version("1.0.0")
        assert hash(MigrationVersion.from_version("1")) == hash(MigrationVersion.from_version("1.0"))

    @pytest.mark.parametrize("text", ["latest", "LATEST", " Latest "])
    def test_latest_token(self, text):
        assert MigrationVersion.from_version(text) is MigrationVersion.LATEST

    def test_current_token(self):
        assert MigrationVersion.from_version("current") is MigrationVersion.CURRENT
        assert MigrationVersion.CURRENT.version is None

    def test_none_is_empty(self):
        assert MigrationVersion.from_version(None) is MigrationVersion.EMPTY

    def test_ordering(self):
        versions = [
            MigrationVersion.LATEST,
            MigrationVersion.from_version("1.10"),
            MigrationVersion.EMPTY,
            MigrationVersion.from_version("1.2"),
            MigrationVersion.CURRENT,
        ]

        assert sorted(versions) == [
            MigrationVersion.EMPTY,
            MigrationVersion.from_version("1.2"),
            MigrationVersion.from_version("1.10"),
            MigrationVersion.CURRENT,
            MigrationVersion.LATEST,
        ]

    @pytest.mark.parametrize("text", ["1..2", "1.a", "v1", "", "1.\u00b2", "\u0661.2"])
    def test_invalid_versions(self, text):
        with pytest.raises(ConfigurationError):
            MigrationVersion.from_version(text)

    def test_non_ascii_digits_rejected_through_configure(self):
        from flyway_config import Configuration

        configuration = Configuration()

        with pytest.raises(ConfigurationError, match="non-numeric"):
            configuration.configure({"flyway.target": "1.\u00b2"})

        assert configuration.target is MigrationVersion.LATEST


class TestMigrationPattern:
    """Test cherry-pick patterns."""

    def test_version_pattern_matches_versioned_migration(self):
        pattern = MigrationPattern("2.0")

        assert pattern.matches(MigrationVersion.from_version("2"), "anything")
        assert not pattern.matches(MigrationVersion.from_version("2.1"), "anything")

    def test_description_pattern_matches_repeatable_migration(self):
        pattern = MigrationPattern("refresh views")

        assert pattern.matches(None, "refresh_views")
        assert not pattern.matches(MigrationVersion.from_version("1"), "refresh views")

    def test_blank_pattern_rejected(self):
        with pytest.raises(ConfigurationError):
            MigrationPattern("  ")


class TestErrorOverride:
    """Test error override parsing."""

    def test_parse_full_rule(self):
        override = ErrorOverride.parse("99999:17110:E")

        assert override.sql_state == "99999"
        assert override.error_code == 17110
        assert override.behavior is ErrorBehavior.ERROR
        assert override.hide_details is False
        assert str(override) == "99999:17110:E"

    def test_parse_wildcards_and_hidden_details(self):
        override = ErrorOverride.parse("*:*:W-")

        assert override.error_code is None
        assert override.hide_details is True
        assert override.matches("42000", 1)
        assert str(override) == "*:*:W-"

    def test_matches_specific_state(self):
        override = ErrorOverride.parse("42S02:*:I")

        assert override.matches("42S02", 942)
        assert not override.matches("42000", 942)

    @pytest.mark.parametrize("text", ["", "99999:17110", "9999:1:E", "99999:x:E", "99999:1:X"])
    def test_malformed_rules(self, text):
        with pytest.raises(ConfigurationError, match="Invalid error override"):
            ErrorOverride.parse(text)
