"""
Tests for utility helpers.
"""

import pytest

from prism_migrate.util.naming import hyphen_to_camel
from prism_migrate.util.templates import to_ts_array


class TestHyphenToCamel:
    """Tests for account name conversion."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("deploy-tools", "DeployTools"),
            ("deploy", "Deploy"),
            ("media-service-prod", "MediaServiceProd"),
            ("ophan-2fa", "Ophan2fa"),
            ("", ""),
        ],
    )
    def test_conversion(self, name, expected):
        """Test converting hyphenated names."""
        assert hyphen_to_camel(name) == expected

    def test_idempotent(self):
        """Test that converting twice changes nothing further."""
        once = hyphen_to_camel("deploy-tools")
        assert hyphen_to_camel(once) == once
        assert hyphen_to_camel("DeployTools") == "DeployTools"

    def test_rest_of_segment_untouched(self):
        """Test that only the first character of a segment changes case."""
        assert hyphen_to_camel("aws-IAM") == "AwsIAM"

    def test_double_hyphen(self):
        """Test that empty segments are dropped without error."""
        assert hyphen_to_camel("deploy--tools") == "DeployTools"


class TestToTsArray:
    """Tests for TypeScript array formatting."""

    def test_formats_ids(self):
        """Test quoting and separators."""
        assert to_ts_array(["x", "y", "z"]) == "['x', 'y', 'z']"

    def test_empty(self):
        """Test empty list."""
        assert to_ts_array([]) == "[]"
