"""
Tests for the version feature
"""

import pytest

from humanlogic.features import FeatureRegistry
from humanlogic.version import __version__


def test_version_feature_exists():
    """Test that the version feature is registered"""
    feature = FeatureRegistry.get_feature("version")
    assert feature is not None
    assert feature.name == "version"
    assert feature.description == "Get the Human Logic version"


def test_version_feature_handler():
    """Test that the version feature handler works"""
    feature = FeatureRegistry.get_feature("version")
    result = feature.handler()

    assert result.success is True
    assert result.data == {"version": __version__}


def test_version_feature_returns_valid_version():
    """Test that the version feature returns a valid version string"""
    version = FeatureRegistry.get_feature("version").handler().data["version"]
    assert len(version) > 0
    assert "." in version


def test_all_features_registered():
    assert set(FeatureRegistry.get_all_features()) == {
        "version",
        "evaluate",
        "truth-table",
        "dominance",
    }


if __name__ == "__main__":
    pytest.main([__file__])
