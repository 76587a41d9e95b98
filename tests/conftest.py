"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
Provides test settings, form builders and sample collections.
"""

from typing import Generator, List, Tuple
from unittest.mock import patch

import pytest
from pydantic_settings import SettingsConfigDict

from formcollections.config import settings as settings_module
from formcollections.config.settings import Settings
from formcollections.core.forms.builder import FormBuilder, form_for
from tests.utils.helpers import Option


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override the process-wide settings for testing."""
    with patch.object(settings_module, "settings", test_settings):
        yield test_settings


@pytest.fixture
def builder(test_settings: TestSettings) -> FormBuilder:
    """Form builder for a ``user`` object with no bound model."""
    return form_for("user", settings=test_settings)


@pytest.fixture
def yes_no() -> List[Tuple[bool, str]]:
    """Boolean value/label pairs."""
    return [(True, "Yes"), (False, "No")]


@pytest.fixture
def options() -> List[Option]:
    """Domain objects for collection rendering."""
    return [Option("a", "Alpha"), Option("b", "Beta"), Option("c", "Gamma")]
