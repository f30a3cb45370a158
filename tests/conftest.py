"""
Test Configuration
==================

Pytest configuration with shared settings and renderer fixtures.
"""

import pytest
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from puml_render.config.settings import Settings
from puml_render.core.rendering.svg_renderer import SVGRenderer


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    __test__ = False

    environment: str = "testing"
    default_server_url: str = "https://plantuml.invalid/plantuml"
    retry_delay_seconds: float = 0.0
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="PUML_RENDER_TEST_")


@pytest.fixture
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings):
    """Override renderer settings for testing."""
    with patch("puml_render.core.rendering.svg_renderer.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def renderer(test_settings: TestSettings) -> SVGRenderer:
    """SVG renderer configured with test settings."""
    return SVGRenderer(test_settings)
