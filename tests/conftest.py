"""Pytest configuration and shared fixtures for the mdstream test suite."""

import pytest

from mdstream.options import HtmlRendererOptions
from mdstream.renderers.html import HtmlRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def renderer() -> HtmlRenderer:
    """Provide a renderer with default (plain) options."""
    return HtmlRenderer(HtmlRendererOptions())


@pytest.fixture
def full_renderer() -> HtmlRenderer:
    """Provide a renderer with every optional layer switched on."""
    return HtmlRenderer(
        HtmlRendererOptions(
            autolink=True,
            table_support=True,
            render_images=True,
            footnote_definitions=True,
            check_balance=True,
        )
    )
