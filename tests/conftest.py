"""Shared test fixtures for tag decorator tests."""

from pathlib import Path

import pytest

from tagdecorator.config.store import ConfigurationStore
from tagdecorator.logging_config import ThreadIndent
from tagdecorator.pipeline import DecorationPipeline

# Shared fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

CUSTOM_NS = "urn:custom"
HTML_NS = "http://example.org/html"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def config_data() -> dict:
    """Configuration with two namespaces and a handful of mappings."""
    return {
        "namespaces": [
            {"letter": "h", "url": HTML_NS},
            {"letter": "f", "url": "http://example.org/core", "prefix": "xmlns:core"},
            {"letter": "x", "url": "http://example.org/extra", "mandatory": False},
        ],
        "mappings": [
            {
                "namespace": CUSTOM_NS,
                "name": "button",
                "target_letter": "h",
                "target_name": "h:commandButton",
                "target_local_name": "commandButton",
            },
            {
                "namespace": CUSTOM_NS,
                "name": "anchor",
                "target_letter": "h",
                "target_name": "h:a",
                "target_local_name": "a",
            },
            {
                "namespace": CUSTOM_NS,
                "name": "label",
                "target_name": "custom:outputLabel",
            },
        ],
    }


@pytest.fixture
def store(config_data) -> ConfigurationStore:
    return ConfigurationStore.from_data(config_data)


@pytest.fixture
def pipeline(store) -> DecorationPipeline:
    return DecorationPipeline(store)


@pytest.fixture(autouse=True)
def reset_shared_state(monkeypatch):
    """Start every test without a shared store or leftover log indentation."""
    monkeypatch.delenv("TAGDECORATOR_CONFIG", raising=False)
    ConfigurationStore.reset_instance()
    ThreadIndent.reset()
    yield
    ConfigurationStore.reset_instance()
