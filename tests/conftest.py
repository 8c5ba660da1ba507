"""
Pytest configuration and fixtures for fluent-rules tests

This module provides shared fixtures for unit tests.
"""
import os

import pytest

from fluent_rules.core.proxies import ProxyRuleFactory
from fluent_rules.core.rules import RuleBuilder


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "cli: Tests that drive the command-line interface"
    )


# =======================
# BUILDER FIXTURES
# =======================

@pytest.fixture(scope="function")
def builder() -> RuleBuilder:
    """
    Provide an empty RuleBuilder using the default proxy factory

    Returns:
        Fresh RuleBuilder
    """
    return RuleBuilder()


@pytest.fixture(scope="function")
def proxy_factory() -> ProxyRuleFactory:
    """
    Provide a private ProxyRuleFactory so tests can register rules freely

    Returns:
        ProxyRuleFactory with the built-in registry
    """
    return ProxyRuleFactory()


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture(scope="session")
def rule_set_path(test_data_dir) -> str:
    """
    Get path to the sample YAML rule set

    Returns:
        Path to tests/fixtures/rules.yaml
    """
    return os.path.join(test_data_dir, "rules.yaml")
