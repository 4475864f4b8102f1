"""
Pytest fixtures for KERRDISK test suite.
"""

import pytest
from app import create_app
from kerrdisk.disk_nt import NovikovThorneDisk


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def schwarzschild_disk():
    """M=10, a=0, mdot=0.1, alpha=0.1."""
    return NovikovThorneDisk(10.0, 0.0, 0.1, 0.1)


@pytest.fixture
def kerr_disk():
    """M=10, a=0.9, mdot=0.1, alpha=0.1."""
    return NovikovThorneDisk(10.0, 0.9, 0.1, 0.1)
