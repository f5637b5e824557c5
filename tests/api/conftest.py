"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from mdbiam.application.dto import AuthOptions
from mdbiam.infrastructure.auth.registry import AuthMethodRegistry
from mdbiam.interfaces.api.app import create_app
from mdbiam.role_manager import MongoRoleManager

from tests.conftest import FakeCluster


def _role_manager(cluster: FakeCluster, uri: str) -> MongoRoleManager:
    options = AuthOptions(uri=uri)
    registry = AuthMethodRegistry(options, session_factory_builder=lambda o: cluster.session)
    return MongoRoleManager(options, registry=registry)


@pytest.fixture
def app(audited_cluster: FakeCluster):
    """Falcon ASGI app auditing app-user on the fake cluster."""
    return create_app(_role_manager(audited_cluster, "mongodb://app-user:pw@localhost"))


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def anonymous_client(cluster: FakeCluster) -> TestClient:
    """Client whose connection string carries no credentials."""
    return TestClient(create_app(_role_manager(cluster, "mongodb://localhost")))
