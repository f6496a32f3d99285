import hashlib

import pytest
from fastapi.testclient import TestClient

from identicon_server.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def alice_digest() -> bytes:
    return hashlib.sha224(b"alice").digest()
