import pytest

from dgcrypt import Dgcrypt


SECRET_KEY = "12345678901234567890123456789012"     # 32 characters


@pytest.fixture
def secret_key():
    return SECRET_KEY


@pytest.fixture
def data():
    return "Hello, World!"


@pytest.fixture
def codec(secret_key):
    dgcrypt = Dgcrypt()
    dgcrypt.set_key(secret_key)
    return dgcrypt
