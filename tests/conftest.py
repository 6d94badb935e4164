import pytest
from cryptography.hazmat.primitives.asymmetric import dsa, ec, rsa


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def dsa_private_key():
    return dsa.generate_private_key(key_size=1024)


@pytest.fixture(scope="session")
def ec_private_key():
    return ec.generate_private_key(ec.SECP256R1())
