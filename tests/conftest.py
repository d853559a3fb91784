import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from certgen import CertificateParams, DnType, KeyPair


@pytest.fixture(scope="session")
def rsa_pkcs8():
    """RSA私钥（PKCS#8 DER），RSA只支持导入"""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )


@pytest.fixture
def rsa_key_pair(rsa_pkcs8):
    return KeyPair.from_der(rsa_pkcs8)


@pytest.fixture
def params():
    p = CertificateParams.new(["crabs.example", "localhost"])
    p.distinguished_name.push(DnType.ORGANIZATION_NAME, "Crab widgits SE")
    p.distinguished_name.push(DnType.COMMON_NAME, "Master Cert")
    return p


@pytest.fixture(scope="session")
def other_rsa_pkcs8():
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )
