import pytest

from certgen.core import oids
from certgen.core.algorithms import (
    PKCS_ECDSA_P256_SHA256,
    PKCS_ECDSA_P384_SHA384,
    PKCS_ED25519,
    PKCS_RSA_SHA256,
    SIGNATURE_ALGORITHMS,
    get_algorithm,
    get_algorithm_by_oid,
)
from certgen.exceptions import AlgorithmNotSupportedError


def test_registry_has_four_entries():
    assert set(SIGNATURE_ALGORITHMS) == {
        "rsa-sha256", "ecdsa-p256-sha256", "ecdsa-p384-sha384", "ed25519"
    }


@pytest.mark.parametrize("name,expected", [
    ("ecdsa-p256-sha256", PKCS_ECDSA_P256_SHA256),
    ("ECDSA-P384-SHA384", PKCS_ECDSA_P384_SHA384),
    ("Ed25519", PKCS_ED25519),
    ("rsa-sha256", PKCS_RSA_SHA256),
])
def test_get_algorithm_by_name(name, expected):
    assert get_algorithm(name) is expected


def test_get_algorithm_unknown_name():
    with pytest.raises(AlgorithmNotSupportedError):
        get_algorithm("dilithium3")


def test_get_algorithm_by_oid():
    assert get_algorithm_by_oid(oids.OID_ECDSA_WITH_SHA384) is PKCS_ECDSA_P384_SHA384
    assert get_algorithm_by_oid("1.2.840.113549.1.1.11") is PKCS_RSA_SHA256
    with pytest.raises(AlgorithmNotSupportedError):
        get_algorithm_by_oid((1, 2, 3))


def test_only_rsa_writes_null_params():
    assert PKCS_RSA_SHA256.write_null_params
    assert not PKCS_ECDSA_P256_SHA256.write_null_params
    assert not PKCS_ECDSA_P384_SHA384.write_null_params
    assert not PKCS_ED25519.write_null_params


def test_ecdsa_public_key_oids_carry_curve():
    assert PKCS_ECDSA_P256_SHA256.public_key_oids == (oids.OID_EC_PUBLIC_KEY, oids.OID_EC_SECP_256_R1)
    assert PKCS_ECDSA_P384_SHA384.public_key_oids == (oids.OID_EC_PUBLIC_KEY, oids.OID_EC_SECP_384_R1)
    assert PKCS_ED25519.public_key_oids == (oids.OID_ED25519,)


@pytest.mark.parametrize("alg,size", [
    (PKCS_RSA_SHA256, 32),
    (PKCS_ECDSA_P256_SHA256, 32),
    (PKCS_ECDSA_P384_SHA384, 48),
    (PKCS_ED25519, 64),
])
def test_digest_size(alg, size):
    assert len(alg.digest(b"public key")) == size
