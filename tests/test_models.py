import datetime

import pytest

from certgen import (
    Ca,
    CertificateParams,
    Constrained,
    CustomExtension,
    DistinguishedName,
    DnType,
    PKCS_ECDSA_P256_SHA256,
    SelfSignedOnly,
    Unconstrained,
    date_time_ymd,
)
from certgen.core import oids
from certgen.exceptions import CertificateGenerationError, InvalidDigestError
from certgen.models import DEFAULT_COMMON_NAME


def test_default_params():
    p = CertificateParams()
    assert p.algorithm is PKCS_ECDSA_P256_SHA256
    assert p.not_before == date_time_ymd(1975, 1, 1)
    assert p.not_after == date_time_ymd(4096, 1, 1)
    assert p.serial_number is None
    assert p.subject_alt_names == []
    assert list(p.distinguished_name) == [(DnType.COMMON_NAME, DEFAULT_COMMON_NAME)]
    assert p.is_ca == SelfSignedOnly()
    assert p.custom_extensions == []
    assert p.key_pair is None


def test_params_new_copies_names():
    names = ["a.example"]
    p = CertificateParams.new(names)
    names.append("b.example")
    assert p.subject_alt_names == ["a.example"]


def test_default_params_are_independent():
    a = CertificateParams()
    b = CertificateParams()
    a.distinguished_name.push(DnType.COMMON_NAME, "changed")
    a.subject_alt_names.append("x.example")
    assert b.distinguished_name.get(DnType.COMMON_NAME) == DEFAULT_COMMON_NAME
    assert b.subject_alt_names == []


def test_date_time_ymd_is_utc():
    dt = date_time_ymd(2020, 2, 29)
    assert dt == datetime.datetime(2020, 2, 29, tzinfo=datetime.timezone.utc)


def test_distinguished_name_insertion_order():
    dn = DistinguishedName()
    dn.push(DnType.ORGANIZATION_NAME, "Org")
    dn.push(DnType.COUNTRY_NAME, "DE")
    dn.push(DnType.COMMON_NAME, "Name")
    assert [ty for ty, _ in dn] == [DnType.ORGANIZATION_NAME, DnType.COUNTRY_NAME, DnType.COMMON_NAME]
    assert len(dn) == 3


def test_distinguished_name_overwrite_keeps_position():
    dn = DistinguishedName()
    dn.push(DnType.COMMON_NAME, "first")
    dn.push(DnType.ORGANIZATION_NAME, "Org")
    dn.push(DnType.COMMON_NAME, "second")
    assert list(dn) == [(DnType.COMMON_NAME, "second"), (DnType.ORGANIZATION_NAME, "Org")]


def test_distinguished_name_rejects_unknown_type():
    dn = DistinguishedName()
    with pytest.raises(TypeError):
        dn.push("CN", "name")


def test_distinguished_name_copy_and_equality():
    dn = DistinguishedName({DnType.COMMON_NAME: "a"})
    copy = dn.copy()
    assert copy == dn
    copy.push(DnType.COUNTRY_NAME, "US")
    assert copy != dn
    assert DnType.COUNTRY_NAME not in dn
    assert DnType.COUNTRY_NAME in copy


def test_dn_type_oids():
    assert DnType.COUNTRY_NAME.oid == (2, 5, 4, 6)
    assert DnType.ORGANIZATION_NAME.oid == (2, 5, 4, 10)
    assert DnType.COMMON_NAME.oid == (2, 5, 4, 3)


@pytest.mark.parametrize("path_len", [0, 1, 255])
def test_constrained_valid(path_len):
    assert Constrained(path_len).path_len == path_len


@pytest.mark.parametrize("path_len", [-1, 256])
def test_constrained_out_of_range(path_len):
    with pytest.raises(ValueError):
        Constrained(path_len)


def test_ca_defaults_to_unconstrained():
    assert Ca().constraint == Unconstrained()


def test_custom_extension_defaults_non_critical():
    ext = CustomExtension.from_oid_content([1, 2, 3, 4], b"\x05\x00")
    assert ext.oid == (1, 2, 3, 4)
    assert ext.content == b"\x05\x00"
    assert not ext.critical
    ext.set_criticality(True)
    assert ext.critical


def test_acme_identifier():
    digest = bytes(range(32))
    ext = CustomExtension.new_acme_identifier(digest)
    assert ext.oid == oids.OID_PE_ACME
    assert ext.critical
    # OCTET STRING (32字节)
    assert ext.content == b"\x04\x20" + digest


@pytest.mark.parametrize("size", [0, 20, 31, 33, 64])
def test_acme_identifier_rejects_wrong_digest_size(size):
    with pytest.raises(InvalidDigestError):
        CustomExtension.new_acme_identifier(b"\x00" * size)


def test_invalid_digest_error_hierarchy():
    assert issubclass(InvalidDigestError, CertificateGenerationError)
    assert issubclass(InvalidDigestError, ValueError)
