"""测试辅助函数：用cryptography和pyasn1独立解码生成的证书"""

from cryptography import x509
from pyasn1.codec.der import decoder
from pyasn1_modules import rfc5280

from certgen.core import oids

SAN_OID = oids.oid_to_string(oids.OID_SUBJECT_ALT_NAME)
BC_OID = oids.oid_to_string(oids.OID_BASIC_CONSTRAINTS)
SKI_OID = oids.oid_to_string(oids.OID_SUBJECT_KEY_IDENTIFIER)
ACME_OID = oids.oid_to_string(oids.OID_PE_ACME)


def load_cert(der: bytes) -> x509.Certificate:
    return x509.load_der_x509_certificate(der)


def decode_cert(der: bytes) -> rfc5280.Certificate:
    cert, rest = decoder.decode(der, asn1Spec=rfc5280.Certificate())
    assert not rest
    return cert


def extensions_by_oid(der: bytes) -> dict:
    """扩展按点分OID索引，保持编码顺序"""
    tbs = decode_cert(der)["tbsCertificate"]
    return {str(ext["extnID"]): ext for ext in tbs["extensions"]}
