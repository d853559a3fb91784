"""
TBS结构构建

- 证书 TBSCertificate (RFC 5280 §4.1)
- CSR CertificationRequestInfo (PKCS#10 / RFC 2986)
"""

from pyasn1.type import char, tag, univ
from pyasn1_modules import rfc5280

from . import asn1, extensions, oids
from .algorithms import SignatureAlgorithm
from .validity import to_generalized_time
from ..models.certificates import CertificateParams, DistinguishedName

DEFAULT_SERIAL_NUMBER = 42

_VERSION_V3 = 2
_CSR_VERSION = 0


def write_alg_ident(alg: SignatureAlgorithm) -> rfc5280.AlgorithmIdentifier:
    """签名算法标识符：签名OID，RSA还要跟一个NULL参数"""
    alg_ident = rfc5280.AlgorithmIdentifier()
    alg_ident["algorithm"] = univ.ObjectIdentifier(alg.signature_oid)
    if alg.write_null_params:
        alg_ident["parameters"] = asn1.encoded_any(univ.Null(""))
    return alg_ident


def write_public_key_alg(alg: SignatureAlgorithm) -> rfc5280.AlgorithmIdentifier:
    """subjectPublicKeyInfo中的算法：公钥OID，后面是曲线OID或NULL"""
    first, rest = alg.public_key_oids[0], alg.public_key_oids[1:]
    alg_ident = rfc5280.AlgorithmIdentifier()
    alg_ident["algorithm"] = univ.ObjectIdentifier(first)
    if rest:
        alg_ident["parameters"] = asn1.encoded_any(univ.ObjectIdentifier(rest[0]))
    elif alg.write_null_params:
        alg_ident["parameters"] = asn1.encoded_any(univ.Null(""))
    return alg_ident


def write_subject_public_key_info(alg: SignatureAlgorithm, public_key: bytes) -> rfc5280.SubjectPublicKeyInfo:
    spki = rfc5280.SubjectPublicKeyInfo()
    spki["algorithm"] = write_public_key_alg(alg)
    spki["subjectPublicKey"] = asn1.bit_string(public_key)
    return spki


def write_name(dn: DistinguishedName) -> rfc5280.Name:
    """Name：每个属性一个SET，按插入顺序"""
    rdns = rfc5280.RDNSequence()
    rdns.clear()
    for ty, value in dn:
        atv = rfc5280.AttributeTypeAndValue()
        atv["type"] = univ.ObjectIdentifier(ty.oid)
        atv["value"] = asn1.encoded_any(char.UTF8String(value))
        rdn = rfc5280.RelativeDistinguishedName()
        rdn.append(atv)
        rdns.append(rdn)
    name = rfc5280.Name()
    name["rdnSequence"] = rdns
    return name


def write_validity(params: CertificateParams) -> rfc5280.Validity:
    validity = rfc5280.Validity()
    validity["notBefore"]["generalTime"] = to_generalized_time(params.not_before)
    validity["notAfter"]["generalTime"] = to_generalized_time(params.not_after)
    return validity


def build_tbs_certificate(params: CertificateParams, public_key: bytes,
                          issuer: DistinguishedName) -> rfc5280.TBSCertificate:
    """
    构建待签名证书

    Args:
        params: 被签发证书（subject）的参数
        public_key: 被签发证书的原始公钥字节
        issuer: 签发者的识别名，自签名时与 params.distinguished_name 相同
    """
    serial = params.serial_number
    if serial is None:
        serial = DEFAULT_SERIAL_NUMBER

    tbs = rfc5280.TBSCertificate()
    tbs["version"] = _VERSION_V3
    tbs["serialNumber"] = serial
    tbs["signature"] = write_alg_ident(params.algorithm)
    tbs["issuer"] = write_name(issuer)
    tbs["validity"] = write_validity(params)
    tbs["subject"] = write_name(params.distinguished_name)
    tbs["subjectPublicKeyInfo"] = write_subject_public_key_info(params.algorithm, public_key)

    exts = rfc5280.Extensions().subtype(
        explicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 3)
    )
    for extension in extensions.certificate_extensions(params, public_key):
        exts.append(extension)
    tbs["extensions"] = exts
    return tbs


def build_certification_request_info(params: CertificateParams,
                                     public_key: bytes) -> asn1.CertificationRequestInfo:
    """构建CSR的CertificationRequestInfo，扩展通过extensionRequest属性携带"""
    requested = rfc5280.Extensions()
    for extension in extensions.requested_extensions(params):
        requested.append(extension)

    values = asn1.AttributeValues()
    values.append(asn1.encoded_any(requested))

    attribute = asn1.Attribute()
    attribute["type"] = univ.ObjectIdentifier(oids.OID_PKCS_9_AT_EXTENSION_REQUEST)
    attribute["values"] = values

    attributes = asn1.Attributes().subtype(
        implicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatConstructed, 0)
    )
    attributes.append(attribute)

    info = asn1.CertificationRequestInfo()
    info["version"] = _CSR_VERSION
    info["subject"] = write_name(params.distinguished_name)
    info["subjectPKInfo"] = write_subject_public_key_info(params.algorithm, public_key)
    info["attributes"] = attributes
    return info
