"""
证书扩展编码

顺序固定：
1. Subject Alternative Name（总是存在，名称列表可以为空）
2. CA证书：Subject Key Identifier，然后 Basic Constraints
3. 自定义扩展（按声明顺序）

critical 默认为 FALSE，DER 要求省略该字段。
"""

from typing import Iterable, List, Sequence

from pyasn1.type import univ
from pyasn1_modules import rfc5280

from . import asn1, oids
from .algorithms import SignatureAlgorithm
from ..models.certificates import (
    BasicConstraints, Ca, CertificateParams, Constrained, CustomExtension,
)


def make_extension(oid: Sequence[int], value: bytes, critical: bool = False) -> rfc5280.Extension:
    """构造 Extension ::= SEQUENCE { extnID, critical DEFAULT FALSE, extnValue }"""
    extension = rfc5280.Extension()
    extension["extnID"] = univ.ObjectIdentifier(tuple(oid))
    if critical:
        extension["critical"] = True
    extension["extnValue"] = univ.OctetString(value)
    return extension


def encode_subject_alt_names(names: Iterable[str]) -> bytes:
    """SAN扩展值：dNSName序列，按列表顺序"""
    dns_names = asn1.DnsNames()
    dns_names.clear()
    for name in names:
        dns_names.append(name)
    return asn1.encode(dns_names)


def encode_subject_key_identifier(alg: SignatureAlgorithm, public_key: bytes) -> bytes:
    """SKI扩展值：公钥字节的摘要，摘要函数由签名算法决定"""
    return asn1.encode(rfc5280.SubjectKeyIdentifier(alg.digest(public_key)))


def encode_basic_constraints(constraint: BasicConstraints) -> bytes:
    """Basic Constraints：cA=TRUE，只有 Constrained 才写 pathLenConstraint"""
    basic_constraints = rfc5280.BasicConstraints()
    basic_constraints["cA"] = True
    if isinstance(constraint, Constrained):
        basic_constraints["pathLenConstraint"] = constraint.path_len
    return asn1.encode(basic_constraints)


def subject_alt_name_extension(names: Iterable[str]) -> rfc5280.Extension:
    return make_extension(oids.OID_SUBJECT_ALT_NAME, encode_subject_alt_names(names))


def custom_extension(ext: CustomExtension) -> rfc5280.Extension:
    return make_extension(ext.oid, ext.content, ext.critical)


def certificate_extensions(params: CertificateParams, public_key: bytes) -> List[rfc5280.Extension]:
    """证书TBS中的扩展列表"""
    extensions = [subject_alt_name_extension(params.subject_alt_names)]

    if isinstance(params.is_ca, Ca):
        extensions.append(make_extension(
            oids.OID_SUBJECT_KEY_IDENTIFIER,
            encode_subject_key_identifier(params.algorithm, public_key)
        ))
        extensions.append(make_extension(
            oids.OID_BASIC_CONSTRAINTS,
            encode_basic_constraints(params.is_ca.constraint)
        ))

    for ext in params.custom_extensions:
        extensions.append(custom_extension(ext))

    return extensions


def requested_extensions(params: CertificateParams) -> List[rfc5280.Extension]:
    """CSR extensionRequest中的扩展列表（目前只有SAN）"""
    return [subject_alt_name_extension(params.subject_alt_names)]
