"""
ASN.1 结构定义与辅助函数

证书本体使用 pyasn1_modules.rfc5280 的定义；
PKCS#10请求和UTF8编码的dNSName序列在这里单独定义。
"""

from pyasn1.codec.der import encoder
from pyasn1.type import char, namedtype, tag, univ
from pyasn1_modules import rfc5280


class DnsNames(univ.SequenceOf):
    """GeneralNames中只包含dNSName（[2] IMPLICIT，UTF8内容）"""
    componentType = char.UTF8String().subtype(
        implicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 2)
    )


class AttributeValues(univ.SetOf):
    componentType = univ.Any()


class Attribute(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('type', univ.ObjectIdentifier()),
        namedtype.NamedType('values', AttributeValues())
    )


class Attributes(univ.SetOf):
    componentType = Attribute()


class CertificationRequestInfo(univ.Sequence):
    """PKCS#10 CertificationRequestInfo (RFC 2986 §4.1)"""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('version', univ.Integer()),
        namedtype.NamedType('subject', rfc5280.Name()),
        namedtype.NamedType('subjectPKInfo', rfc5280.SubjectPublicKeyInfo()),
        namedtype.NamedType('attributes', Attributes().subtype(
            implicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatConstructed, 0)))
    )


class CertificationRequest(univ.Sequence):
    """PKCS#10 CertificationRequest (RFC 2986 §4.2)"""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('certificationRequestInfo', CertificationRequestInfo()),
        namedtype.NamedType('signatureAlgorithm', rfc5280.AlgorithmIdentifier()),
        namedtype.NamedType('signature', univ.BitString())
    )


def encode(value) -> bytes:
    """DER编码"""
    return encoder.encode(value)


def encoded_any(value) -> univ.Any:
    """先DER编码再包装成Any（用于AlgorithmIdentifier参数、属性值等开放类型）"""
    return univ.Any(encoder.encode(value))


def bit_string(data: bytes) -> univ.BitString:
    return univ.BitString.fromOctetString(data)
