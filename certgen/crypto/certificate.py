"""
证书 - 自签名、由其他证书签发、CSR，以及私钥导出
"""

import dataclasses
import logging
from typing import Sequence

from pyasn1_modules import rfc5280

from .. import pem
from ..core import asn1
from ..core.builder import (
    build_certification_request_info,
    build_tbs_certificate,
    write_alg_ident,
)
from ..models.certificates import MAX_SERIAL_NUMBER, CertificateParams
from .signer import KeyPair

logger = logging.getLogger(__name__)


def _snapshot(params: CertificateParams) -> CertificateParams:
    """深拷贝可变字段，不含密钥对"""
    return dataclasses.replace(
        params,
        subject_alt_names=tuple(params.subject_alt_names),
        distinguished_name=params.distinguished_name.copy(),
        custom_extensions=tuple(dataclasses.replace(ext) for ext in params.custom_extensions),
        key_pair=None,
    )


class Certificate:
    """证书参数与签名密钥对；构造后不可修改"""

    def __init__(self, params: CertificateParams):
        serial = params.serial_number
        if serial is not None and not 0 <= serial <= MAX_SERIAL_NUMBER:
            raise ValueError(f"serial_number must fit in 64 bits, got {serial}")

        if params.key_pair is not None:
            key_pair = params.key_pair
        else:
            key_pair = KeyPair.generate(params.algorithm)

        self._key_pair = key_pair
        self._params = _snapshot(params)

    @classmethod
    def from_params(cls, params: CertificateParams) -> "Certificate":
        """根据参数生成证书"""
        return cls(params)

    @property
    def params(self) -> CertificateParams:
        """参数副本，修改它不会影响本证书"""
        return _snapshot(self._params)

    @property
    def key_pair(self) -> KeyPair:
        return self._key_pair

    def _tbs_certificate(self, ca: "Certificate") -> rfc5280.TBSCertificate:
        return build_tbs_certificate(
            self._params,
            self._key_pair.public_key_bytes(),
            issuer=ca._params.distinguished_name,
        )

    def serialize_der(self) -> bytes:
        """自签名证书（DER）"""
        return self.serialize_der_with_signer(self)

    def serialize_der_with_signer(self, ca: "Certificate") -> bytes:
        """
        由另一个证书的密钥签名（DER）

        issuer取自ca的识别名，subject和公钥仍是本证书的；ca为自身时即自签名。
        """
        tbs = self._tbs_certificate(ca)
        tbs_der = asn1.encode(tbs)
        signature = ca.key_pair.sign(tbs_der)

        certificate = rfc5280.Certificate()
        certificate["tbsCertificate"] = tbs
        certificate["signatureAlgorithm"] = write_alg_ident(self._params.algorithm)
        certificate["signature"] = asn1.bit_string(signature)
        der = asn1.encode(certificate)

        logger.debug("serialized %s certificate (%d bytes)",
                     "self-signed" if ca is self else "cross-signed", len(der))
        return der

    def serialize_request_der(self) -> bytes:
        """证书签名请求 PKCS#10（DER），总是由本证书的密钥签名"""
        info = build_certification_request_info(self._params, self._key_pair.public_key_bytes())
        info_der = asn1.encode(info)
        signature = self._key_pair.sign(info_der)

        request = asn1.CertificationRequest()
        request["certificationRequestInfo"] = info
        request["signatureAlgorithm"] = write_alg_ident(self._params.algorithm)
        request["signature"] = asn1.bit_string(signature)
        der = asn1.encode(request)

        logger.debug("serialized certificate request (%d bytes)", len(der))
        return der

    def serialize_pem(self) -> str:
        return pem.encode(pem.CERTIFICATE, self.serialize_der())

    def serialize_pem_with_signer(self, ca: "Certificate") -> str:
        return pem.encode(pem.CERTIFICATE, self.serialize_der_with_signer(ca))

    def serialize_request_pem(self) -> str:
        return pem.encode(pem.CERTIFICATE_REQUEST, self.serialize_request_der())

    def serialize_private_key_der(self) -> bytes:
        """PKCS#8私钥"""
        return self._key_pair.serialize_der()

    def serialize_private_key_pem(self) -> str:
        return self._key_pair.serialize_pem()


def generate_simple_self_signed(subject_alt_names: Sequence[str]) -> Certificate:
    """
    使用默认参数生成自签名证书

    Args:
        subject_alt_names: 证书有效的域名列表

    Returns:
        Certificate对象，调用 serialize_pem() 获取证书
    """
    return Certificate.from_params(CertificateParams.new(subject_alt_names))
