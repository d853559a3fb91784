"""
密钥对管理 - 生成、导入、签名、导出

三种密钥对：ECDSA (P-256/P-384)、Ed25519、RSA（只支持导入）。
每个密钥对都保留生成或导入时的原始PKCS#8字节，导出时原样返回。
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa

from .. import pem
from ..core.algorithms import SignAlgo, SignatureAlgorithm
from ..exceptions import KeyGenerationError, KeyParseError, SigningError

logger = logging.getLogger(__name__)


class KeyPairKind(Enum):
    ECDSA = "ecdsa"
    ED25519 = "ed25519"
    RSA = "rsa"


def _to_pkcs8(private_key) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )


class KeyPair(ABC):
    """用于签发证书和CSR的密钥对"""

    kind: KeyPairKind

    def __init__(self, private_key, pkcs8: bytes):
        self._private_key = private_key
        self._pkcs8 = bytes(pkcs8)

    @staticmethod
    def generate(alg: SignatureAlgorithm) -> "KeyPair":
        """为指定签名算法生成新的随机密钥对"""
        sign_algo = alg.sign_algo
        if sign_algo is SignAlgo.RSA_PKCS1_SHA256:
            raise KeyGenerationError(
                "unsupported: no key generation available for RSA"
            )

        if sign_algo is SignAlgo.ED25519:
            private_key = ed25519.Ed25519PrivateKey.generate()
            key_pair = Ed25519KeyPair(private_key, _to_pkcs8(private_key))
        else:
            curve = _CURVES[sign_algo]()
            private_key = ec.generate_private_key(curve)
            key_pair = EcdsaKeyPair(private_key, _to_pkcs8(private_key), sign_algo)

        logger.debug("generated %s key pair for %s", key_pair.kind.value, alg.name)
        return key_pair

    @staticmethod
    def from_der(pkcs8: bytes) -> "KeyPair":
        """
        从PKCS#8 DER字节导入密钥对

        检测顺序：Ed25519 -> ECDSA P-256 -> ECDSA P-384 -> RSA，
        第一个匹配的类型胜出。
        """
        pkcs8 = bytes(pkcs8)
        try:
            private_key = serialization.load_der_private_key(pkcs8, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyParseError(f"Could not parse key pair: {e}") from e

        if isinstance(private_key, ed25519.Ed25519PrivateKey):
            key_pair = Ed25519KeyPair(private_key, pkcs8)
        elif (isinstance(private_key, ec.EllipticCurvePrivateKey)
              and isinstance(private_key.curve, ec.SECP256R1)):
            key_pair = EcdsaKeyPair(private_key, pkcs8, SignAlgo.ECDSA_P256_SHA256)
        elif (isinstance(private_key, ec.EllipticCurvePrivateKey)
              and isinstance(private_key.curve, ec.SECP384R1)):
            key_pair = EcdsaKeyPair(private_key, pkcs8, SignAlgo.ECDSA_P384_SHA384)
        elif isinstance(private_key, rsa.RSAPrivateKey):
            key_pair = RsaKeyPair(private_key, pkcs8)
        else:
            raise KeyParseError(
                f"Could not parse key pair: unsupported key type {type(private_key).__name__}"
            )

        logger.debug("imported %s key pair (%d bytes)", key_pair.kind.value, len(pkcs8))
        return key_pair

    @staticmethod
    def from_pem(pem_str) -> "KeyPair":
        """从PEM格式（PRIVATE KEY）导入密钥对"""
        _, der = pem.decode(pem_str, pem.PRIVATE_KEY)
        return KeyPair.from_der(der)

    @abstractmethod
    def public_key_bytes(self) -> bytes:
        """获取原始公钥字节（写入subjectPublicKeyInfo）"""
        pass

    def sign(self, message: bytes) -> bytes:
        """签名消息"""
        try:
            return self._sign(message)
        except Exception as e:
            raise SigningError(f"{self.kind.value} signing failed: {e}") from e

    @abstractmethod
    def _sign(self, message: bytes) -> bytes:
        pass

    def serialize_der(self) -> bytes:
        """返回原始PKCS#8字节"""
        return self._pkcs8

    def serialize_pem(self) -> str:
        """PEM格式的PKCS#8私钥"""
        return pem.encode(pem.PRIVATE_KEY, self._pkcs8)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EcdsaKeyPair(KeyPair):
    """ECDSA密钥对（P-256 + SHA-256 或 P-384 + SHA-384）"""

    kind = KeyPairKind.ECDSA

    def __init__(self, private_key: ec.EllipticCurvePrivateKey, pkcs8: bytes,
                 sign_algo: SignAlgo):
        super().__init__(private_key, pkcs8)
        self.sign_algo = sign_algo
        self._hash = _ECDSA_HASHES[sign_algo]

    def public_key_bytes(self) -> bytes:
        return self._private_key.public_key().public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.UncompressedPoint
        )

    def _sign(self, message: bytes) -> bytes:
        # DER编码的 ECDSA-Sig-Value
        return self._private_key.sign(message, ec.ECDSA(self._hash()))

    def __repr__(self) -> str:
        return f"EcdsaKeyPair({self.sign_algo.value})"


class Ed25519KeyPair(KeyPair):
    """Ed25519密钥对"""

    kind = KeyPairKind.ED25519

    def public_key_bytes(self) -> bytes:
        return self._private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )

    def _sign(self, message: bytes) -> bytes:
        return self._private_key.sign(message)


class RsaKeyPair(KeyPair):
    """RSA密钥对（PKCS#1 v1.5 + SHA-256）"""

    kind = KeyPairKind.RSA

    def public_key_bytes(self) -> bytes:
        # RSAPublicKey ::= SEQUENCE { modulus, publicExponent }
        return self._private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.PKCS1
        )

    def _sign(self, message: bytes) -> bytes:
        return self._private_key.sign(
            message,
            padding.PKCS1v15(),
            hashes.SHA256()
        )


_CURVES = {
    SignAlgo.ECDSA_P256_SHA256: ec.SECP256R1,
    SignAlgo.ECDSA_P384_SHA384: ec.SECP384R1,
}

_ECDSA_HASHES = {
    SignAlgo.ECDSA_P256_SHA256: hashes.SHA256,
    SignAlgo.ECDSA_P384_SHA384: hashes.SHA384,
}
