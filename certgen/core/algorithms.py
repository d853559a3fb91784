"""
签名算法注册表

四个静态条目：RSA-SHA256、ECDSA P-256、ECDSA P-384、Ed25519。
条目在进程生命周期内只读，可按名称或签名OID查找。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Type

from cryptography.hazmat.primitives import hashes

from ..exceptions import AlgorithmNotSupportedError
from . import oids


class SignAlgo(Enum):
    """签名引擎必须使用的曲线/摘要组合"""
    ECDSA_P256_SHA256 = "ecdsa-p256-sha256"
    ECDSA_P384_SHA384 = "ecdsa-p384-sha384"
    ED25519 = "ed25519"
    RSA_PKCS1_SHA256 = "rsa-pkcs1-sha256"


@dataclass(frozen=True)
class SignatureAlgorithm:
    """签名算法条目"""
    name: str
    public_key_oids: Tuple[Tuple[int, ...], ...]
    sign_algo: SignAlgo
    digest_algorithm: Type[hashes.HashAlgorithm]
    signature_oid: Tuple[int, ...]
    write_null_params: bool = False

    def digest(self, data: bytes) -> bytes:
        """使用本算法的摘要函数计算摘要（也用于Subject Key Identifier）"""
        h = hashes.Hash(self.digest_algorithm())
        h.update(data)
        return h.finalize()

    def __repr__(self) -> str:
        return f"SignatureAlgorithm({self.name})"


# RSA PKCS#1 v1.5 + SHA-256 (RFC 4055)
PKCS_RSA_SHA256 = SignatureAlgorithm(
    name="rsa-sha256",
    public_key_oids=(oids.OID_RSA_ENCRYPTION,),
    sign_algo=SignAlgo.RSA_PKCS1_SHA256,
    digest_algorithm=hashes.SHA256,
    signature_oid=oids.OID_SHA256_WITH_RSA,
    write_null_params=True,
)

# ECDSA P-256 + SHA-256 (RFC 5758)
PKCS_ECDSA_P256_SHA256 = SignatureAlgorithm(
    name="ecdsa-p256-sha256",
    public_key_oids=(oids.OID_EC_PUBLIC_KEY, oids.OID_EC_SECP_256_R1),
    sign_algo=SignAlgo.ECDSA_P256_SHA256,
    digest_algorithm=hashes.SHA256,
    signature_oid=oids.OID_ECDSA_WITH_SHA256,
)

# ECDSA P-384 + SHA-384 (RFC 5758)
PKCS_ECDSA_P384_SHA384 = SignatureAlgorithm(
    name="ecdsa-p384-sha384",
    public_key_oids=(oids.OID_EC_PUBLIC_KEY, oids.OID_EC_SECP_384_R1),
    sign_algo=SignAlgo.ECDSA_P384_SHA384,
    digest_algorithm=hashes.SHA384,
    signature_oid=oids.OID_ECDSA_WITH_SHA384,
)

# Ed25519 (RFC 8410)，摘要只用于Subject Key Identifier
PKCS_ED25519 = SignatureAlgorithm(
    name="ed25519",
    public_key_oids=(oids.OID_ED25519,),
    sign_algo=SignAlgo.ED25519,
    digest_algorithm=hashes.SHA512,
    signature_oid=oids.OID_ED25519,
)


SIGNATURE_ALGORITHMS: Dict[str, SignatureAlgorithm] = {
    alg.name: alg
    for alg in (
        PKCS_RSA_SHA256,
        PKCS_ECDSA_P256_SHA256,
        PKCS_ECDSA_P384_SHA384,
        PKCS_ED25519,
    )
}


def get_algorithm(name: str) -> SignatureAlgorithm:
    """根据名称获取算法条目"""
    try:
        return SIGNATURE_ALGORITHMS[name.lower()]
    except KeyError:
        raise AlgorithmNotSupportedError(f"Unsupported algorithm: {name}") from None


def get_algorithm_by_oid(oid) -> SignatureAlgorithm:
    """根据签名OID获取算法条目，OID可以是元组或点分字符串"""
    if isinstance(oid, str):
        key = oid
    else:
        key = oids.oid_to_string(oid)
    for alg in SIGNATURE_ALGORITHMS.values():
        if oids.oid_to_string(alg.signature_oid) == key:
            return alg
    raise AlgorithmNotSupportedError(f"Unknown algorithm OID: {key}")
