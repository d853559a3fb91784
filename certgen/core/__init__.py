"""
证书生成 - 核心包

算法注册表、ASN.1结构、扩展编码与TBS构建。
builder / extensions 依赖 models，需要时直接从子模块导入。
"""

from .algorithms import (
    PKCS_ECDSA_P256_SHA256,
    PKCS_ECDSA_P384_SHA384,
    PKCS_ED25519,
    PKCS_RSA_SHA256,
    SIGNATURE_ALGORITHMS,
    SignAlgo,
    SignatureAlgorithm,
    get_algorithm,
    get_algorithm_by_oid,
)

__all__ = [
    'PKCS_ECDSA_P256_SHA256',
    'PKCS_ECDSA_P384_SHA384',
    'PKCS_ED25519',
    'PKCS_RSA_SHA256',
    'SIGNATURE_ALGORITHMS',
    'SignAlgo',
    'SignatureAlgorithm',
    'get_algorithm',
    'get_algorithm_by_oid',
]
