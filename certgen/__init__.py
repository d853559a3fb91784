"""
X.509证书生成模块

根据声明式参数生成X.509证书和PKCS#10证书签名请求，
输出DER和PEM，可以自签名，也可以由另一个证书的密钥签发。

主要功能：
- 支持ECDSA P-256/P-384、Ed25519、RSA（只支持导入）签名算法
- Subject Alternative Name、Basic Constraints、Subject Key Identifier 和自定义扩展
- PKCS#8私钥的生成、导入与导出

使用示例：
    from certgen import generate_simple_self_signed

    cert = generate_simple_self_signed(["localhost", "hello.world.example"])
    print(cert.serialize_pem())
    print(cert.serialize_private_key_pem())
"""

from .models import (
    BasicConstraints,
    Ca,
    CertificateParams,
    Constrained,
    CustomExtension,
    DistinguishedName,
    DnType,
    IsCa,
    SelfSignedOnly,
    Unconstrained,
    date_time_ymd,
)

from .core import (
    PKCS_ECDSA_P256_SHA256,
    PKCS_ECDSA_P384_SHA384,
    PKCS_ED25519,
    PKCS_RSA_SHA256,
    SignatureAlgorithm,
    get_algorithm,
)

from .crypto import (
    Certificate,
    KeyPair,
    generate_simple_self_signed,
)

from .exceptions import (
    CertificateGenerationError,
    AlgorithmNotSupportedError,
    KeyGenerationError,
    KeyParseError,
    SigningError,
    PemError,
    InvalidDigestError,
)

__all__ = [
    # 证书与密钥
    'Certificate',
    'KeyPair',
    'generate_simple_self_signed',

    # 参数模型
    'BasicConstraints',
    'Ca',
    'CertificateParams',
    'Constrained',
    'CustomExtension',
    'DistinguishedName',
    'DnType',
    'IsCa',
    'SelfSignedOnly',
    'Unconstrained',
    'date_time_ymd',

    # 签名算法
    'PKCS_ECDSA_P256_SHA256',
    'PKCS_ECDSA_P384_SHA384',
    'PKCS_ED25519',
    'PKCS_RSA_SHA256',
    'SignatureAlgorithm',
    'get_algorithm',

    # 异常类
    'CertificateGenerationError',
    'AlgorithmNotSupportedError',
    'KeyGenerationError',
    'KeyParseError',
    'SigningError',
    'PemError',
    'InvalidDigestError',
]

__version__ = "1.0.0"
