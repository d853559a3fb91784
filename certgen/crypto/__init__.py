"""密码学模块 - 密钥对与证书签发"""

from .signer import (
    EcdsaKeyPair,
    Ed25519KeyPair,
    KeyPair,
    KeyPairKind,
    RsaKeyPair,
)

from .certificate import (
    Certificate,
    generate_simple_self_signed,
)

__all__ = [
    'EcdsaKeyPair',
    'Ed25519KeyPair',
    'KeyPair',
    'KeyPairKind',
    'RsaKeyPair',
    'Certificate',
    'generate_simple_self_signed',
]
