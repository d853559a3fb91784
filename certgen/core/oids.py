"""
OID常量表

所有OID都以整数元组的形式保存，可直接传给 univ.ObjectIdentifier。
"""

# pkcs-9-at-extensionRequest (RFC 2985)
OID_PKCS_9_AT_EXTENSION_REQUEST = (1, 2, 840, 113549, 1, 9, 14)

# 名称属性 (RFC 5280)
OID_COUNTRY_NAME = (2, 5, 4, 6)
OID_ORG_NAME = (2, 5, 4, 10)
OID_COMMON_NAME = (2, 5, 4, 3)

# 公钥算法 (RFC 5480 / RFC 4055 / RFC 8410)
OID_EC_PUBLIC_KEY = (1, 2, 840, 10045, 2, 1)
OID_EC_SECP_256_R1 = (1, 2, 840, 10045, 3, 1, 7)
OID_EC_SECP_384_R1 = (1, 3, 132, 0, 34)
OID_RSA_ENCRYPTION = (1, 2, 840, 113549, 1, 1, 1)
OID_ED25519 = (1, 3, 101, 112)

# 签名算法
OID_SHA256_WITH_RSA = (1, 2, 840, 113549, 1, 1, 11)
OID_ECDSA_WITH_SHA256 = (1, 2, 840, 10045, 4, 3, 2)
OID_ECDSA_WITH_SHA384 = (1, 2, 840, 10045, 4, 3, 3)

# 证书扩展 (RFC 5280 §4.2)
OID_SUBJECT_ALT_NAME = (2, 5, 29, 17)
OID_BASIC_CONSTRAINTS = (2, 5, 29, 19)
OID_SUBJECT_KEY_IDENTIFIER = (2, 5, 29, 14)

# id-pe-acmeIdentifier (RFC 8737)
OID_PE_ACME = (1, 3, 6, 1, 5, 5, 7, 1, 31)


def oid_to_string(oid) -> str:
    """将OID元组转换为点分字符串"""
    return ".".join(str(arc) for arc in oid)
