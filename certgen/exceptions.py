class CertificateGenerationError(Exception):
    """证书生成基础异常"""
    pass

class AlgorithmNotSupportedError(CertificateGenerationError):
    """算法不支持"""
    pass

class KeyGenerationError(CertificateGenerationError):
    """密钥生成失败（RSA不支持生成）"""
    pass

class KeyParseError(CertificateGenerationError):
    """PKCS#8私钥无法解析"""
    pass

class SigningError(CertificateGenerationError):
    """签名失败"""
    pass

class PemError(CertificateGenerationError):
    """PEM格式错误"""
    pass

class InvalidDigestError(CertificateGenerationError, ValueError):
    """摘要长度错误"""
    pass
