"""
证书生成 - 数据模型包

定义证书参数、识别名和扩展相关的数据模型。
"""

from .certificates import (
    DEFAULT_COMMON_NAME,
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

__all__ = [
    'DEFAULT_COMMON_NAME',
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
]
