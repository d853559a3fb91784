"""PEM编码/解码（base64 + BEGIN/END标记）"""

import base64
import binascii
from typing import Optional, Tuple

from .exceptions import PemError

CERTIFICATE = "CERTIFICATE"
CERTIFICATE_REQUEST = "CERTIFICATE REQUEST"
PRIVATE_KEY = "PRIVATE KEY"

_LINE_LENGTH = 64


def encode(label: str, der: bytes) -> str:
    """将DER数据包装成PEM文本"""
    b64 = base64.b64encode(der).decode("ascii")
    lines = [f"-----BEGIN {label}-----"]
    while b64:
        lines.append(b64[:_LINE_LENGTH])
        b64 = b64[_LINE_LENGTH:]
    lines.append(f"-----END {label}-----")
    return "\n".join(lines) + "\n"


def decode(pem_data, label: Optional[str] = None) -> Tuple[str, bytes]:
    """
    解析第一个PEM块

    Args:
        pem_data: PEM文本（str或bytes）
        label: 期望的标签，None表示不检查

    Returns:
        (标签, DER数据)
    """
    if isinstance(pem_data, bytes):
        try:
            pem_data = pem_data.decode("ascii")
        except UnicodeDecodeError as e:
            raise PemError(f"PEM data is not ASCII: {e}") from e

    begin_pos = pem_data.find("-----BEGIN ")
    if begin_pos < 0:
        raise PemError("Missing PEM BEGIN marker")
    label_end = pem_data.find("-----", begin_pos + len("-----BEGIN "))
    if label_end < 0:
        raise PemError("Malformed PEM BEGIN marker")
    found_label = pem_data[begin_pos + len("-----BEGIN "):label_end]

    end_marker = f"-----END {found_label}-----"
    end_pos = pem_data.find(end_marker, label_end)
    if end_pos < 0:
        raise PemError(f"Missing PEM END marker for {found_label}")

    if label is not None and found_label != label:
        raise PemError(f"Expected PEM label {label!r}, found {found_label!r}")

    # 去除空白字符后base64解码
    body = "".join(pem_data[label_end + len("-----"):end_pos].split())
    try:
        der = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PemError(f"Invalid base64 in PEM body: {e}") from e
    return found_label, der
