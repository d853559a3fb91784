"""
证书生成配置
默认算法、输出路径和日志级别，支持环境变量覆盖
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .core.algorithms import SIGNATURE_ALGORITHMS, SignatureAlgorithm, get_algorithm

logger = logging.getLogger(__name__)

# 默认配置
DEFAULT_ALGORITHM = "ecdsa-p256-sha256"
DEFAULT_OUTPUT_DIR = "certs"
DEFAULT_PREFIX = "cert"
DEFAULT_LOG_LEVEL = "WARNING"

# 支持的算法列表
SUPPORTED_ALGORITHMS = list(SIGNATURE_ALGORITHMS)


class OutputConfig:
    """输出文件配置"""
    def __init__(self, base_dir: Optional[str] = None, prefix: str = DEFAULT_PREFIX):
        if base_dir is None:
            base_dir = os.environ.get("CERTGEN_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
        self.base_dir = base_dir
        self.prefix = prefix

    def get_output_paths(self) -> dict:
        """获取输出文件路径"""
        base = Path(self.base_dir)
        return {
            "cert": str(base / f"{self.prefix}.crt.pem"),
            "key": str(base / f"{self.prefix}.key.pem"),
            "csr": str(base / f"{self.prefix}.csr.pem"),
        }

    def ensure_base_dir(self) -> Path:
        base = Path(self.base_dir)
        base.mkdir(parents=True, exist_ok=True)
        return base


def get_algorithm_from_env() -> str:
    """从环境变量获取签名算法"""
    return os.environ.get("CERTGEN_ALGORITHM", DEFAULT_ALGORITHM)


def get_log_level_from_env() -> str:
    """从环境变量获取日志级别"""
    return os.environ.get("CERTGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def resolve_algorithm(name: Optional[str] = None) -> SignatureAlgorithm:
    """
    获取签名算法

    Args:
        name: 算法名称，None则读取环境变量

    Returns:
        SignatureAlgorithm，未知名称时回退到默认算法
    """
    if name is None:
        name = get_algorithm_from_env()

    if name.lower() not in SIGNATURE_ALGORITHMS:
        logger.warning("algorithm %r is not supported, using default %s (supported: %s)",
                       name, DEFAULT_ALGORITHM, ", ".join(SUPPORTED_ALGORITHMS))
        name = DEFAULT_ALGORITHM

    return get_algorithm(name)


def get_output_config(base_dir: Optional[str] = None,
                      prefix: Optional[str] = None) -> OutputConfig:
    return OutputConfig(base_dir=base_dir, prefix=prefix or DEFAULT_PREFIX)
