#!/usr/bin/env python3
"""
证书生成命令行工具
生成自签名证书、私钥和可选的CSR
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    SUPPORTED_ALGORITHMS,
    get_log_level_from_env,
    get_output_config,
    resolve_algorithm,
)
from .core.algorithms import (
    PKCS_ECDSA_P256_SHA256,
    PKCS_ECDSA_P384_SHA384,
    PKCS_ED25519,
    PKCS_RSA_SHA256,
    SignAlgo,
    SignatureAlgorithm,
)
from .crypto.certificate import Certificate
from .crypto.signer import EcdsaKeyPair, Ed25519KeyPair, KeyPair, RsaKeyPair
from .exceptions import CertificateGenerationError
from .models.certificates import (
    Ca,
    CertificateParams,
    Constrained,
    DnType,
    Unconstrained,
)

logger = logging.getLogger(__name__)


def _algorithm_for_key(key_pair: KeyPair) -> SignatureAlgorithm:
    """根据导入的密钥类型选择签名算法"""
    if isinstance(key_pair, Ed25519KeyPair):
        return PKCS_ED25519
    if isinstance(key_pair, RsaKeyPair):
        return PKCS_RSA_SHA256
    if isinstance(key_pair, EcdsaKeyPair) and key_pair.sign_algo is SignAlgo.ECDSA_P384_SHA384:
        return PKCS_ECDSA_P384_SHA384
    return PKCS_ECDSA_P256_SHA256


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="certgen",
        description="Generate a self-signed X.509 certificate, its PKCS#8 key and optionally a CSR."
    )
    parser.add_argument("names", nargs="*", help="DNS names for the Subject Alternative Name extension.")
    parser.add_argument("--algorithm", choices=SUPPORTED_ALGORITHMS, default=None,
                        help="Signature algorithm (default: $CERTGEN_ALGORITHM or ecdsa-p256-sha256).")
    parser.add_argument("--common-name", default=None, help="Subject common name.")
    parser.add_argument("--organization", default=None, help="Subject organization name.")
    parser.add_argument("--country", default=None, help="Subject country name.")
    parser.add_argument("--serial", type=int, default=None, help="Serial number (default: 42).")
    parser.add_argument("--ca", action="store_true", help="Mark the certificate as a CA.")
    parser.add_argument("--path-len", type=int, default=None, help="CA path length constraint.")
    parser.add_argument("--key", default=None, help="PEM file with a PKCS#8 private key to use.")
    parser.add_argument("--csr", action="store_true", help="Also write a certificate signing request.")
    parser.add_argument("--out-dir", default=None, help="Output directory (default: $CERTGEN_OUTPUT_DIR or certs).")
    parser.add_argument("--prefix", default=None, help="Output file name prefix (default: cert).")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $CERTGEN_LOG_LEVEL or WARNING).")
    return parser


def build_params(args: argparse.Namespace) -> CertificateParams:
    params = CertificateParams.new(args.names)

    if args.key is not None:
        key_pair = KeyPair.from_pem(Path(args.key).read_text())
        params.key_pair = key_pair
        if args.algorithm is None:
            params.algorithm = _algorithm_for_key(key_pair)
        else:
            params.algorithm = resolve_algorithm(args.algorithm)
    else:
        params.algorithm = resolve_algorithm(args.algorithm)

    if args.common_name is not None:
        params.distinguished_name.push(DnType.COMMON_NAME, args.common_name)
    if args.organization is not None:
        params.distinguished_name.push(DnType.ORGANIZATION_NAME, args.organization)
    if args.country is not None:
        params.distinguished_name.push(DnType.COUNTRY_NAME, args.country)

    params.serial_number = args.serial

    if args.ca:
        if args.path_len is None:
            params.is_ca = Ca(Unconstrained())
        else:
            params.is_ca = Ca(Constrained(args.path_len))

    return params


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.path_len is not None and not args.ca:
        parser.error("--path-len requires --ca")

    logging.basicConfig(
        level=(args.log_level or get_log_level_from_env()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        params = build_params(args)
        cert = Certificate.from_params(params)

        output = get_output_config(args.out_dir, args.prefix)
        output.ensure_base_dir()
        paths = output.get_output_paths()

        Path(paths["cert"]).write_text(cert.serialize_pem())
        Path(paths["key"]).write_text(cert.serialize_private_key_pem())
        print(f"[OK] 证书: {paths['cert']}")
        print(f"[OK] 私钥: {paths['key']}")

        if args.csr:
            Path(paths["csr"]).write_text(cert.serialize_request_pem())
            print(f"[OK] CSR: {paths['csr']}")
    except (CertificateGenerationError, ValueError, OSError) as e:
        logger.debug("certificate generation failed", exc_info=True)
        print(f"[错误] 证书生成失败: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
