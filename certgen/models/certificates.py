import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence, Tuple

from pyasn1.codec.der import encoder
from pyasn1.type import univ

from ..core import oids
from ..core.algorithms import PKCS_ECDSA_P256_SHA256, SignatureAlgorithm
from ..exceptions import InvalidDigestError

if TYPE_CHECKING:
    from ..crypto.signer import KeyPair

DEFAULT_COMMON_NAME = "certgen self signed cert"

MAX_SERIAL_NUMBER = 2 ** 64 - 1


class DnType(Enum):
    """识别名属性类型"""
    COUNTRY_NAME = oids.OID_COUNTRY_NAME
    ORGANIZATION_NAME = oids.OID_ORG_NAME
    COMMON_NAME = oids.OID_COMMON_NAME

    @property
    def oid(self) -> Tuple[int, ...]:
        return self.value


class DistinguishedName:
    """
    识别名（issuer / subject）

    每种属性类型最多一个值，按插入顺序编码；
    重复push同一类型会覆盖原值并保留原位置。
    """

    def __init__(self, entries: Optional[Dict[DnType, str]] = None):
        self._entries: Dict[DnType, str] = {}
        if entries:
            for ty, value in entries.items():
                self.push(ty, value)

    def push(self, ty: DnType, value: str) -> None:
        """插入一个属性"""
        if not isinstance(ty, DnType):
            raise TypeError(f"Expected DnType, got {type(ty).__name__}")
        self._entries[ty] = str(value)

    def get(self, ty: DnType) -> Optional[str]:
        return self._entries.get(ty)

    def copy(self) -> "DistinguishedName":
        return DistinguishedName(self._entries)

    def __iter__(self) -> Iterator[Tuple[DnType, str]]:
        return iter(list(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ty) -> bool:
        return ty in self._entries

    def __eq__(self, other) -> bool:
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        items = ", ".join(f"{ty.name}={value!r}" for ty, value in self)
        return f"DistinguishedName({items})"


def _default_distinguished_name() -> DistinguishedName:
    dn = DistinguishedName()
    dn.push(DnType.COMMON_NAME, DEFAULT_COMMON_NAME)
    return dn


class BasicConstraints:
    """路径长度约束（只对CA证书有效）"""
    pass


@dataclass(frozen=True)
class Unconstrained(BasicConstraints):
    """无约束"""
    pass


@dataclass(frozen=True)
class Constrained(BasicConstraints):
    """限制中间CA的数量"""
    path_len: int

    def __post_init__(self):
        if not 0 <= self.path_len <= 255:
            raise ValueError(f"path_len must be within 0..255, got {self.path_len}")


class IsCa:
    """证书是否可以签发其他证书"""
    pass


@dataclass(frozen=True)
class SelfSignedOnly(IsCa):
    """只能自签名"""
    pass


@dataclass(frozen=True)
class Ca(IsCa):
    """可以签发其他证书"""
    constraint: BasicConstraints = field(default_factory=Unconstrained)


@dataclass
class CustomExtension:
    """自定义证书扩展 (RFC 5280 §4.2)，content 为已经DER编码的扩展值"""
    oid: Tuple[int, ...]
    content: bytes
    critical: bool = False

    def __post_init__(self):
        self.oid = tuple(int(arc) for arc in self.oid)
        self.content = bytes(self.content)

    @classmethod
    def from_oid_content(cls, oid: Sequence[int], content: bytes) -> "CustomExtension":
        """创建非关键的自定义扩展"""
        return cls(oid=tuple(oid), content=content)

    @classmethod
    def new_acme_identifier(cls, sha_digest: bytes) -> "CustomExtension":
        """
        创建ACME TLS-ALPN-01使用的acmeIdentifier扩展 (RFC 8737)

        sha_digest 必须是32字节（SHA-256）。
        """
        if len(sha_digest) != 32:
            raise InvalidDigestError(
                f"wrong size of sha_digest: expected 32 bytes, got {len(sha_digest)}"
            )
        content = encoder.encode(univ.OctetString(bytes(sha_digest)))
        return cls(oid=oids.OID_PE_ACME, content=content, critical=True)

    def set_criticality(self, criticality: bool) -> None:
        self.critical = bool(criticality)


def date_time_ymd(year: int, month: int, day: int) -> datetime.datetime:
    """根据年月日构造UTC时间"""
    return datetime.datetime(year, month, day, tzinfo=datetime.timezone.utc)


@dataclass
class CertificateParams:
    """证书生成参数"""
    algorithm: SignatureAlgorithm = PKCS_ECDSA_P256_SHA256
    not_before: datetime.datetime = field(default_factory=lambda: date_time_ymd(1975, 1, 1))
    not_after: datetime.datetime = field(default_factory=lambda: date_time_ymd(4096, 1, 1))
    serial_number: Optional[int] = None
    subject_alt_names: List[str] = field(default_factory=list)
    distinguished_name: DistinguishedName = field(default_factory=_default_distinguished_name)
    is_ca: IsCa = field(default_factory=SelfSignedOnly)
    custom_extensions: List[CustomExtension] = field(default_factory=list)
    # 为None时在构造证书时生成新的随机密钥对
    key_pair: Optional["KeyPair"] = None

    @classmethod
    def new(cls, subject_alt_names: Sequence[str]) -> "CertificateParams":
        """使用默认值和给定的SAN创建参数"""
        return cls(subject_alt_names=list(subject_alt_names))
