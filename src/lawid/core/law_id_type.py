"""
法令IDの種別部分（12 文字）の表現とエンコード・デコード

法令ID命名規則 <https://elaws.e-gov.go.jp/file/LawIdNamingConvention.pdf> に従う。

| 種別 | タグ | 欄（幅） |
|---|---|---|
| 憲法 | CONSTITUTION | なし |
| 法律 | AC | 立法種別(7), 番号(3) |
| 政令・勅令・太政官布告/達/布達 | CO/IO/DF/DT/DH | 効力(7), 番号(3) |
| 府省令 | M1〜M6 | 府省マスク(7, 16進), 番号(3) |
| 人事院規則 | RJNJ | 分類(2), 分類内連番(3), 改正連番(3) |
| 機関の規則 | R | 機関番号(8), 番号(3) |
| 内閣総理大臣決定 | RPMD | 月(2), 日(2), 連番(4) |

デコードはタグの長い順に照合する（RJNJ / RPMD を R より先に判定するため）。
"""
import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, FrozenSet, Iterable, Mapping

from ..config import PAYLOAD_LENGTH
from ..exceptions import FieldOverflow, MalformedIdentifier, UnknownEnumerant
from . import registry

_DIGITS = re.compile(r"[0-9]+")
_HEX_MASK = re.compile(r"[0-9A-F]{7}")

FLAG_WIDTH = 7
MASK_WIDTH = 7


def check_width(name: str, value: int, width: int) -> int:
    """固定幅 width 桁の 10 進数に収まるか検証"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldOverflow(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < 10 ** width:
        raise FieldOverflow(f"{name}={value} does not fit in {width} digits", str(value))
    return value


def parse_digits(name: str, text: str) -> int:
    """ゼロ埋め 10 進数の欄をパース（ASCII 数字のみ許可）"""
    if not _DIGITS.fullmatch(text):
        raise MalformedIdentifier(f"{name} is not numeric: {text!r}", text)
    return int(text)


class RippouType(str, Enum):
    """法律の立法の種類"""
    KAKUHOU = "Kakuhou"  # 閣法
    SYUIN = "Syuin"  # 衆議院議員立法
    SANIN = "Sanin"  # 参議院議員立法


class LawEfficacy(str, Enum):
    """法律の効力の種類"""
    CABINET_ORDER = "CabinetOrder"  # 政令
    LAW = "Law"  # 法律


RIPPOU_FLAGS: Mapping[RippouType, str] = MappingProxyType({
    RippouType.KAKUHOU: "0000000",
    RippouType.SYUIN: "1000000",
    RippouType.SANIN: "0100000",
})

EFFICACY_FLAGS: Mapping[LawEfficacy, str] = MappingProxyType({
    LawEfficacy.CABINET_ORDER: "0000000",
    LawEfficacy.LAW: "1000000",
})


def _parse_flag(flag: str, table: Mapping[Enum, str], label: str):
    parse_digits(label, flag)
    for member, text in table.items():
        if text == flag:
            return member
    raise UnknownEnumerant(f"unknown {label} flag: {flag}", flag)


# ==============================================================================
# 発令機関
# ==============================================================================

@dataclass(frozen=True)
class Ministry:
    """府省（共同発令のため番号の集合を持つ）"""
    generation: int
    codes: FrozenSet[int]

    def __post_init__(self):
        object.__setattr__(self, "codes", registry.check_ministry_codes(self.generation, self.codes))

    @classmethod
    def of(cls, generation: int, *codes: int) -> "Ministry":
        return cls(generation, frozenset(codes))

    @property
    def mask(self) -> int:
        return registry.encode_mask(self.codes)

    @property
    def names(self) -> Iterable[str]:
        return [registry.ministry_name(self.generation, c) for c in sorted(self.codes)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generation": self.generation,
            "codes": sorted(self.codes),
            "names": list(self.names),
        }


@dataclass(frozen=True)
class Institution:
    """規則を定める機関（別名の番号は正規の番号に寄せる）"""
    code: int

    def __post_init__(self):
        object.__setattr__(self, "code", registry.canonical_institution(self.code))

    @property
    def name(self) -> str:
        return registry.institution_name(self.code)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "name": self.name}


# ==============================================================================
# 種別
# ==============================================================================

class LawIdType:
    """法令ID種別の基底クラス"""
    TAG: ClassVar[str] = ""
    LABEL: ClassVar[str] = ""

    @property
    def tag(self) -> str:
        return self.TAG

    def encode(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.encode()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": type(self).__name__, "label": self.LABEL}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Enum):
                value = value.value
            elif hasattr(value, "to_dict"):
                value = value.to_dict()
            data[field.name] = value
        return data


@dataclass(frozen=True)
class Constitution(LawIdType):
    TAG: ClassVar[str] = "CONSTITUTION"
    LABEL: ClassVar[str] = "憲法"

    def encode(self) -> str:
        return self.TAG

    @classmethod
    def from_fields(cls, fields: str) -> "Constitution":
        return cls()


@dataclass(frozen=True)
class Act(LawIdType):
    rippou_type: RippouType
    num: int
    TAG: ClassVar[str] = "AC"
    LABEL: ClassVar[str] = "法律"

    def __post_init__(self):
        object.__setattr__(self, "rippou_type", RippouType(self.rippou_type))
        check_width("num", self.num, 3)

    def encode(self) -> str:
        return f"{self.TAG}{RIPPOU_FLAGS[self.rippou_type]}{self.num:03}"

    @classmethod
    def from_fields(cls, fields: str) -> "Act":
        rippou_type = _parse_flag(fields[:FLAG_WIDTH], RIPPOU_FLAGS, "rippou_type")
        return cls(rippou_type, parse_digits("num", fields[FLAG_WIDTH:]))


@dataclass(frozen=True)
class _EfficacyOrder(LawIdType):
    """効力フラグと番号を持つ命令・布告の共通形"""
    efficacy: LawEfficacy
    num: int

    def __post_init__(self):
        object.__setattr__(self, "efficacy", LawEfficacy(self.efficacy))
        check_width("num", self.num, 3)

    def encode(self) -> str:
        return f"{self.TAG}{EFFICACY_FLAGS[self.efficacy]}{self.num:03}"

    @classmethod
    def from_fields(cls, fields: str):
        efficacy = _parse_flag(fields[:FLAG_WIDTH], EFFICACY_FLAGS, "efficacy")
        return cls(efficacy, parse_digits("num", fields[FLAG_WIDTH:]))


@dataclass(frozen=True)
class CabinetOrder(_EfficacyOrder):
    TAG: ClassVar[str] = "CO"
    LABEL: ClassVar[str] = "政令"


@dataclass(frozen=True)
class ImperialOrder(_EfficacyOrder):
    TAG: ClassVar[str] = "IO"
    LABEL: ClassVar[str] = "勅令"


@dataclass(frozen=True)
class DajokanFukoku(_EfficacyOrder):
    TAG: ClassVar[str] = "DF"
    LABEL: ClassVar[str] = "太政官布告"


@dataclass(frozen=True)
class DajokanTasshi(_EfficacyOrder):
    TAG: ClassVar[str] = "DT"
    LABEL: ClassVar[str] = "太政官達"


@dataclass(frozen=True)
class DajokanHutatsu(_EfficacyOrder):
    TAG: ClassVar[str] = "DH"
    LABEL: ClassVar[str] = "太政官布達"


@dataclass(frozen=True)
class MinistryOrder(LawIdType):
    """
    府省令

    府省の集合は 28 bit マスクとし、7 桁ゼロ埋めの 16 進数（大文字）で表す。
    例: M5 の郵政省令（番号 13）→ bit 12 → "0001000"
    """
    ministry: Ministry
    num: int
    LABEL: ClassVar[str] = "府省令"

    def __post_init__(self):
        if not isinstance(self.ministry, Ministry):
            raise TypeError(f"ministry must be a Ministry, got {type(self.ministry).__name__}")
        check_width("num", self.num, 3)

    @property
    def tag(self) -> str:
        return f"M{self.ministry.generation}"

    def encode(self) -> str:
        return f"{self.tag}{self.ministry.mask:0{MASK_WIDTH}X}{self.num:03}"

    @classmethod
    def from_fields(cls, fields: str, generation: int) -> "MinistryOrder":
        mask_text = fields[:MASK_WIDTH]
        if not _HEX_MASK.fullmatch(mask_text):
            raise MalformedIdentifier(f"ministry mask is not 7 hex digits: {mask_text!r}", mask_text)
        codes = registry.decode_mask(registry.mask_to_bits(int(mask_text, 16)), generation)
        return cls(Ministry(generation, codes), parse_digits("num", fields[MASK_WIDTH:]))


@dataclass(frozen=True)
class Jinji(LawIdType):
    """人事院規則"""
    kind: int
    kind_serial: int
    amendment_serial: int
    TAG: ClassVar[str] = "RJNJ"
    LABEL: ClassVar[str] = "人事院規則"

    def __post_init__(self):
        check_width("kind", self.kind, 2)
        check_width("kind_serial", self.kind_serial, 3)
        check_width("amendment_serial", self.amendment_serial, 3)

    def encode(self) -> str:
        return f"{self.TAG}{self.kind:02}{self.kind_serial:03}{self.amendment_serial:03}"

    @classmethod
    def from_fields(cls, fields: str) -> "Jinji":
        return cls(
            parse_digits("kind", fields[0:2]),
            parse_digits("kind_serial", fields[2:5]),
            parse_digits("amendment_serial", fields[5:8]),
        )


@dataclass(frozen=True)
class Regulation(LawIdType):
    """機関の規則"""
    institution: Institution
    num: int
    TAG: ClassVar[str] = "R"
    LABEL: ClassVar[str] = "規則"

    def __post_init__(self):
        if not isinstance(self.institution, Institution):
            raise TypeError(f"institution must be an Institution, got {type(self.institution).__name__}")
        check_width("num", self.num, 3)

    def encode(self) -> str:
        return f"{self.TAG}{self.institution.code:08}{self.num:03}"

    @classmethod
    def from_fields(cls, fields: str) -> "Regulation":
        code = parse_digits("institution", fields[:8])
        return cls(Institution(code), parse_digits("num", fields[8:]))


@dataclass(frozen=True)
class PrimeMinisterDecision(LawIdType):
    """内閣総理大臣決定の行政機関の規則"""
    month: int
    day: int
    num: int
    TAG: ClassVar[str] = "RPMD"
    LABEL: ClassVar[str] = "内閣総理大臣決定"

    def __post_init__(self):
        check_width("month", self.month, 2)
        check_width("day", self.day, 2)
        check_width("num", self.num, 4)

    def encode(self) -> str:
        return f"{self.TAG}{self.month:02}{self.day:02}{self.num:04}"

    @classmethod
    def from_fields(cls, fields: str) -> "PrimeMinisterDecision":
        return cls(
            parse_digits("month", fields[0:2]),
            parse_digits("day", fields[2:4]),
            parse_digits("num", fields[4:8]),
        )


# ==============================================================================
# デコード
# ==============================================================================

def _ministry_decoder(generation: int) -> Callable[[str], MinistryOrder]:
    return lambda fields: MinistryOrder.from_fields(fields, generation)


_dispatch: Dict[int, Dict[str, Callable[[str], LawIdType]]] = {}


def _register(tag: str, decoder: Callable[[str], LawIdType]) -> None:
    _dispatch.setdefault(len(tag), {})[tag] = decoder


for _cls in (Constitution, Act, CabinetOrder, ImperialOrder, DajokanFukoku,
             DajokanTasshi, DajokanHutatsu, Jinji, PrimeMinisterDecision, Regulation):
    _register(_cls.TAG, _cls.from_fields)
for _generation in registry.MINISTRY_GENERATIONS:
    _register(f"M{_generation}", _ministry_decoder(_generation))

# タグの長さ → タグ → 残りの欄を受け取るデコーダ
DISPATCH: Mapping[int, Mapping[str, Callable[[str], LawIdType]]] = MappingProxyType(
    {length: MappingProxyType(tags) for length, tags in _dispatch.items()}
)
TAG_LENGTHS = tuple(sorted(DISPATCH, reverse=True))


def decode_type(payload: str) -> LawIdType:
    """
    12 文字の種別部分をデコード

    Examples:
        >>> decode_type("AC0000000089")
        Act(rippou_type=<RippouType.KAKUHOU: 'Kakuhou'>, num=89)

    Raises:
        MalformedIdentifier: 長さ不正・未知のタグ・数字欄の不正
        UnknownEnumerant: 未定義のフラグ・府省・機関
    """
    if len(payload) != PAYLOAD_LENGTH:
        raise MalformedIdentifier(
            f"law id type must be {PAYLOAD_LENGTH} characters, got {len(payload)}", payload
        )
    for length in TAG_LENGTHS:
        decoder = DISPATCH[length].get(payload[:length])
        if decoder is not None:
            return decoder(payload[length:])
    raise MalformedIdentifier(f"unknown law id type tag: {payload!r}", payload)
