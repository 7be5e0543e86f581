"""
府省令の発令機関（M1〜M6）と規則制定機関のレジストリ

registry.yaml をインポート時に一度だけ読み込み、以後は読み取り専用で扱う。
世代ごとに番号体系が異なるため、府省は (世代, 番号) の組で識別する。
"""
import datetime
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

import yaml

from ..config import MASK_BITS, REGISTRY_PATH
from ..exceptions import FieldOverflow, MalformedIdentifier, UnknownEnumerant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    code: int
    key: str
    name: str


@dataclass(frozen=True)
class MinistryGeneration:
    """府省の一世代分の番号表"""
    generation: int
    start: datetime.date
    end: Optional[datetime.date]
    entries: Mapping[int, RegistryEntry]

    def __contains__(self, code: int) -> bool:
        return code in self.entries

    def covers(self, day: datetime.date) -> bool:
        return self.start <= day and (self.end is None or day <= self.end)


def _load_entries(rows: Iterable[Dict]) -> Mapping[int, RegistryEntry]:
    entries = {}
    for row in rows:
        entry = RegistryEntry(int(row["code"]), row["key"], row["name"])
        if entry.code in entries:
            raise ValueError(f"duplicate registry code {entry.code} in {REGISTRY_PATH}")
        if not 1 <= entry.code <= MASK_BITS:
            raise ValueError(f"registry code out of range: {entry.code}")
        entries[entry.code] = entry
    return MappingProxyType(entries)


def _load_registry(path=REGISTRY_PATH):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    generations = {}
    for name, body in data["ministries"].items():
        generation = int(name.lstrip("M"))
        generations[generation] = MinistryGeneration(
            generation=generation,
            start=body["start"],
            end=body.get("end"),
            entries=_load_entries(body["entries"]),
        )

    institutions = _load_entries(data["institutions"])
    aliases = {int(k): int(v) for k, v in (data.get("institution_aliases") or {}).items()}
    for alias, canonical in aliases.items():
        if canonical not in institutions:
            raise ValueError(f"institution alias {alias} points to unknown code {canonical}")

    logger.debug(
        f"Loaded {len(generations)} ministry generations and "
        f"{len(institutions)} institutions from {path}"
    )
    return MappingProxyType(generations), institutions, MappingProxyType(aliases)


MINISTRY_GENERATIONS, INSTITUTIONS, INSTITUTION_ALIASES = _load_registry()


# ==============================================================================
# 府省（世代別）
# ==============================================================================

def get_generation(generation: int) -> MinistryGeneration:
    try:
        return MINISTRY_GENERATIONS[generation]
    except KeyError:
        raise UnknownEnumerant(f"unknown ministry generation: M{generation}") from None


def generation_for(day: datetime.date) -> int:
    """
    日付時点で有効な府省の世代を返す

    Examples:
        >>> generation_for(datetime.date(1950, 4, 1))
        5
    """
    for gen in MINISTRY_GENERATIONS.values():
        if gen.covers(day):
            return gen.generation
    raise UnknownEnumerant(f"no ministry generation covers {day.isoformat()}")


def ministry_name(generation: int, code: int) -> str:
    gen = get_generation(generation)
    if code not in gen:
        raise UnknownEnumerant(f"unknown ministry code {code} for M{generation}", str(code))
    return gen.entries[code].name


def check_ministry_codes(generation: int, codes: Iterable[int]) -> FrozenSet[int]:
    """世代の番号表に無い番号が含まれていれば UnknownEnumerant"""
    gen = get_generation(generation)
    codes = frozenset(codes)
    unknown = sorted(c for c in codes if c not in gen)
    if unknown:
        raise UnknownEnumerant(
            f"unknown ministry code(s) {unknown} for M{generation}",
            ",".join(str(c) for c in unknown),
        )
    return codes


def encode_mask(codes: Iterable[int]) -> int:
    """
    府省番号の集合を 28 bit のマスクに変換（番号 n → bit n-1）

    Examples:
        >>> encode_mask({13})
        4096
        >>> encode_mask({1, 3})
        5

    Raises:
        FieldOverflow: 番号が 1〜28 の整数でない場合
    """
    mask = 0
    for code in codes:
        if not isinstance(code, int) or isinstance(code, bool) or not 1 <= code <= MASK_BITS:
            raise FieldOverflow(f"ministry code must be 1..{MASK_BITS}: {code!r}", str(code))
        mask |= 1 << (code - 1)
    return mask


def decode_mask(bits: str, generation: int) -> FrozenSet[int]:
    """
    28 文字の二進文字列から府省番号の集合を復元

    左から i 文字目（0 始まり）が '1' なら番号 28 - i とする。

    Raises:
        MalformedIdentifier: 28 文字の 0/1 列でない場合
        UnknownEnumerant: 世代の番号表に無い番号が立っている場合
    """
    if len(bits) != MASK_BITS or any(c not in "01" for c in bits):
        raise MalformedIdentifier(f"ministry mask is not a {MASK_BITS}-bit string: {bits!r}", bits)
    codes = {MASK_BITS - i for i, c in enumerate(bits) if c == "1"}
    return check_ministry_codes(generation, codes)


def mask_to_bits(mask: int) -> str:
    return format(mask, f"0{MASK_BITS}b")


# ==============================================================================
# 規則制定機関
# ==============================================================================

def canonical_institution(code: int) -> int:
    """
    機関番号を正規の番号に変換（別名 17 → 8）

    Raises:
        UnknownEnumerant: 未定義の番号
    """
    code = INSTITUTION_ALIASES.get(code, code)
    if code not in INSTITUTIONS:
        raise UnknownEnumerant(f"unknown institution code: {code}", str(code))
    return code


def institution_name(code: int) -> str:
    return INSTITUTIONS[canonical_institution(code)].name


def institution_codes() -> Tuple[int, ...]:
    return tuple(INSTITUTIONS)
