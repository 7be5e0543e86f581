"""
改正法令の情報（LawPatchInfo）

`<法令ID>_<西暦 yyyymmdd>_<改正法令ID または 0 が 15 個>` の形式。
末尾が 000000000000000 の場合は改正ではなく制定時の記録を表す。
"""
import re
from dataclasses import dataclass
from typing import Optional

from ..config import PATCH_SENTINEL
from ..exceptions import FieldOverflow, MalformedIdentifier, UnknownEnumerant
from .era import Date, from_ad
from .law_id import LawId, decode, encode

_AD_DATE = re.compile(r"(\d{4})(\d{2})(\d{2})", re.ASCII)


@dataclass(frozen=True)
class LawPatchInfo:
    """改正法令の情報"""
    id: LawId
    # 改正・成立年月日
    patch_date: Date
    # 改正した法令（成立法の場合は None）
    patch_id: Optional[LawId] = None

    def __post_init__(self):
        d = self.patch_date
        if d.month is None or d.day is None:
            raise FieldOverflow(
                f"patch_date needs month and day to fill the yyyymmdd field: {d}"
            )
        # 西暦で書き出すため、元号がその日付の元号と一致しないと読み戻せない
        try:
            era_year = from_ad(d.ad, d.month, d.day)
        except UnknownEnumerant as e:
            raise FieldOverflow(f"patch_date is not covered by any era: {d}") from e
        if era_year != (d.era, d.year):
            raise FieldOverflow(f"patch_date is outside its era: {d.to_japanese()}")

    @property
    def is_original(self) -> bool:
        return self.patch_id is None

    def __str__(self) -> str:
        return encode_patch(self)


def encode_patch(info: LawPatchInfo) -> str:
    """
    Examples:
        >>> from .era import Era
        >>> from .law_id_type import Act, RippouType
        >>> law = LawId(Era.SHOWA, 45, Act(RippouType.KAKUHOU, 89))
        >>> encode_patch(LawPatchInfo(law, Date.from_ad(1970, 4, 1)))
        '345AC0000000089_19700401_000000000000000'
    """
    d = info.patch_date
    patch = PATCH_SENTINEL if info.patch_id is None else encode(info.patch_id)
    return f"{encode(info.id)}_{d.ad:04}{d.month:02}{d.day:02}_{patch}"


def decode_patch(text: str) -> LawPatchInfo:
    """
    改正法令の情報をデコード

    日付欄は常に西暦として扱い、元号に変換する。

    Raises:
        MalformedIdentifier: 区切り・日付・法令IDの書式不正
        UnknownEnumerant: 法令ID内の未定義値、明治より前の日付
    """
    if not isinstance(text, str):
        raise MalformedIdentifier(f"patch record must be a string: {text!r}", text)
    parts = text.split("_")
    if len(parts) != 3:
        raise MalformedIdentifier(
            f"patch record must have 3 '_'-separated fields, got {len(parts)}: {text!r}", text
        )
    id_s, date_s, patch_s = parts

    match = _AD_DATE.fullmatch(date_s)
    if not match:
        raise MalformedIdentifier(f"patch date must be yyyymmdd: {date_s!r}", date_s)
    year, month, day = (int(g) for g in match.groups())
    if not (1 <= month <= 12 and 1 <= day <= 31):
        raise MalformedIdentifier(f"patch date out of range: {date_s!r}", date_s)

    law_id = decode(id_s)
    patch_date = Date.from_ad(year, month, day)
    patch_id = None if patch_s == PATCH_SENTINEL else decode(patch_s)
    return LawPatchInfo(law_id, patch_date, patch_id)
