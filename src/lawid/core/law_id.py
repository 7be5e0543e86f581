"""
法令ID（15 文字）

元号番号(1) + 元号年(2) + 種別部分(12)。例: 345AC0000000089 は昭和45年法律第89号。
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..config import LAW_ID_LENGTH
from ..exceptions import LawIdError, MalformedIdentifier
from .era import Date, Era
from .law_id_type import LawIdType, check_width, decode_type, parse_digits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LawId:
    era: Era
    year: int
    law_id_type: LawIdType

    def __post_init__(self):
        object.__setattr__(self, "era", Era(self.era))
        check_width("year", self.year, 2)
        if not isinstance(self.law_id_type, LawIdType):
            raise TypeError(f"law_id_type must be a LawIdType, got {type(self.law_id_type).__name__}")

    def __str__(self) -> str:
        return encode(self)

    @property
    def date(self) -> Date:
        """制定年（月日なし）"""
        return Date(self.era, self.year)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": encode(self),
            "era": self.era.value,
            "year": self.year,
            "type": self.law_id_type.to_dict(),
        }


def encode(law_id: LawId) -> str:
    """
    LawId を 15 文字の法令IDに変換

    Examples:
        >>> from .law_id_type import Act, RippouType
        >>> encode(LawId(Era.SHOWA, 45, Act(RippouType.KAKUHOU, 89)))
        '345AC0000000089'
    """
    return f"{law_id.era.digit}{law_id.year:02}{law_id.law_id_type.encode()}"


def decode(text: str) -> LawId:
    """
    15 文字の法令IDをデコード

    Raises:
        MalformedIdentifier: 長さ・書式の不正
        UnknownEnumerant: 未定義の元号番号・フラグ・府省・機関
    """
    if not isinstance(text, str) or len(text) != LAW_ID_LENGTH:
        length = len(text) if isinstance(text, str) else None
        raise MalformedIdentifier(
            f"law id must be {LAW_ID_LENGTH} characters, got {length}: {text!r}", text
        )
    try:
        era = Era.from_digit(text[0])
        year = parse_digits("year", text[1:3])
        law_id_type = decode_type(text[3:])
    except LawIdError as e:
        logger.debug(f"Failed to decode law id {text!r}: {e}")
        if e.value is None:
            e.value = text
        raise
    return LawId(era, year, law_id_type)
