"""
元号と西暦の相互変換

明治以降の五つの元号を扱う。元号の切り替わり日は以下の通り:

- 明治: 1868-10-23 〜 1912-07-29
- 大正: 1912-07-30 〜 1926-12-24
- 昭和: 1926-12-25 〜 1989-01-07
- 平成: 1989-01-08 〜 2019-04-30
- 令和: 2019-05-01 〜
"""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple, Union

from ..exceptions import FieldOverflow, MalformedIdentifier, UnknownEnumerant


# (値, 法令IDの元号番号, 漢字表記, 略号, 元年の前年の西暦, 開始日 yyyymmdd)
_ERA_TABLE = (
    ("Meiji", 1, "明治", "M", 1867, 18681023),
    ("Taisho", 2, "大正", "T", 1911, 19120730),
    ("Showa", 3, "昭和", "S", 1925, 19261225),
    ("Heisei", 4, "平成", "H", 1988, 19890108),
    ("Reiwa", 5, "令和", "R", 2018, 20190501),
)


@total_ordering
class Era(Enum):
    """元号（時系列順に比較可能）"""
    MEIJI = "Meiji"
    TAISHO = "Taisho"
    SHOWA = "Showa"
    HEISEI = "Heisei"
    REIWA = "Reiwa"

    @property
    def digit(self) -> int:
        return _ERA_ROWS[self.value][1]

    @property
    def kanji(self) -> str:
        return _ERA_ROWS[self.value][2]

    @property
    def code(self) -> str:
        return _ERA_ROWS[self.value][3]

    @property
    def offset(self) -> int:
        return _ERA_ROWS[self.value][4]

    @property
    def start(self) -> int:
        return _ERA_ROWS[self.value][5]

    def __lt__(self, other):
        if not isinstance(other, Era):
            return NotImplemented
        return self.digit < other.digit

    @classmethod
    def from_digit(cls, digit: Union[int, str]) -> "Era":
        """
        法令ID先頭の元号番号（1〜5）から元号を取得

        Raises:
            MalformedIdentifier: 数字でない場合
            UnknownEnumerant: 1〜5 以外の場合
        """
        if isinstance(digit, str):
            if len(digit) != 1 or digit not in "0123456789":
                raise MalformedIdentifier(f"era digit is not a digit: {digit!r}", digit)
            digit = int(digit)
        for era in cls:
            if era.digit == digit:
                return era
        raise UnknownEnumerant(f"unknown era digit: {digit}", str(digit))

    @classmethod
    def parse(cls, text: str) -> "Era":
        """
        元号の各種表記をパース

        Examples:
            >>> Era.parse('昭和')
            <Era.SHOWA: 'Showa'>
            >>> Era.parse('H')
            <Era.HEISEI: 'Heisei'>
            >>> Era.parse('5')
            <Era.REIWA: 'Reiwa'>
        """
        if text.isdigit():
            return cls.from_digit(text)
        for era in cls:
            if text in (era.value, era.value.lower(), era.kanji, era.code):
                return era
        raise UnknownEnumerant(f"unknown era: {text!r}", text)


_ERA_ROWS = {row[0]: row for row in _ERA_TABLE}


def ad_year(era: Era, year: int) -> int:
    """元号年を西暦年に変換（昭和45年 → 1970）"""
    return era.offset + year


def from_ad(year: int, month: int, day: int) -> Tuple[Era, int]:
    """
    西暦の年月日から (元号, 元号年) を求める

    Examples:
        >>> from_ad(1912, 7, 29)
        (<Era.MEIJI: 'Meiji'>, 45)
        >>> from_ad(1912, 7, 30)
        (<Era.TAISHO: 'Taisho'>, 1)

    Raises:
        UnknownEnumerant: 明治より前の日付
    """
    t = year * 10000 + month * 100 + day
    for era in reversed(list(Era)):
        if t >= era.start:
            return era, year - era.offset
    raise UnknownEnumerant(f"no era covers {year:04}-{month:02}-{day:02}", str(t))


@total_ordering
@dataclass(frozen=True)
class Date:
    """
    日付（元号）

    月・日は省略可能。比較は西暦換算した yyyymmdd（省略は 0）で行うため、
    月日のない日付は同じ年の月日付きの日付より前に並ぶ。
    西暦換算が同じで元号が異なる場合（明治45年7月30日と大正1年7月30日など）は
    元号の数字で順序を決める。
    """
    era: Era
    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self):
        if self.year < 0:
            raise FieldOverflow(f"era year must not be negative: {self.year}")
        if self.month is not None and not 1 <= self.month <= 12:
            raise FieldOverflow(f"month out of range: {self.month}")
        if self.day is not None and not 1 <= self.day <= 31:
            raise FieldOverflow(f"day out of range: {self.day}")

    @classmethod
    def from_ad(cls, year: int, month: int, day: int) -> "Date":
        era, era_year = from_ad(year, month, day)
        return cls(era, era_year, month, day)

    @property
    def ad(self) -> int:
        """西暦年"""
        return ad_year(self.era, self.year)

    def sort_key(self) -> int:
        return self.ad * 10000 + (self.month or 0) * 100 + (self.day or 0)

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return (self.sort_key(), self.era.digit) < (other.sort_key(), other.era.digit)

    def to_japanese(self) -> str:
        """
        和暦表記に変換

        Examples:
            >>> Date(Era.SHOWA, 45, 4, 1).to_japanese()
            '昭和45年4月1日'
            >>> Date(Era.REIWA, 1).to_japanese()
            '令和1年'
        """
        text = f"{self.era.kanji}{self.year}年"
        if self.month is not None:
            text += f"{self.month}月"
            if self.day is not None:
                text += f"{self.day}日"
        return text

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"era": self.era.value, "year": self.year}
        if self.month is not None:
            data["month"] = self.month
        if self.day is not None:
            data["day"] = self.day
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Date":
        if not isinstance(data, dict):
            raise MalformedIdentifier(f"date record must be an object: {data!r}", data)
        try:
            era = Era(data["era"])
            year = data["year"]
        except KeyError as e:
            raise MalformedIdentifier(f"date record is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise UnknownEnumerant(f"unknown era: {data['era']!r}", data["era"]) from e
        month, day = data.get("month"), data.get("day")
        for name, value, optional in (("year", year, False), ("month", month, True), ("day", day, True)):
            if value is None and optional:
                continue
            # bool は int のサブクラスなので除外する
            if not isinstance(value, int) or isinstance(value, bool):
                raise MalformedIdentifier(f"date {name} must be an integer: {value!r}", value)
        return cls(era, year, month, day)
