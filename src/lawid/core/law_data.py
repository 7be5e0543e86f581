"""
法令のデータ（一覧 JSON の 1 レコード）

    {
      "date": {"era": "Showa", "year": 45, "month": 4, "day": 1},
      "name": "...",
      "num": "昭和四十五年法律第八十九号",
      "id": "345AC0000000089",
      "patch": ["345AC0000000089_19700401_000000000000000"]
    }
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..exceptions import MalformedIdentifier
from .era import Date
from .law_id import LawId, decode, encode
from .patch import LawPatchInfo, decode_patch, encode_patch

REQUIRED_FIELDS = ("date", "name", "num", "id")


@dataclass(frozen=True)
class LawData:
    # 制定年月日
    date: Date
    # 法令名
    name: str
    # 法令番号
    num: str
    id: LawId
    patch: Tuple[LawPatchInfo, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "patch", tuple(self.patch))

    def latest_patch(self):
        """最も新しい改正（制定時の記録を含む）。改正情報がなければ None"""
        if not self.patch:
            return None
        return max(self.patch, key=lambda p: p.patch_date)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.to_dict(),
            "name": self.name,
            "num": self.num,
            "id": encode(self.id),
            "patch": [encode_patch(p) for p in self.patch],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LawData":
        if not isinstance(data, dict):
            raise MalformedIdentifier(f"law record must be an object: {data!r}", data)
        missing = [f for f in REQUIRED_FIELDS if f not in data]
        if missing:
            raise MalformedIdentifier(f"law record is missing fields: {missing}")
        for name in ("name", "num"):
            if not isinstance(data[name], str):
                raise MalformedIdentifier(f"law {name} must be a string: {data[name]!r}", data[name])
        patch = data.get("patch", [])
        if not isinstance(patch, list):
            raise MalformedIdentifier(f"law patch must be a list: {patch!r}", patch)
        return cls(
            date=Date.from_dict(data["date"]),
            name=data["name"],
            num=data["num"],
            id=decode(data["id"]),
            patch=tuple(decode_patch(p) for p in patch),
        )
