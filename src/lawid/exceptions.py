"""
法令ID コーデックの例外定義

- MalformedIdentifier: 長さ・タグ・数字欄の書式が不正
- UnknownEnumerant: 数値は読めたが対応する値が定義されていない
- FieldOverflow: 固定幅の欄に収まらない値を構築しようとした
"""
from typing import Optional


class LawIdError(ValueError):
    """法令ID関連エラーの基底クラス"""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class MalformedIdentifier(LawIdError):
    pass


class UnknownEnumerant(LawIdError):
    pass


class FieldOverflow(LawIdError):
    pass
