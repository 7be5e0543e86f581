"""
lawid: 日本の法令ID（e-Gov 法令ID命名規則）のエンコード・デコード
"""

from .core.era import Date, Era, ad_year, from_ad
from .core.law_data import LawData
from .core.law_id import LawId, decode, encode
from .core.law_id_type import (
    Act,
    CabinetOrder,
    Constitution,
    DajokanFukoku,
    DajokanHutatsu,
    DajokanTasshi,
    ImperialOrder,
    Institution,
    Jinji,
    LawEfficacy,
    LawIdType,
    Ministry,
    MinistryOrder,
    PrimeMinisterDecision,
    Regulation,
    RippouType,
)
from .core.patch import LawPatchInfo, decode_patch, encode_patch
from .exceptions import FieldOverflow, LawIdError, MalformedIdentifier, UnknownEnumerant

__all__ = [
    # codec
    'encode',
    'decode',
    'encode_patch',
    'decode_patch',
    # values
    'LawId',
    'LawPatchInfo',
    'LawData',
    'Date',
    'Era',
    'ad_year',
    'from_ad',
    'LawIdType',
    'Constitution',
    'Act',
    'CabinetOrder',
    'ImperialOrder',
    'DajokanFukoku',
    'DajokanTasshi',
    'DajokanHutatsu',
    'MinistryOrder',
    'Jinji',
    'Regulation',
    'PrimeMinisterDecision',
    'RippouType',
    'LawEfficacy',
    'Ministry',
    'Institution',
    # errors
    'LawIdError',
    'MalformedIdentifier',
    'UnknownEnumerant',
    'FieldOverflow',
]
