"""
Tests for era.py - 元号と西暦の変換、日付の順序
"""
import pytest
from lawid.core.era import Date, Era, ad_year, from_ad
from lawid.exceptions import FieldOverflow, MalformedIdentifier, UnknownEnumerant


class TestAdYear:
    """元号年 → 西暦年"""

    @pytest.mark.parametrize("era, year, expected", [
        (Era.MEIJI, 1, 1868),
        (Era.TAISHO, 1, 1912),
        (Era.SHOWA, 45, 1970),
        (Era.HEISEI, 31, 2019),
        (Era.REIWA, 1, 2019),
    ])
    def test_ad_year(self, era, year, expected):
        assert ad_year(era, year) == expected


class TestFromAd:
    """西暦 → 元号（切り替わり日の境界）"""

    @pytest.mark.parametrize("ymd, expected", [
        ((1912, 7, 29), (Era.MEIJI, 45)),
        ((1912, 7, 30), (Era.TAISHO, 1)),
        ((1926, 12, 24), (Era.TAISHO, 15)),
        ((1926, 12, 25), (Era.SHOWA, 1)),
        ((1989, 1, 7), (Era.SHOWA, 64)),
        ((1989, 1, 8), (Era.HEISEI, 1)),
        ((2019, 4, 30), (Era.HEISEI, 31)),
        ((2019, 5, 1), (Era.REIWA, 1)),
    ])
    def test_boundaries(self, ymd, expected):
        assert from_ad(*ymd) == expected

    def test_before_meiji_has_no_era(self):
        with pytest.raises(UnknownEnumerant):
            from_ad(1868, 1, 1)

    def test_date_from_ad_keeps_month_and_day(self):
        date = Date.from_ad(1970, 4, 1)
        assert date == Date(Era.SHOWA, 45, 4, 1)
        assert date.ad == 1970


class TestEraLookup:
    def test_from_digit(self):
        assert Era.from_digit("3") is Era.SHOWA
        assert Era.from_digit(5) is Era.REIWA

    def test_unknown_digit(self):
        with pytest.raises(UnknownEnumerant):
            Era.from_digit("6")

    def test_non_digit(self):
        with pytest.raises(MalformedIdentifier):
            Era.from_digit("X")

    @pytest.mark.parametrize("text", ["昭和", "Showa", "showa", "S", "3"])
    def test_parse_variants(self, text):
        assert Era.parse(text) is Era.SHOWA

    def test_parse_unknown(self):
        with pytest.raises(UnknownEnumerant):
            Era.parse("慶応")

    def test_eras_are_chronological(self):
        assert Era.MEIJI < Era.TAISHO < Era.SHOWA < Era.HEISEI < Era.REIWA
        assert sorted([Era.REIWA, Era.MEIJI, Era.SHOWA]) == [Era.MEIJI, Era.SHOWA, Era.REIWA]


class TestDateOrdering:
    """比較は西暦換算の yyyymmdd（省略は 0）"""

    def test_across_eras(self):
        assert Date(Era.SHOWA, 64, 1, 7) < Date(Era.HEISEI, 1, 1, 8)

    def test_missing_month_sorts_first(self):
        assert Date(Era.SHOWA, 45) < Date(Era.SHOWA, 45, 1, 1)
        assert Date(Era.SHOWA, 45, 4) < Date(Era.SHOWA, 45, 4, 1)

    def test_sorted(self):
        dates = [Date(Era.REIWA, 2), Date(Era.MEIJI, 10, 3, 3), Date(Era.SHOWA, 20, 8, 15)]
        assert sorted(dates) == [dates[1], dates[2], dates[0]]

    def test_hashable(self):
        assert len({Date(Era.SHOWA, 45, 4, 1), Date(Era.SHOWA, 45, 4, 1)}) == 1

    @pytest.mark.parametrize("older, newer", [
        (Date(Era.MEIJI, 45, 7, 30), Date(Era.TAISHO, 1, 7, 30)),
        (Date(Era.SHOWA, 64), Date(Era.HEISEI, 1)),
    ])
    def test_same_ad_date_ordered_by_era(self, older, newer):
        # 西暦換算が同じでも値が異なれば順序は一意に決まる
        assert older != newer
        assert older < newer
        assert not newer < older
        assert older <= newer
        assert not older >= newer
        assert sorted([newer, older]) == [older, newer]


class TestDateValidation:
    def test_month_out_of_range(self):
        with pytest.raises(FieldOverflow):
            Date(Era.SHOWA, 45, 13)

    def test_day_out_of_range(self):
        with pytest.raises(FieldOverflow):
            Date(Era.SHOWA, 45, 1, 32)

    def test_negative_year(self):
        with pytest.raises(FieldOverflow):
            Date(Era.SHOWA, -1)


class TestDateFormatting:
    def test_to_japanese(self):
        assert Date(Era.SHOWA, 45, 4, 1).to_japanese() == "昭和45年4月1日"
        assert Date(Era.REIWA, 3).to_japanese() == "令和3年"

    def test_dict_omits_missing_fields(self):
        assert Date(Era.HEISEI, 11).to_dict() == {"era": "Heisei", "year": 11}

    def test_dict_round_trip(self):
        date = Date(Era.TAISHO, 12, 9, 1)
        assert Date.from_dict(date.to_dict()) == date

    def test_from_dict_unknown_era(self):
        with pytest.raises(UnknownEnumerant):
            Date.from_dict({"era": "Keio", "year": 1})

    def test_from_dict_missing_year(self):
        with pytest.raises(MalformedIdentifier):
            Date.from_dict({"era": "Showa"})

    @pytest.mark.parametrize("data", [
        {"era": "Showa", "year": "45"},
        {"era": "Showa", "year": 45, "month": "4"},
        {"era": "Showa", "year": 45, "month": 4, "day": 1.0},
        {"era": "Showa", "year": True},
    ])
    def test_from_dict_wrong_field_type(self, data):
        with pytest.raises(MalformedIdentifier):
            Date.from_dict(data)

    @pytest.mark.parametrize("data", ["1970-04-01", ["Showa", 45], None])
    def test_from_dict_not_an_object(self, data):
        with pytest.raises(MalformedIdentifier):
            Date.from_dict(data)
