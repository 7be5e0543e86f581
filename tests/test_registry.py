"""
Tests for registry.py - 府省（M1〜M6）と機関の番号表、マスク変換
"""
import datetime

import pytest
from lawid.core import registry
from lawid.exceptions import FieldOverflow, MalformedIdentifier, UnknownEnumerant


class TestRegistryData:
    """registry.yaml の内容"""

    def test_six_generations(self):
        assert sorted(registry.MINISTRY_GENERATIONS) == [1, 2, 3, 4, 5, 6]

    @pytest.mark.parametrize("generation, codes", [
        (1, list(range(1, 22))),
        (2, list(range(1, 18))),
        (3, list(range(1, 17)) + [21]),
        (4, list(range(1, 18)) + [21, 22, 23]),
        (5, list(range(1, 26))),
        (6, list(range(1, 16)) + list(range(18, 27))),
    ])
    def test_generation_codes_keep_gaps(self, generation, codes):
        assert sorted(registry.get_generation(generation).entries) == codes

    def test_ministry_name(self):
        assert registry.ministry_name(5, 13) == "郵政省令"
        assert registry.ministry_name(6, 13) == "環境省令"

    def test_unknown_generation(self):
        with pytest.raises(UnknownEnumerant):
            registry.get_generation(7)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            registry.MINISTRY_GENERATIONS[7] = None
        with pytest.raises(TypeError):
            registry.INSTITUTIONS[17] = None


class TestGenerationPeriods:
    @pytest.mark.parametrize("day, expected", [
        (datetime.date(1900, 1, 1), 1),
        (datetime.date(1943, 10, 31), 1),
        (datetime.date(1943, 11, 1), 2),
        (datetime.date(1946, 1, 1), 3),
        (datetime.date(1947, 5, 3), 4),
        (datetime.date(1950, 4, 1), 5),
        (datetime.date(2001, 1, 16), 6),
        (datetime.date(2024, 1, 1), 6),
    ])
    def test_generation_for(self, day, expected):
        assert registry.generation_for(day) == expected

    def test_before_first_generation(self):
        with pytest.raises(UnknownEnumerant):
            registry.generation_for(datetime.date(1869, 1, 1))


class TestMask:
    """番号 n は bit n-1、二進文字列では左から 28-n 文字目"""

    def test_encode_single_code(self):
        assert registry.encode_mask({13}) == 1 << 12

    def test_encode_joint_issue(self):
        assert registry.encode_mask({1, 2, 28}) == (1 << 0) | (1 << 1) | (1 << 27)

    @pytest.mark.parametrize("code", [0, -1, 29, "13", True])
    def test_encode_code_out_of_range(self, code):
        with pytest.raises(FieldOverflow):
            registry.encode_mask({code})

    def test_bits_position(self):
        bits = registry.mask_to_bits(registry.encode_mask({13}))
        assert len(bits) == 28
        assert bits.index("1") == 15
        assert bits.count("1") == 1

    def test_decode_bits(self):
        bits = "0" * 15 + "1" + "0" * 12
        assert registry.decode_mask(bits, 5) == frozenset({13})

    def test_decode_empty(self):
        assert registry.decode_mask("0" * 28, 6) == frozenset()

    def test_decode_unknown_code(self):
        # M6 に番号 16 は無い
        bits = registry.mask_to_bits(registry.encode_mask({16}))
        with pytest.raises(UnknownEnumerant):
            registry.decode_mask(bits, 6)

    @pytest.mark.parametrize("bits", ["0" * 27, "0" * 29, "2" + "0" * 27])
    def test_decode_malformed(self, bits):
        with pytest.raises(MalformedIdentifier):
            registry.decode_mask(bits, 5)


class TestInstitutions:
    def test_codes(self):
        assert registry.institution_codes() == tuple(list(range(1, 17)) + [18, 19])

    def test_alias_17_is_code_8(self):
        assert registry.canonical_institution(17) == 8
        assert registry.institution_name(17) == registry.institution_name(8) == "司法試験管理委員会"

    @pytest.mark.parametrize("code", [0, 20, 99])
    def test_unknown_code(self, code):
        with pytest.raises(UnknownEnumerant):
            registry.canonical_institution(code)
