"""
Размеры: три значащие цифры, единицы bytes/KiB/MiB/GiB.
"""

from __future__ import annotations

import pytest

from statsprinter.formatting import format_size, print_sizes


@pytest.mark.parametrize("size, expected", [
    (0, "0 bytes"),
    (-5, "0 bytes"),
    (512, "512 bytes"),
    (1000, "1000 bytes"),
    (1024, "1 KiB"),
    (1200, "1.17 KiB"),
    (1152, "1.13 KiB"),  # 1.125 округляется вверх
    (1536, "1.5 KiB"),
    (5 * 1024 ** 3, "5 GiB"),
])
def test_format_size(size, expected):
    assert format_size(size) == expected


@pytest.mark.parametrize("value", [None, "12", float("nan"), True])
def test_non_numeric_size_is_unknown(value):
    assert format_size(value) == "unknown size"


def test_huge_size_stays_in_gib():
    assert format_size(2048 * 1024 ** 3) == "2050 GiB"


class TestPrintSizes:
    def test_single_type_without_label(self):
        assert print_sizes({"javascript": 1200}) == "1.17 KiB"

    def test_several_types_are_labelled(self):
        assert print_sizes({"javascript": 100, "css": 2048}) == "100 bytes (javascript) 2 KiB (css)"

    def test_empty_mapping_prints_nothing(self):
        assert print_sizes({}) is None
