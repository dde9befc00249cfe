# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import allure
import pytest
from pytest_check import check
from shadowreport.utils.core import (
    enforce_max_length,
    format_duration,
    letter_to_number,
    locale_sort_key,
    number_to_letter,
)


@allure.feature("Cell helpers")
@allure.title("Cell values are cut to the length limit in UTF-8 code units")
def test_enforce_max_length_truncates():
    with check:
        assert enforce_max_length("a" * 600, 500) == "a" * 500
    with check:
        assert enforce_max_length("short", 500) == "short"
    with check:
        # "é" is two bytes, the straddling one is dropped
        assert enforce_max_length("aé", 2) == "a"
    with check:
        assert len(enforce_max_length("€" * 300, 500).encode("utf-8")) <= 500


@allure.feature("Cell helpers")
@allure.title("Missing and unsupported values become empty cells")
def test_enforce_max_length_empty_values():
    with check:
        assert enforce_max_length(None, 500) == ""
    with check:
        assert enforce_max_length({"message": "boom"}, 500) == ""
    with check:
        assert enforce_max_length(42, 500) == "42"


@allure.feature("Cell helpers")
def test_enforce_max_length_rejects_bad_limit():
    with pytest.raises(ValueError):
        enforce_max_length("abc", -1)


@allure.feature("Cell helpers")
@allure.title("Column numbers and letters convert both ways")
def test_column_letters():
    for number, letter in ((0, "A"), (11, "L"), (25, "Z"), (26, "AA"), (27, "AB"), (701, "ZZ"), (702, "AAA")):
        with check:
            assert number_to_letter(number) == letter
        with check:
            assert letter_to_number(letter) == number

    with pytest.raises(TypeError):
        number_to_letter(-1)
    with pytest.raises(TypeError):
        letter_to_number("A1")


@allure.feature("Cell helpers")
def test_format_duration():
    with check:
        assert format_duration(61500) == "1:1:500"
    with check:
        assert format_duration(999) == "0:0:999"
    with check:
        assert format_duration(None) == ""


@allure.feature("Cell helpers")
@allure.title("Sort key ignores case and accents before breaking ties")
def test_locale_sort_key_order():
    words = ["beta", "Alpha", "alpha", "Émile", "emile", "zeta"]
    assert sorted(words, key=locale_sort_key) == ["alpha", "Alpha", "beta", "emile", "Émile", "zeta"]
