# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import dataclasses

import allure
import pytest
from pytest_check import check
from shadowreport.utils.config import ReportConfig
from shadowreport.utils.core import ReportPayloadError, SourceFormat, TestRecord
from shadowreport.utils.reporting.daily import (
    build_daily_payload,
    build_footer,
    build_record,
    collect_records,
    sort_body,
    transform_format_b_report,
)


@allure.feature("Payload assembly")
@allure.title("A record carries every field extracted from path and titles")
def test_build_record(config, raw_test):
    result = {"fullFile": "src/tests/ui/checkout/payment.spec.ts"}
    test = raw_test(
        "rejects expired card [C102]",
        state="failed",
        duration=61500,
        full_title="Payment rejects expired card [Kimchi] [regression]",
        error="expected 402 to equal 200",
    )

    record = build_record(result, test, SourceFormat.FORMAT_A, config)

    assert record == TestRecord(
        area="checkout",
        spec="payment",
        test_name="Payment rejects expired card",
        type="ui",
        category="regression",
        team="kimchi",
        priority="",
        status="",
        state="failed",
        manual_test_id="C102",
        error="expected 402 to equal 200",
        speed="1:1:500",
    )


@allure.feature("Payload assembly")
@allure.title("Every record field stays within the cell limit and is never None")
def test_record_fields_bounded(config, raw_test):
    long_title = "x" * 800
    test = raw_test(long_title, full_title=long_title, error="e" * 900, duration=None)
    test["state"] = None

    record = build_record({"fullFile": "src/tests/unit/cart/shopping.spec.ts"}, test, SourceFormat.FORMAT_A, config)

    for name, value in dataclasses.asdict(record).items():
        with check:
            assert isinstance(value, str), name
        with check:
            assert len(value.encode("utf-8")) <= 500, name
    with check:
        assert record.speed == ""
    with check:
        assert record.state == ""


@allure.feature("Payload assembly")
def test_build_record_rejects_bad_entries(config, raw_test):
    with pytest.raises(ReportPayloadError):
        build_record("not a result", raw_test("a"), SourceFormat.FORMAT_A, config)
    with pytest.raises(ValueError):
        build_record({"fullFile": "src/tests/cart/readme.md"}, raw_test("a"), SourceFormat.FORMAT_A, config)


@allure.feature("Payload assembly")
@allure.title("Every leaf test is collected at any suite depth")
@pytest.mark.parametrize("depth", [1, 2, 5])
def test_collect_records_depth(config, nested_result, depth):
    records = collect_records([nested_result(depth, 3)], SourceFormat.FORMAT_A, config)

    with check:
        assert len(records) == 3
    with check:
        assert [record.test_name for record in records] == ["Cart leaf 0", "Cart leaf 1", "Cart leaf 2"]


@allure.feature("Payload assembly")
@allure.title("A node's own tests come before those of its child suites")
def test_collect_records_document_order(config, raw_test):
    result = {
        "fullFile": "src/tests/unit/cart/shopping.spec.ts",
        "tests": [raw_test("root")],
        "suites": [
            {"tests": [raw_test("first")], "suites": [{"tests": [raw_test("nested")], "suites": None}]},
            {"tests": [raw_test("second")]},
        ],
    }

    records = collect_records({"results": [result]}, SourceFormat.FORMAT_A, config)

    assert [record.test_name for record in records] == ["Cart root", "Cart first", "Cart nested", "Cart second"]


@allure.feature("Payload assembly")
def test_collect_records_rejects_non_list_children(config):
    with pytest.raises(TypeError):
        collect_records([{"fullFile": "a/b/c.spec.ts", "suites": {"tests": []}}], SourceFormat.FORMAT_A, config)
    with pytest.raises(TypeError):
        collect_records("results", SourceFormat.FORMAT_A, config)


@allure.feature("Payload assembly")
@allure.title("Body sort is stable and idempotent")
def test_sort_body_idempotent():
    records = [
        TestRecord(area="cart", spec="shopping", test_name="b", state="1"),
        TestRecord(area="Cart", spec="shopping", test_name="a"),
        TestRecord(area="cart", spec="shopping", test_name="b", state="2"),
        TestRecord(area="account", spec="login", test_name="z"),
    ]

    once = sort_body(records)
    twice = sort_body(once)

    with check:
        assert once == twice
    with check:
        assert [(record.area, record.test_name, record.state) for record in once] == [
            ("account", "z", ""),
            ("cart", "b", "1"),
            ("cart", "b", "2"),
            ("Cart", "a", ""),
        ]


@allure.feature("Payload assembly")
def test_build_footer(config):
    footer = build_footer([["area", "spec", "state"]], config)

    assert footer == [["", "", "- END -"]]
    with pytest.raises(ValueError):
        build_footer([], config)


@allure.feature("Payload assembly")
@allure.title("Daily payload holds sorted body, metrics header and footer")
def test_build_daily_payload(config, format_a_results):
    payload = build_daily_payload(format_a_results, SourceFormat.FORMAT_A, config)
    state_index = payload.column_names.index("state")

    with check:
        assert payload.column_names == list(config.columns_for(SourceFormat.FORMAT_A))
    with check:
        assert [row[0] for row in payload.body_payload] == ["cart", "cart", "checkout", "checkout"]
    with check:
        assert [row[2] for row in payload.body_payload] == [
            "Cart adds item",
            "Cart removes item",
            "Payment pays by card",
            "Payment rejects expired card",
        ]
    with check:
        assert payload.footer_payload == [[""] * state_index + ["- END -"]]
    with check:
        assert payload.header_payload[0][state_index - 1 : state_index + 1] == [
            "# passed tests",
            "passed formula base",
        ]
    with check:
        assert payload.header_payload[3][state_index - 1 : state_index + 1] == ["# total tests", "total tests formula total"]

    labels = [cell for row in payload.header_payload[:-1] for cell in row]
    for expected in ("# api tests passed", "# ui tests passed", "# smoke tests passed", "# raptors tests passed"):
        with check:
            assert expected in labels
    with check:
        assert "# unit tests passed" not in labels


@allure.feature("Payload assembly")
@allure.title("Playwright reports use the project name as the first column")
def test_build_daily_payload_format_b(config, format_b_report):
    results = transform_format_b_report(format_b_report)

    payload = build_daily_payload(results, SourceFormat.FORMAT_B, config)

    with check:
        assert payload.column_names[0] == "browser"
    with check:
        assert [row[0] for row in payload.body_payload] == ["chromium", "firefox"]
    with check:
        assert payload.body_payload[1][10] == "Timed out"
    with check:
        assert payload.body_payload[0][9] == "C7"


@allure.feature("Payload assembly")
def test_build_daily_payload_honours_cell_limit(format_a_results):
    config = ReportConfig(max_cell_length=4)

    payload = build_daily_payload(format_a_results, SourceFormat.FORMAT_A, config)

    assert all(len(cell) <= 4 for row in payload.body_payload for cell in row)
