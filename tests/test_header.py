# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import allure
import pytest
from pytest_check import check
from shadowreport.utils.core import ReportEntry, SourceFormat
from shadowreport.utils.reporting.daily import (
    append_state_reports_to_header,
    combine_reports,
    construct_header_report,
    generate_placeholders,
    generate_report,
    generate_state_reports,
)

METRICS = ["# passed tests", "# failed tests", "# skipped/pending tests", "# total tests"]


@allure.feature("Header construction")
@allure.title("Only vocabulary values present in the column produce entries")
def test_generate_report():
    body = [
        ["cart", "shopping", "adds item", "api, ui"],
        ["cart", "shopping", "removes item", "ui"],
    ]

    report = generate_report(["api", "unit", "ui"], body, 3)

    assert report == [
        ReportEntry("# api tests passed", "api formula tests passed"),
        ReportEntry("# ui tests passed", "ui formula tests passed"),
    ]


@allure.feature("Header construction")
def test_generate_report_validates_arguments():
    with pytest.raises(TypeError):
        generate_report("api", [], 3)
    with pytest.raises(TypeError):
        generate_report(["api"], [], -1)
    with pytest.raises(TypeError):
        generate_report(["api"], [], 3, is_team_series="yes")


@allure.feature("Header construction")
def test_generate_placeholders():
    with check:
        assert generate_placeholders(3) == [("", "")] * 3
    with check:
        assert generate_placeholders(0) == []
    with pytest.raises(TypeError):
        generate_placeholders(-1)


@allure.feature("Header construction")
@allure.title("Shorter series are padded with placeholders beyond their length")
def test_combine_reports_unequal_series():
    long_series = [("t1", "k1"), ("t2", "k2"), ("t3", "k3"), ("t4", "k4")]
    short_series = [("s1", "j1"), ("s2", "j2")]

    combined = combine_reports([long_series, short_series], [("-", "-"), ("_", "_")])

    assert combined == [
        ["t1", "k1", "s1", "j1"],
        ["t2", "k2", "s2", "j2"],
        ["t3", "k3", "-", "-"],
        ["t4", "k4", "_", "_"],
    ]


@allure.feature("Header construction")
def test_combine_reports_edge_cases():
    with check:
        assert combine_reports([], generate_placeholders(2)) == []
    with check:
        assert combine_reports([[("a", "b")]], []) == [["a", "b"], ["", ""]]
    with pytest.raises(TypeError):
        combine_reports([None], [])


@allure.feature("Header construction")
@allure.title("All state entries of one call share the formula kind of the chosen metric")
def test_generate_state_reports_shared_key():
    reports = generate_state_reports(METRICS, 0)

    with check:
        assert len(reports) == 4
    with check:
        assert {entry.formula_key for entry in reports} == {"passed formula base"}
    with check:
        assert [entry.title for entry in reports] == METRICS


@allure.feature("Header construction")
def test_generate_state_reports_metric_kinds():
    with check:
        assert generate_state_reports(METRICS, 2)[2] == ReportEntry(
            "# skipped/pending tests", "skipped/pending tests formula skipped/pending"
        )
    with check:
        assert generate_state_reports(METRICS, 3)[3] == ReportEntry("# total tests", "total tests formula total")
    with pytest.raises(IndexError):
        generate_state_reports(METRICS, 4)


@allure.feature("Header construction")
@allure.title("Types, categories and teams are laid out side by side")
def test_construct_header_report(config):
    body = [
        ["cart", "shopping", "adds item", "api", "smoke", "raptors"],
        ["cart", "shopping", "pays", "ui", "regression", "kimchi"],
        ["cart", "shopping", "refunds", "api", "", ""],
    ]

    header = construct_header_report(body, config)

    assert header == [
        ["# api tests passed", "api formula tests passed", "# smoke tests passed", "smoke formula tests passed",
         "# raptors tests passed", "raptors formula tests passed"],
        ["# ui tests passed", "ui formula tests passed", "# regression tests passed",
         "regression formula tests passed", "# kimchi tests passed", "kimchi formula tests passed"],
    ]


@allure.feature("Header construction")
@allure.title("State metrics land just left of and under the state column")
def test_append_state_reports_to_header(config):
    columns = config.columns_for(SourceFormat.FORMAT_A)
    header = [["a", "b"], ["c", "d"]]

    append_state_reports_to_header(header, METRICS, columns)
    state_index = columns.index("state")

    with check:
        assert len(header) == 4
    for i, row in enumerate(header):
        with check:
            assert row[state_index - 1] == METRICS[i]
        with check:
            assert len(row) == state_index + 1
    with check:
        assert header[2][:2] == ["", ""]
    with pytest.raises(ValueError):
        append_state_reports_to_header([], METRICS, ["area"])

