# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import time

import allure
import pytest
from shadowreport.utils.core import SourceTab, SummaryAggregationError
from shadowreport.utils.reporting.summary import fetch_source_tabs


@allure.feature("Source tab fetching")
@allure.title("Tabs come back in title order whatever order reads complete in")
def test_fetch_source_tabs_keeps_order():
    titles = ["Oct 1, 2026", "Oct 2, 2026", "Oct 3, 2026", "Oct 4, 2026"]
    delays = {"Oct 1, 2026": 0.05, "Oct 2, 2026": 0.0, "Oct 3, 2026": 0.03, "Oct 4, 2026": 0.01}

    def reader(title):
        time.sleep(delays[title])
        return SourceTab(title=title, tab_id=titles.index(title), values=[])

    tabs = fetch_source_tabs(titles, reader, max_workers=4)

    assert [tab.title for tab in tabs] == titles


@allure.feature("Source tab fetching")
def test_fetch_source_tabs_propagates_failures():
    def reader(title):
        if title == "Oct 2, 2026":
            raise ConnectionError("quota exceeded")
        return SourceTab(title=title, tab_id=1, values=[])

    with pytest.raises(ConnectionError):
        fetch_source_tabs(["Oct 1, 2026", "Oct 2, 2026"], reader)


@allure.feature("Source tab fetching")
def test_fetch_source_tabs_rejects_missing_data():
    with pytest.raises(SummaryAggregationError):
        fetch_source_tabs(["Oct 1, 2026"], lambda title: None)


@allure.feature("Source tab fetching")
def test_fetch_source_tabs_empty():
    assert fetch_source_tabs([], lambda title: None) == []
