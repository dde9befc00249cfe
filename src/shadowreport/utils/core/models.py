# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Data containers shared by the daily report and summary builders.

Records and descriptors are plain dataclasses so they can be compared in
tests and serialized to JSON for the spreadsheet writer.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, NamedTuple


class SourceFormat(Enum):
    """Raw test-runner output shapes accepted by the assembler."""

    FORMAT_A = "a"
    FORMAT_B = "b"


class ReportEntry(NamedTuple):
    """One metric row for one vocabulary value."""

    title: str
    formula_key: str


@dataclass(frozen=True)
class TestRecord:
    """
    Normalized metadata for one executed test.

    Field order matches the default report column order, so ``to_row()``
    yields a body row directly.
    """

    __test__ = False  # not a pytest test class

    area: str = ""
    spec: str = ""
    test_name: str = ""
    type: str = ""
    category: str = ""
    team: str = ""
    priority: str = ""
    status: str = ""
    state: str = ""
    manual_test_id: str = ""
    error: str = ""
    speed: str = ""

    def to_row(self) -> List[str]:
        return [getattr(self, f.name) for f in fields(self)]


@dataclass
class ReportPayload:
    """
    Daily report grids.

    Attributes:
        header_payload: Metric rows followed by the column-name row
        body_payload: One row per test, sorted by area, spec and test name
        footer_payload: End-marker row
    """

    header_payload: List[List[str]] = field(default_factory=list)
    body_payload: List[List[str]] = field(default_factory=list)
    footer_payload: List[List[str]] = field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        return self.header_payload[-1] if self.header_payload else []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "headerPayload": self.header_payload,
            "bodyPayload": self.body_payload,
            "footerPayload": self.footer_payload,
        }


@dataclass
class ColumnMetrics:
    """
    Layout accumulator for one summary aggregation run.

    All fields only ever grow while source tabs are folded in.
    """

    next_available_column: int = 0
    header_metrics_destination_column: int = 0
    header_metrics_destination_column_end: int = 0
    longest_header_end: int = 0


@dataclass(frozen=True)
class GridRange:
    """Half-open cell range on one tab."""

    tab_id: int
    row_start: int
    row_end: int
    col_start: int
    col_end: int

    def to_request(self) -> Dict[str, int]:
        return {
            "sheetId": self.tab_id,
            "startRowIndex": self.row_start,
            "endRowIndex": self.row_end,
            "startColumnIndex": self.col_start,
            "endColumnIndex": self.col_end,
        }


@dataclass(frozen=True)
class CopyPasteDescriptor:
    """Source-range to destination-range relocation for the spreadsheet writer."""

    source: GridRange
    destination: GridRange

    def to_request(self) -> Dict[str, Any]:
        return {
            "copyPaste": {
                "source": self.source.to_request(),
                "destination": self.destination.to_request(),
                "pasteType": "PASTE_NORMAL",
            }
        }


@dataclass
class SourceTab:
    """Values fetched from one date-titled report tab."""

    title: str
    tab_id: int
    values: List[List[str]] = field(default_factory=list)


@dataclass
class SummaryPayload:
    """
    Directives produced by folding many source tabs into one destination tab.

    Attributes:
        body_payload: Copy-paste relocations, in processing order
        header_payload: Title-label value ranges (``{"range", "values"}``)
        style_directives: Merge, border and text-format batch-update requests
        metadata: Free-form run information (period, date window)
    """

    body_payload: List[CopyPasteDescriptor] = field(default_factory=list)
    header_payload: List[Dict[str, Any]] = field(default_factory=list)
    style_directives: List[Dict[str, Any]] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bodyPayload": [descriptor.to_request() for descriptor in self.body_payload],
            "headerPayload": self.header_payload,
            "styleDirectives": self.style_directives,
            "metadata": self.metadata,
        }

