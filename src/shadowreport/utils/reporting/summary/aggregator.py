# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Cross-tab summary aggregation.

Folds an ordered series of daily report tabs into one destination tab. For
every source tab the relocated columns are appended side by side, while its
metrics block gets its own slot in a window sliding along the top rows,
above those columns.
The placement of tab ``k + 1`` depends on the layout state left by tab ``k``,
so tabs are folded strictly in order.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from shadowreport.utils.core.cells import number_to_letter
from shadowreport.utils.core.errors import SummaryAggregationError
from shadowreport.utils.core.models import ColumnMetrics, CopyPasteDescriptor, GridRange, SourceTab, SummaryPayload
from shadowreport.utils.reporting.directives import value_range

from .layout import find_column_indices, find_footer_row_index, find_header_row_index, find_metrics_column
from .styles import metrics_block_styles
from .tabs import parse_tab_date

logger = logging.getLogger(__name__)


class TabLayout(NamedTuple):
    """Located structure of one source tab."""

    header_row: int
    footer_row: int
    column_indices: List[int]
    metrics_column: int


class SummaryAggregator:
    """
    Single-owner accumulator folding source tabs into one summary payload.

    Each instance owns its ``ColumnMetrics`` and ``SummaryPayload``; concurrent
    runs must use separate instances.
    """

    def __init__(self, config, destination_tab_id: int, destination_title: str):
        """
        Initialize the aggregator.

        Args:
            config: ReportConfig with indicators, metrics and the footer marker
            destination_tab_id: Tab the summary is written to
            destination_title: Title of the destination tab, used in A1 ranges
        """
        if isinstance(destination_tab_id, bool) or not isinstance(destination_tab_id, int) or destination_tab_id < 0:
            raise ValueError("Destination tab id must be a non-negative integer.")
        if not isinstance(destination_title, str) or not destination_title.strip():
            raise ValueError("Destination title must be a non-empty string.")

        self.config = config
        self.destination_tab_id = destination_tab_id
        self.destination_title = destination_title
        self.metrics_width = len(config.header_indicators)
        self.metrics = ColumnMetrics(header_metrics_destination_column_end=self.metrics_width)
        self.payload = SummaryPayload()
        self.tab_count = 0

    @property
    def body_start_row(self) -> int:
        """Destination row of the first relocated body cell, below the title and metrics rows."""
        return 1 + len(self.config.default_header_metrics)

    def locate(self, tab: SourceTab) -> TabLayout:
        """
        Locate the header row, footer row, relocated columns and metrics block of a tab.

        Raises:
            SummaryAggregationError: If the tab data is malformed or a required row is missing
        """
        if not isinstance(tab, SourceTab):
            raise SummaryAggregationError(f"Invalid source tab: {tab!r}")
        values = tab.values
        if not isinstance(values, list) or not values or not all(isinstance(row, list) for row in values):
            raise SummaryAggregationError(f"Data for source tab '{tab.title}' could not be found or is invalid.")

        header_row = find_header_row_index(values, self.config.header_indicators)
        if header_row is None:
            raise SummaryAggregationError(f"Header row not found in source tab '{tab.title}'.")

        footer_row = find_footer_row_index(values, self.config.footer_row)
        if footer_row is None:
            raise SummaryAggregationError(f"Footer row not found in source tab '{tab.title}'.")
        if footer_row <= header_row:
            raise SummaryAggregationError(f"Footer row precedes header row in source tab '{tab.title}'.")

        metrics_column = find_metrics_column(values[0], self.config.default_header_metrics)
        if metrics_column is None:
            raise SummaryAggregationError(f"Header metrics not found in source tab '{tab.title}'.")

        column_indices = find_column_indices(values[header_row], self.config.relocated_columns())
        return TabLayout(header_row, footer_row, column_indices, metrics_column)

    def block_width(self, layout: TabLayout) -> int:
        """Columns taken by one tab: its relocated columns, at least as wide as its metrics block."""
        return max(len(layout.column_indices), self.metrics_width)

    def _relocate_columns(self, tab: SourceTab, layout: TabLayout) -> int:
        # Body rows plus the end-marker row below them
        body_rows = layout.footer_row - layout.header_row - 1
        for column in layout.column_indices:
            source = GridRange(tab.tab_id, layout.header_row + 1, layout.footer_row + 1, column, column + 1)
            destination = GridRange(
                self.destination_tab_id,
                self.body_start_row,
                self.body_start_row + body_rows + 1,
                self.metrics.next_available_column,
                self.metrics.next_available_column + 1,
            )
            self.payload.body_payload.append(CopyPasteDescriptor(source, destination))
            self.metrics.next_available_column += 1
        return self.body_start_row + body_rows

    def _relocate_metrics_block(self, tab: SourceTab, layout: TabLayout, footer_row: int, width: int) -> None:
        metric_count = len(self.config.default_header_metrics)
        dest_start = self.metrics.header_metrics_destination_column
        dest_end = dest_start + width

        source = GridRange(tab.tab_id, 0, metric_count, layout.metrics_column, layout.metrics_column + self.metrics_width)
        destination = GridRange(
            self.destination_tab_id, 1, 1 + metric_count, dest_start, dest_start + self.metrics_width
        )
        self.payload.body_payload.append(CopyPasteDescriptor(source, destination))

        self.payload.header_payload.append(value_range(self.destination_title, f"{number_to_letter(dest_start)}1", tab.title))
        self.payload.style_directives.extend(
            metrics_block_styles(self.destination_tab_id, 0, footer_row, dest_start, dest_end)
        )

        self.metrics.header_metrics_destination_column = dest_end
        self.metrics.header_metrics_destination_column_end = dest_end + self.metrics_width

    def add_tab(self, tab: SourceTab, layout: Optional[TabLayout] = None) -> None:
        """
        Fold one source tab into the summary.

        The tab's columns and its metrics block start at the same destination
        column, and the next tab starts after the wider of the two.
        """
        if layout is None:
            layout = self.locate(tab)

        width = self.block_width(layout)
        self.metrics.longest_header_end = max(self.metrics.longest_header_end, layout.header_row + 1)
        footer_row = self._relocate_columns(tab, layout)
        self._relocate_metrics_block(tab, layout, footer_row, width)
        self.metrics.next_available_column = self.metrics.header_metrics_destination_column
        self.tab_count += 1
        logger.debug(
            f"Folded tab '{tab.title}': {len(layout.column_indices)} columns, "
            f"next column {self.metrics.next_available_column}"
        )

    def aggregate(self, tabs: Sequence[SourceTab]) -> SummaryPayload:
        """
        Fold source tabs in the given order.

        Every tab is located before any is folded, so a malformed tab aborts
        the run without touching the layout state.

        Raises:
            SummaryAggregationError: If any tab is missing its header, footer or metrics block
        """
        if self.tab_count:
            raise SummaryAggregationError("Aggregator already used; create a new instance per run.")

        try:
            layouts = [self.locate(tab) for tab in tabs]
        except SummaryAggregationError as e:
            logger.error(f"Error building summary payload: {e}")
            raise

        for tab, layout in zip(tabs, layouts):
            self.add_tab(tab, layout)

        self.payload.metadata.setdefault("sourceTabs", [tab.title for tab in tabs])
        self.payload.metadata["columnCount"] = max(
            self.metrics.next_available_column, self.metrics.header_metrics_destination_column
        )
        self.payload.metadata["rowCount"] = max(
            (descriptor.destination.row_end for descriptor in self.payload.body_payload), default=0
        )
        logger.info(f"Built summary payload from {self.tab_count} tabs into '{self.destination_title}'")
        return self.payload


def _tab_date(tab: SourceTab):
    day = parse_tab_date(tab.title) if isinstance(tab, SourceTab) else None
    if day is None:
        raise SummaryAggregationError(f"Source tab title is not a report date: {getattr(tab, 'title', tab)!r}")
    return day


def aggregate_summary(
    tabs: Sequence[SourceTab],
    config,
    destination_tab_id: int,
    destination_title: str,
    metadata: Optional[Dict[str, Any]] = None,
) -> SummaryPayload:
    """
    Build a summary payload from date-titled source tabs in any order.

    Tabs are sorted by the date in their titles before folding, so fetch
    completion order never affects the layout.

    Args:
        tabs: Source tabs titled like ``Oct 18, 2026``
        config: ReportConfig
        destination_tab_id: Tab the summary is written to
        destination_title: Title of that tab
        metadata: Extra run information copied into the payload

    Returns:
        SummaryPayload with relocation, title and style directives
    """
    ordered = sorted(tabs, key=_tab_date)
    aggregator = SummaryAggregator(config, destination_tab_id, destination_title)
    aggregator.payload.metadata.update(metadata or {})
    return aggregator.aggregate(ordered)
