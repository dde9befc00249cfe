# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Concurrent retrieval of source tab values.

Reads are independent and may complete in any order; the tabs are returned
in the order of the requested titles so the summary fold sees them by date.
"""

import concurrent.futures
import logging
from typing import Callable, List, Sequence

from shadowreport.utils.core.errors import SummaryAggregationError
from shadowreport.utils.core.models import SourceTab

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


def fetch_source_tabs(
    titles: Sequence[str], reader: Callable[[str], SourceTab], max_workers: int = DEFAULT_MAX_WORKERS
) -> List[SourceTab]:
    """
    Fetch source tabs concurrently.

    Args:
        titles: Tab titles, in the order the tabs must be folded
        reader: Callable returning the SourceTab for a title
        max_workers: Maximum number of concurrent reads

    Returns:
        SourceTab list in the order of ``titles``

    Raises:
        SummaryAggregationError: If a reader returns something other than a SourceTab
        Exception: The first exception raised by a reader, in title order
    """
    if not titles:
        return []

    with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(titles)))) as executor:
        futures = [executor.submit(reader, title) for title in titles]

        tabs = []
        for title, future in zip(titles, futures):
            try:
                tab = future.result()
            except Exception as e:
                logger.error(f"Failed to fetch values for tab '{title}': {e}")
                for pending in futures:
                    pending.cancel()
                raise
            if not isinstance(tab, SourceTab):
                raise SummaryAggregationError(f"Data for source tab '{title}' could not be found or is invalid.")
            tabs.append(tab)

    logger.debug(f"Fetched {len(tabs)} source tabs")
    return tabs
