# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

from shadowreport.utils.config import get_dist_version

__version__ = get_dist_version()
