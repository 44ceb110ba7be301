# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

import logging

# silent unless init_logger or the host application configures logging
logging.getLogger("batstats").addHandler(logging.NullHandler())
