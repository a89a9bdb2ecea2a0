# SPDX-License-Identifier: MIT
"""Allow running as ``python -m ae_customease``."""

import sys

from ae_customease.cli import main

sys.exit(main())
