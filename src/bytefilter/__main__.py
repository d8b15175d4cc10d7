"""Allow running as ``python -m bytefilter``."""

import sys

from .cli import main

sys.exit(main())
