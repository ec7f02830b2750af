"""Run the terminal frontend with ``python -m lifeterm``."""

import sys

from .frontends.terminal import main

sys.exit(main())
