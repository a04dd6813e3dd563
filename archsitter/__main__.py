"""Allow ``python -m archsitter``."""

import sys

from archsitter.cli import main

sys.exit(main())
