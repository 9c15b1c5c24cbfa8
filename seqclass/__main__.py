"""Allow ``python -m seqclass``."""

import sys

from .cli import main

sys.exit(main())
