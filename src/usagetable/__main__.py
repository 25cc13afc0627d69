"""Allow ``python -m usagetable``."""

import sys

from usagetable.cli import main

sys.exit(main())
