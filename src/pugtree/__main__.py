"""Allow ``python -m pugtree``."""

import sys

from pugtree.cli import main

sys.exit(main())
