#!/usr/bin/env python3
"""Run the turnmd command line with ``python -m turnmd``.

Example:
    python -m turnmd --heading-style atx < page.html > page.md
"""

import sys

from turnmd.cli import main

if __name__ == "__main__":
    sys.exit(main())
