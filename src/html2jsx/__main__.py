#!/usr/bin/env python3
"""Run the ``html2jsx`` command as ``python -m html2jsx``.

Accepts the same arguments as the console script, e.g.
``python -m html2jsx snippet.html --tabs -o Snippet.jsx``.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
