"""Entry point: python -m docs_hub <command>"""

import sys

from docs_hub.cli import main

if __name__ == "__main__":
    sys.exit(main())
