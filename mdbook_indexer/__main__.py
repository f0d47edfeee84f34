"""Allow ``python -m mdbook_indexer`` to act as the preprocessor command."""

import sys

from .cli import main

sys.exit(main())
