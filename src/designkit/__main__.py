"""Allow ``python -m designkit``."""
import sys

from designkit.cli.main import main

sys.exit(main())
