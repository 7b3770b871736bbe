"""Allow ``python -m icuaccessors``."""

import sys

from icuaccessors.cli import main

sys.exit(main())
