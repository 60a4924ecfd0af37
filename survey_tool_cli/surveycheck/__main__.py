"""Allow ``python -m surveycheck``."""

import sys

from surveycheck.cli import main

sys.exit(main())
