"""Global configuration constants for theme loading and resolution."""

from __future__ import annotations

import os
from typing import Final

# Optional path of a stored spec (JSON) the theme service loads at startup
SPEC_PATH: Final = os.environ.get("GENTLE_SPEC_PATH") or None

# Context used when a host does not supply one
DEFAULT_SCHEME: Final = os.environ.get("GENTLE_COLOR_SCHEME", "light")
DEFAULT_SIZE_CATEGORY: Final = os.environ.get("GENTLE_SIZE_CATEGORY", "large")

JSON_INDENT: Final = 2
