"""
Settings and configuration for prakrit-verb.

Values are module-level constants read once from the environment.
"""

import os
from typing import Optional

# Default dialect used by the CLI and the batch processor
DEFAULT_DIALECT = os.environ.get("PRAKRIT_VERB_DIALECT", "maharastri").lower()

# Default output transliteration scheme
DEFAULT_ENCODING = os.environ.get("PRAKRIT_VERB_ENCODING", "slp1").lower()


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Base seed for the vowel transformation rule (None = unseeded)
DEFAULT_SEED = _int_from_env("PRAKRIT_VERB_SEED", None)

# Worker threads for batch processing
DEFAULT_WORKERS = max(1, _int_from_env("PRAKRIT_VERB_WORKERS", 1))

# Debug mode
DEBUG = os.environ.get("PRAKRIT_VERB_DEBUG", "").lower() in ("1", "true", "yes")

# The vowel transformation rule is skipped on one draw out of EXCEPTION_ODDS
EXCEPTION_ODDS = 20

# Batch input lines starting with this prefix are ignored
COMMENT_PREFIX = "#"

# Separator used when a list of forms is rendered as a single cell
FORM_SEPARATOR = ", "
