"""Generation constants.

Re-exports all constants for convenient importing:
    from testgen.constants import INJECTION_MARKERS, DEFAULT_NAMING_PATTERN
"""

from testgen.constants.injection import *  # noqa: F403
from testgen.constants.templates import *  # noqa: F403
