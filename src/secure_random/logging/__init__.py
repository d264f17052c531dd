"""Selection logging subsystem for secure-random.

Provides an immutable record of the entropy source selection and a logger
that supports none/summary/full verbosity.
"""

from secure_random.logging.logger import SelectionLogger
from secure_random.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]
