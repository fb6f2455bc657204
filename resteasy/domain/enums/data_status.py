"""Status reported by a data-execution closure.

The pipeline maps SUCCESS to a 200 response, INVALID to 400 and ERROR to
500. Any other status value (including statuses a data layer invents that
this enum does not know) maps to 501.
"""

from enum import Enum


class DataStatus(str, Enum):
    """Outcome of a data-layer call."""

    SUCCESS = "success"
    INVALID = "invalid"
    ERROR = "error"
