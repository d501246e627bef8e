"""Error type enumeration for diagnostic records.

Provides type-safe categorization of the conditions the header stage reports.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Categories attached to diagnostic records and raised errors.

    When adding new error types:
    1. Add the enum value here
    2. Document whether the condition aborts the request
    """

    # Fatal: aborts the request before it reaches the transport layer
    CONFIGURATION_ERROR = "configuration_error"  # OAuth mode without a usable token

    # Non-fatal: logged, request proceeds unchanged
    ADVISORY_WARNING = "advisory_warning"  # Token does not look like a Google OAuth token
