"""
errors.py
---------
Error kinds surfaced by the marketplace services.

Every kind is terminal for the current operation; nothing is retried.
The HTTP layer maps them in booking/exceptions.py:

- NotFound               -> 404 (booking lookups are scoped, so "not yours"
                                 and "does not exist" look the same)
- Unauthorized           -> 403
- BusinessRuleViolation  -> 400
- InvalidInput           -> 400 (malformed input, checked before lookups)
- StorageFailure         -> 500, generic message only
"""


class MarketplaceError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message=None, param=None):
        self.message = message or self.default_message
        self.param = param
        super().__init__(self.message)


class NotFound(MarketplaceError):
    status_code = 404
    default_message = "Not found"


class Unauthorized(MarketplaceError):
    status_code = 403
    default_message = "Unauthorized"


class BusinessRuleViolation(MarketplaceError):
    status_code = 400
    default_message = "Request violates a business rule"


class InvalidInput(MarketplaceError):
    status_code = 400
    default_message = "Invalid input"


class StorageFailure(MarketplaceError):
    status_code = 500
    default_message = "Server error"
