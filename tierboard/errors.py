"""Request-level errors.

Each error carries the HTTP status and the short message returned to the
client in the `{"success": false, "msg": ...}` envelope.
"""


class TierboardError(Exception):
    """Base class for errors that terminate a request."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TierboardError):
    """Submission body is empty, missing or not a JSON object."""

    status_code = 400


class InvalidTier(TierboardError):
    """Submission references a tier symbol outside S/A/B/C/D."""

    status_code = 400

    def __init__(self, item: str, tier: object) -> None:
        super().__init__(f"Invalid tier {tier!r} for {item!r}; expected one of S, A, B, C, D")
        self.item = item
        self.tier = tier


class InternalError(TierboardError):
    """Store I/O or parse failure. The message is fixed per operation."""

    status_code = 500
