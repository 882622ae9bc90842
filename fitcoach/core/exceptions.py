"""
Domain error taxonomy.

Engine and services raise these; the API layer maps them to HTTP
responses in :mod:`fitcoach.core.error_handlers`.  Codes are stable and
meant for API clients to branch on:

* ``NF_<ENTITY>_001``: a client, program, assignment, session or
  recommendation log entry does not exist;
* ``AUTH_005`` / ``AUTH_006``: trainer role required / the record
  belongs to another trainer or client;
* ``VAL_<FIELD>_001``: a request field breaks a domain rule;
* ``CF_DAY_LIMIT``, ``CF_MIN_INTERVAL``, ``CF_SLOT_TAKEN``: the session
  calendar refuses a booking.
"""


class DomainError(Exception):
    """Base class: a stable ``code``, a user-facing ``message`` and structured ``details``."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        self.entity = entity
        super().__init__(f"NF_{entity.upper()}_001", message or f"{entity} not found", details)


class ForbiddenError(DomainError):
    """The caller is known but may not act on this client or session."""

    TRAINER_REQUIRED = "AUTH_005"
    NOT_OWNER = "AUTH_006"

    def __init__(self, message: str, code: str = NOT_OWNER, details: dict | None = None):
        super().__init__(code, message, details)


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, details: dict | None = None):
        self.field = field
        super().__init__(f"VAL_{field.upper()}_001", f"Validation failed for {field}: {message}",
                         details or {"field": field})


class ConflictError(DomainError):
    """Scheduling rule violation.

    The request is well formed but the client's calendar cannot take it:
    the day is full, the session is too close to another one, or the
    exact slot is already held.
    """

    DAY_LIMIT = "CF_DAY_LIMIT"
    MIN_INTERVAL = "CF_MIN_INTERVAL"
    SLOT_TAKEN = "CF_SLOT_TAKEN"

    def __init__(self, message: str, code: str, details: dict | None = None):
        super().__init__(code, message, details)
