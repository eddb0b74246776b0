"""
Error hierarchy shared by the services, repositories and the HTTP layer.

Every failure raised by nomina derives from ``NominaError`` and carries a
stable ``code`` plus the HTTP status the presentation layer maps it to.
Services raise these and never catch one another's; only the exception
handlers in ``nomina.error_handlers`` turn them into responses.

Database and internal failures keep their detail in ``message`` for the
logs, while ``public_message`` (what clients see) stays generic.
"""


class NominaError(Exception):
    """Base exception for all nomina errors."""

    code = "ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message

    def to_response(self) -> dict:
        return {"error": self.public_message}


# ─── Caller errors ──────────────────────────────────────────────

class ValidationError(NominaError):
    """Caller-supplied data violates a business rule."""

    code = "VALIDATION_ERROR"
    http_status = 422


class NotFoundError(NominaError):
    """A referenced entity does not exist, or exists outside the requested scope."""

    code = "NOT_FOUND"
    http_status = 404


class ConflictError(NominaError):
    """Reserved for uniqueness conflicts; not raised by the core services."""

    code = "CONFLICT"
    http_status = 409


# ─── Infrastructure errors ──────────────────────────────────────

class DatabaseError(NominaError):
    """The storage layer failed."""

    code = "DATABASE_ERROR"
    http_status = 500

    @property
    def public_message(self) -> str:
        return "database error"


class InternalError(NominaError):
    """An invariant was violated, e.g. a stored identifier is malformed."""

    code = "INTERNAL_ERROR"
    http_status = 500

    @property
    def public_message(self) -> str:
        return "internal server error"
