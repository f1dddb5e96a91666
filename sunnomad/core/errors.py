"""Exception types shared across the package."""


class SunNomadError(Exception):
    """Base class for errors raised by this package."""


class DiagnosticQueryError(SunNomadError):
    """A read query issued by a diagnostic failed."""

    def __init__(self, query: str, message: str) -> None:
        super().__init__(f"{query}: {message}")
        self.query = query


class DuplicateRecordError(SunNomadError, ValueError):
    """A record with the same unique key already exists."""


class UnknownUserError(SunNomadError, LookupError):
    """A write referenced a user id that does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User '{user_id}' does not exist")
        self.user_id = user_id
