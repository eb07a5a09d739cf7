"""Exceptions raised while registering schemas and decoding page requests."""


class PaginationError(Exception):
    """Base class for all pagination contract errors."""


class SchemaConflictError(PaginationError):
    """Raised when two schema fields produce the same orderable identifier."""

    def __init__(self, identifier: str, first: str, second: str | None = None) -> None:
        self.identifier = identifier
        self.fields = (first,) if second is None else (first, second)
        if second is None:
            message = f"Field '{first}' does not produce a usable order identifier"
        else:
            message = (
                f"Fields '{first}' and '{second}' both resolve to "
                f"order identifier '{identifier}'"
            )
        super().__init__(message)


class SchemaRegistrationError(PaginationError):
    """Raised when an entity schema is registered more than once."""


class SchemaNotRegisteredError(PaginationError):
    """Raised when no pagination contract exists for an entity name."""


class PaginationRequestError(PaginationError):
    """Raised when query parameters cannot be decoded into a page request.

    Carries a mapping of parameter name to error messages so the HTTP
    layer can report every failing parameter at once.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        details = ", ".join(
            f"{field}: [{', '.join(messages)}]" for field, messages in errors.items()
        )
        super().__init__(f"Invalid pagination parameters: {details}")


class UnknownOrderFieldError(PaginationRequestError):
    """Raised when the ``order`` parameter names a field that is not orderable."""

    def __init__(
        self,
        errors: dict[str, list[str]],
        allowed: list[str],
    ) -> None:
        self.allowed = allowed
        super().__init__(errors)


class MalformedParameterError(PaginationRequestError):
    """Raised when ``page``, ``limit`` or ``sort`` has an unusable value."""
