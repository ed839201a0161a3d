from fastapi import HTTPException, status

_REQUEST_PARTS = ("body", "query", "path", "header", "cookie")


class BadRequestError(HTTPException):
    """A required field is missing or a cross-field rule is violated."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class NotFoundError(HTTPException):
    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {resource.lower()} found with id: {resource_id}",
        )


class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "Not authorized to access this route") -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Authentication invalid") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error dicts into one readable message."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in _REQUEST_PARTS]
        field = ".".join(loc)
        msg = error.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return "; ".join(messages) or "Invalid request"
