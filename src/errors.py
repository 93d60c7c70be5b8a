"""Domain errors shared by the invitation, RSVP and guestbook features.

Services raise these; ``src.main`` maps each one to an HTTP response.
"""

from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class FieldError:
    """One failing field, addressed by a dotted path such as ``events.0.date``."""

    field: str
    message: str


class InvitationAppError(Exception):
    """Base class for every error the services raise on purpose."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(InvitationAppError):
    """Raised when submitted data fails validation. Carries every failing field."""

    def __init__(self, errors: list[FieldError], message: str = "Validation failed") -> None:
        self.errors = list(errors)
        super().__init__(message)

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field=field, message=message)])

    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


class SlugTakenError(InvitationAppError):
    """Raised when the store reports a slug uniqueness conflict."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Slug '{slug}' is already taken")


class UnauthorizedError(InvitationAppError):
    """Raised when the caller does not own the invitation."""

    def __init__(self, message: str = "You do not have access to this invitation") -> None:
        super().__init__(message)


class NotFoundError(InvitationAppError):
    """Raised for missing invitations and, to public callers, for unpublished ones."""

    def __init__(self, message: str = "Invitation not found") -> None:
        super().__init__(message)


class PayloadTooLargeError(InvitationAppError):
    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Configuration is {size} bytes, the limit is {limit} bytes")


class UnknownTemplateError(InvitationAppError):
    def __init__(self, template: object) -> None:
        self.template = template
        super().__init__(f"Unknown template '{template}'")


class StoredConfigError(InvitationAppError):
    """A stored configuration no longer passes the current schema."""

    def __init__(self, invitation_id: object, errors: list[FieldError] | None = None) -> None:
        self.invitation_id = invitation_id
        self.errors = list(errors or [])
        super().__init__("Invitation configuration needs to be updated by its owner")


class StoreError(InvitationAppError):
    """Opaque storage failure. Not retried here."""

    def __init__(self, message: str = "Storage is unavailable") -> None:
        super().__init__(message)


def field_errors_from_pydantic(
    exc: PydanticValidationError, root: str = "config", skip_locations: tuple[str, ...] = ()
) -> list[FieldError]:
    """Flatten pydantic errors into FieldErrors addressed by dotted paths.

    ``skip_locations`` drops a leading location such as FastAPI's ``body``.
    """
    errors = []
    for error in exc.errors():
        loc = list(error["loc"])
        if loc and loc[0] in skip_locations:
            loc = loc[1:]
        path = ".".join(str(part) for part in loc) or root
        errors.append(FieldError(field=path, message=error["msg"]))
    return errors
