"""Typed errors raised by folio.

Every error carries a stable ``code`` and ``http_status`` so callers (the web
layer, the CLI) can map failures without inspecting message text.

Taxonomy:
- YamlSyntaxError: malformed YAML or duplicated mapping keys
- InvalidDocumentError: one or more field-level validation issues
- InvalidReorderError: malformed reorder batch (duplicate ids, bad positions)
- SlugExhaustedError: no free slug within the attempt bound
- SlugConflictError: storage rejected a slug that was free when probed
- NotFoundError (+ page/project variants): entity absent or not owned
- UnknownDocumentKindError: kind is neither "profile" nor "project"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    """A single violated rule, addressed by dotted field path."""

    field: str
    issue: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "issue": self.issue}


class FolioError(Exception):
    """Base class for all folio errors."""

    code = "INTERNAL_ERROR"
    http_status = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def details(self) -> list[dict[str, str]] | None:
        """Structured details for the error body, if any."""
        return None


class YamlSyntaxError(FolioError):
    """Raised when YAML text cannot be parsed."""

    code = "INVALID_YAML"
    http_status = 400
    default_message = "Invalid YAML syntax"


class _IssueListError(FolioError):
    """Error carrying the complete issue list of one validation pass."""

    def __init__(self, message: str | None = None, issues: list[ValidationIssue] | None = None):
        self.issues = list(issues or [])
        super().__init__(message)

    def details(self) -> list[dict[str, str]]:
        return [issue.to_dict() for issue in self.issues]


class InvalidDocumentError(_IssueListError):
    """Raised when a parsed document violates the schema."""

    code = "INVALID_YAML"
    http_status = 400
    default_message = "The provided data is invalid."


class InvalidReorderError(_IssueListError):
    """Raised when a reorder batch is malformed."""

    code = "VALIDATION_ERROR"
    http_status = 400
    default_message = "Request validation failed"


class SlugExhaustedError(FolioError):
    """Raised when no unique slug could be found within the attempt bound."""

    code = "SLUG_EXHAUSTED"
    http_status = 500
    default_message = "Unable to generate unique slug after maximum attempts"

    def __init__(self, base: str, attempts: int, conflicts: int = 0):
        self.base = base
        self.attempts = attempts
        self.conflicts = conflicts
        super().__init__()


class SlugConflictError(FolioError):
    """Raised by storage when a slug was taken between probe and insert."""

    code = "SLUG_CONFLICT"
    http_status = 409
    default_message = "Project identifier already in use"

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__()


class NotFoundError(FolioError):
    """Raised when an entity does not exist or is not owned by the caller.

    The message never says which of the two happened.
    """

    code = "NOT_FOUND"
    http_status = 404
    default_message = "Entity not found"


class ProjectNotFoundError(NotFoundError):
    code = "PROJECT_NOT_FOUND"
    default_message = "Project not found"


class PageNotFoundError(NotFoundError):
    code = "PAGE_NOT_FOUND"
    default_message = "No page found for this user"


class PageAlreadyExistsError(FolioError):
    """Raised when a user who already owns a page tries to create another."""

    code = "PAGE_ALREADY_EXISTS"
    http_status = 409
    default_message = "A page already exists for this user"


class UrlAlreadyTakenError(FolioError):
    code = "URL_ALREADY_TAKEN"
    http_status = 409
    default_message = "This URL is already in use"


class ReservedUrlError(FolioError):
    code = "RESERVED_URL"
    http_status = 400
    default_message = "This URL is reserved and cannot be used"


class InvalidThemeError(FolioError):
    code = "INVALID_THEME"
    http_status = 400
    default_message = "Unknown theme"

    def __init__(self, theme: str, available: tuple[str, ...]):
        self.theme = theme
        self.available = available
        super().__init__(
            f"Unknown theme '{theme}'. Available: {', '.join(available)}"
        )


class AuthenticationRequiredError(FolioError):
    code = "UNAUTHORIZED"
    http_status = 401
    default_message = "Authentication required"


class UnknownDocumentKindError(FolioError):
    code = "UNKNOWN_DOCUMENT_KIND"
    http_status = 400
    default_message = "Unknown document kind"

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown document kind '{kind}'. Expected 'profile' or 'project'")
