"""Schema validation for profile and project documents.

Validation runs in two stages:

1. Structural / per-field rules, declared on pydantic models
   (shape, required presence, length bounds).
2. Whole-document invariants (e.g. date ordering), run against the raw
   tree so their issues are reported alongside stage 1 issues.

validate() never raises for bad input. It returns Ok(document) or
Err(issues), where issues is the complete list from both stages.

Usage:
    from folio.core.schema import DocumentKind, validate

    result = validate({"name": "Ada", "bio": "Engineer"}, DocumentKind.PROFILE)
    if result.is_ok:
        document = result.value
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Callable, ClassVar, Generic, TypeVar, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

from folio.core.errors import UnknownDocumentKindError, ValidationIssue

REQUIRED = "Required"
DATE_ORDER_MESSAGE = "End date must be after or equal to start date"


class DocumentKind(str, Enum):
    """The two document shapes users can upload."""

    PROFILE = "profile"
    PROJECT = "project"

    @classmethod
    def parse(cls, kind: "DocumentKind | str") -> "DocumentKind":
        """Coerce a kind value, raising UnknownDocumentKindError if unknown."""
        try:
            return cls(kind)
        except ValueError as e:
            raise UnknownDocumentKindError(str(kind)) from e


# =============================================================================
# FIELD TYPES
# =============================================================================


def _text(label: str, max_length: int, required: bool = True):
    """Build a string type with a length bound and a labelled message."""

    def check(value: str) -> str:
        if required and not value.strip():
            raise PydanticCustomError("required", REQUIRED)
        if len(value) > max_length:
            raise PydanticCustomError(
                "too_long",
                "{label} must not exceed {max_length} characters",
                {"label": label, "max_length": max_length},
            )
        return value

    return Annotated[StrictStr, AfterValidator(check)]


_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _calendar_date(value: Any) -> Any:
    # YAML timestamps load as datetime; only the calendar day is kept
    if isinstance(value, datetime):
        return value.date()
    # Numbers and numeric strings would otherwise be read as Unix timestamps
    if isinstance(value, (bool, int, float)) or (
        isinstance(value, str) and not _ISO_DATE.fullmatch(value.strip())
    ):
        raise PydanticCustomError("date_type", "Invalid date")
    return value


CalendarDate = Annotated[date, BeforeValidator(_calendar_date)]


class _DocumentModel(BaseModel):
    """Base for all document models.

    Explicit nulls are treated as absent, so a required field left empty
    in YAML (``name:``) reports "Required" and an optional one is omitted.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# =============================================================================
# PROFILE
# =============================================================================


class ContactInfo(_DocumentModel):
    label: _text("Label", 50)
    value: _text("Value", 100)


class Experience(_DocumentModel):
    job_title: _text("Job title", 100)
    job_description: _text("Job description", 500, required=False) | None = None


class Education(_DocumentModel):
    school_title: _text("School title", 100)
    school_description: _text("School description", 300, required=False) | None = None


class Skill(_DocumentModel):
    name: _text("Skill name", 50)


class ProfileDocument(_DocumentModel):
    """Validated profile page content."""

    name: _text("Name", 100)
    bio: _text("Bio", 500)
    contact_info: list[ContactInfo] | None = None
    experience: list[Experience] | None = None
    education: list[Education] | None = None
    skills: list[Skill] | None = None


# =============================================================================
# PROJECT
# =============================================================================


class ProjectDocument(_DocumentModel):
    """Validated project subpage content."""

    name: _text("Project name", 100)
    description: _text("Description", 500)
    tech_stack: _text("Tech stack", 500, required=False) | None = None
    prod_link: _text("Production link", 100, required=False) | None = None
    start_date: CalendarDate | None = None
    end_date: CalendarDate | None = None


Document = Union[ProfileDocument, ProjectDocument]

MODELS: dict[DocumentKind, type[_DocumentModel]] = {
    DocumentKind.PROFILE: ProfileDocument,
    DocumentKind.PROJECT: ProjectDocument,
}


# =============================================================================
# RESULT TYPE
# =============================================================================

D = TypeVar("D")


@dataclass(frozen=True)
class Ok(Generic[D]):
    """Successful validation carrying the document."""

    value: D
    is_ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Err:
    """Failed validation carrying every violated rule."""

    issues: tuple[ValidationIssue, ...]
    is_ok: ClassVar[bool] = False


ValidationResult = Union[Ok[Document], Err]


# =============================================================================
# STAGE 1: PER-FIELD RULES
# =============================================================================

_TYPE_MESSAGES = {
    "missing": REQUIRED,
    "string_type": "Expected string",
    "list_type": "Expected array",
    "model_type": "Expected object",
    "model_attributes_type": "Expected object",
    "dict_type": "Expected object",
}


def _issue_message(error: dict[str, Any]) -> str:
    error_type = error["type"]
    if error_type in _TYPE_MESSAGES:
        return _TYPE_MESSAGES[error_type]
    if error_type.startswith("date"):
        return "Invalid date"
    return error["msg"]


def _format_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def _field_issues(tree: dict, model: type[_DocumentModel]) -> tuple[_DocumentModel | None, list[ValidationIssue]]:
    try:
        return model.model_validate(tree), []
    except ValidationError as e:
        issues = [
            ValidationIssue(field=_format_path(err["loc"]), issue=_issue_message(err))
            for err in e.errors(include_url=False)
        ]
        return None, issues


# =============================================================================
# STAGE 2: WHOLE-DOCUMENT INVARIANTS
# =============================================================================

_DATE_ADAPTER = TypeAdapter(CalendarDate)


def _check_date_order(tree: dict) -> list[ValidationIssue]:
    start, end = tree.get("start_date"), tree.get("end_date")
    if start is None or end is None:
        return []
    try:
        start = _DATE_ADAPTER.validate_python(start)
        end = _DATE_ADAPTER.validate_python(end)
    except ValidationError:
        # Already reported as a field issue
        return []
    if end < start:
        return [ValidationIssue(field="end_date", issue=DATE_ORDER_MESSAGE)]
    return []


Invariant = Callable[[dict], list[ValidationIssue]]

INVARIANTS: dict[DocumentKind, tuple[Invariant, ...]] = {
    DocumentKind.PROFILE: (),
    DocumentKind.PROJECT: (_check_date_order,),
}


# =============================================================================
# ENTRY POINT
# =============================================================================


def validate(tree: Any, kind: DocumentKind | str) -> ValidationResult:
    """Validate a parsed YAML tree as a document of the given kind.

    Args:
        tree: Output of yaml_codec.decode()
        kind: DocumentKind or its string value ("profile", "project")

    Returns:
        Ok(document) when every rule passes, otherwise Err(issues) with one
        issue per violated rule in field order, invariants last.
    """
    kind = DocumentKind.parse(kind)

    if not isinstance(tree, dict):
        return Err(issues=(ValidationIssue(field="", issue="Expected a mapping"),))

    document, issues = _field_issues(tree, MODELS[kind])
    for invariant in INVARIANTS[kind]:
        issues.extend(invariant(tree))

    if issues:
        return Err(issues=tuple(issues))
    return Ok(value=document)
