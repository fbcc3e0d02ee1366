"""Validation pipeline: YAML text in, validated document out.

This is the single entry point API handlers call for both "create with
initial content" and "update content". It performs no I/O; persisting the
returned document is the caller's job.
"""

from folio.core.errors import InvalidDocumentError
from folio.core.schema import (
    Document,
    DocumentKind,
    Err,
    ProfileDocument,
    ProjectDocument,
    validate,
)
from folio.core.yaml_codec import decode


def process(raw_text: str, kind: DocumentKind | str) -> Document:
    """Parse and validate a YAML document.

    Args:
        raw_text: YAML text as uploaded
        kind: "profile" or "project"

    Returns:
        The validated document

    Raises:
        YamlSyntaxError: If the text is not valid YAML (incl. duplicate keys)
        InvalidDocumentError: If the parsed tree violates the schema; carries
            the full issue list
        UnknownDocumentKindError: If kind is not a known document kind
    """
    kind = DocumentKind.parse(kind)
    tree = decode(raw_text)
    result = validate(tree, kind)
    if isinstance(result, Err):
        raise InvalidDocumentError(issues=list(result.issues))
    return result.value


def process_profile(raw_text: str) -> ProfileDocument:
    return process(raw_text, DocumentKind.PROFILE)


def process_project(raw_text: str) -> ProjectDocument:
    return process(raw_text, DocumentKind.PROJECT)
