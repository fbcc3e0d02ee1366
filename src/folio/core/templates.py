"""Starter YAML templates for new pages and projects.

Templates are generated from sample documents through the same encoder
used for downloads, so a template always passes validation unchanged.
"""

from datetime import date

from folio.core.schema import (
    ContactInfo,
    DocumentKind,
    Education,
    Experience,
    ProfileDocument,
    ProjectDocument,
    Skill,
)
from folio.core.yaml_codec import encode

_HEADERS = {
    DocumentKind.PROFILE: (
        "# Personal page\n"
        "# Required: name (max 100 chars), bio (max 500 chars)\n"
        "# Optional lists: contact_info, experience, education, skills\n"
    ),
    DocumentKind.PROJECT: (
        "# Project page\n"
        "# Required: name (max 100 chars), description (max 500 chars)\n"
        "# Optional: tech_stack, prod_link, start_date, end_date (YYYY-MM-DD)\n"
    ),
}

_SAMPLES = {
    DocumentKind.PROFILE: ProfileDocument(
        name="Jane Doe",
        bio="Software engineer who enjoys building tools for small teams.",
        contact_info=[
            ContactInfo(label="Email", value="jane@example.com"),
            ContactInfo(label="GitHub", value="github.com/janedoe"),
        ],
        experience=[
            Experience(
                job_title="Senior Developer",
                job_description="Led the rewrite of the billing platform.",
            ),
            Experience(job_title="Junior Developer"),
        ],
        education=[
            Education(
                school_title="State University",
                school_description="BSc in Computer Science",
            ),
        ],
        skills=[Skill(name="Python"), Skill(name="SQL")],
    ),
    DocumentKind.PROJECT: ProjectDocument(
        name="My Awesome Project",
        description="A web application for managing shared grocery lists.",
        tech_stack="Python, FastAPI, SQLite",
        prod_link="https://example.com",
        start_date=date(2024, 1, 15),
        end_date=date(2024, 12, 31),
    ),
}


def render_template(kind: DocumentKind | str) -> str:
    """Return the starter YAML for a document kind.

    Args:
        kind: "profile" or "project"

    Returns:
        Commented YAML text
    """
    kind = DocumentKind.parse(kind)
    return _HEADERS[kind] + encode(_SAMPLES[kind])
