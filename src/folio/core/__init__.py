"""Core business logic module.

Document core (pure, no I/O, no logging):
- yaml_codec: YAML decode (duplicate-key safe) / encode
- schema: Profile and project document validation
- pipeline: decode + validate entry point
- slug: Project slug derivation and uniqueness resolution
- reorder: All-or-nothing project reordering

Services (storage-backed):
- pages: Profile page lifecycle
- projects: Project lifecycle
- templates: Starter YAML templates
"""

__all__ = [
    "errors",
    "yaml_codec",
    "schema",
    "pipeline",
    "slug",
    "reorder",
    "pages",
    "projects",
    "templates",
]
