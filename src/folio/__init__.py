"""folio: personal pages and project showcases from YAML."""

__version__ = "0.1.0"
