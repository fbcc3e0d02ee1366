"""YAML codec for profile and project documents.

decode() turns uploaded YAML text into a plain tree (dicts, lists, scalars)
and rejects duplicated mapping keys instead of letting the last one win.
encode() turns a validated document back into human-editable YAML, keeping
the declared field order.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

import yaml
from pydantic import BaseModel
from yaml.constructor import ConstructorError

from folio.core.errors import YamlSyntaxError

MERGE_TAG = "tag:yaml.org,2002:merge"


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that fails on duplicated mapping keys at any depth."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen: set = set()
            for key_node, _ in node.value:
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=True)
                if not isinstance(key, Hashable):
                    # Let the base constructor report unhashable keys
                    continue
                # true and 1 are equal in Python but distinct YAML keys
                marker = (type(key), key)
                if marker in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicated mapping key ({key!r})",
                        key_node.start_mark,
                    )
                seen.add(marker)
        return super().construct_mapping(node, deep=deep)


class _DocumentDumper(yaml.SafeDumper):
    """SafeDumper with block-style lists indented under their key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, value: str):
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_DocumentDumper.add_representer(str, _represent_str)


def decode(text: str) -> Any:
    """Parse YAML text into a generic tree.

    Args:
        text: Raw YAML submitted by the user

    Returns:
        The parsed tree (None for an empty document)

    Raises:
        YamlSyntaxError: On malformed YAML or duplicated mapping keys
    """
    try:
        return yaml.load(text, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise YamlSyntaxError(f"Failed to parse YAML: {e}") from e


def _to_plain(value: Any) -> Any:
    """Convert documents and nested containers into dumpable primitives."""
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def encode(value: Any) -> str:
    """Serialize a document (or plain mapping) to YAML text.

    None-valued fields are omitted, field order is kept as declared,
    multi-line strings use literal block style.
    """
    return yaml.dump(
        _to_plain(value),
        Dumper=_DocumentDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=120,
    )
