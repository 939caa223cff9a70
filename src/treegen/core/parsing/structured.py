from __future__ import annotations

"""
Structured Format Unifier.

Decodes nested name->value documents (YAML, JSON, TOML, JSON5) and converts
them into the canonical tree: scalar strings become files carrying that
content, nested mappings become directories.
"""

import json
import logging
import tomllib
from typing import Any, Callable, Dict, List, Mapping, Union

import json5
import yaml

from treegen.core.parsing.literal_blocks import preprocess_literal_blocks, render_quoted
from treegen.domain.errors import DecodeError
from treegen.domain.tree_models import Node

logger = logging.getLogger(__name__)

# A decoded value is either file content or a nested directory mapping
StructuredValue = Union[str, Mapping[str, "StructuredValue"]]
Decoder = Callable[[str], Any]

# -----------------------------------------------------------------------------
# DECODERS
# -----------------------------------------------------------------------------

def _decode_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _decode_json(text: str) -> Any:
    return json.loads(text)


def _decode_toml(text: str) -> Any:
    return tomllib.loads(text)


def _decode_json5(text: str) -> Any:
    # json5 has no backtick strings, literals are handed over quoted
    return json5.loads(preprocess_literal_blocks(text, render=render_quoted))


DECODERS: Dict[str, Decoder] = {
    "yaml": _decode_yaml,
    "json": _decode_json,
    "toml": _decode_toml,
    "json5": _decode_json5,
}

_FORMAT_LABELS: Dict[str, str] = {
    "yaml": "YAML",
    "json": "JSON",
    "toml": "TOML",
    "json5": "JSON5",
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_structured(text: str, fmt: str, source: str = "<string>") -> Node:
    """
    Decode structured text and unify it into a canonical tree.

    Args:
        text: Raw document text.
        fmt: One of 'yaml', 'json', 'toml', 'json5'.
        source: Path used in error messages.

    Returns:
        Node: Synthetic root holding the top-level entries.

    Raises:
        DecodeError: On syntax errors or a document that is not a
            name->(string | mapping) structure at every level.
    """
    data = decode_document(text, fmt, source)
    root = unify_mapping(data)
    logger.debug(f"Unified {len(root.children)} top-level entries from {source}")
    return root


def decode_document(text: str, fmt: str, source: str = "<string>") -> Mapping[str, StructuredValue]:
    """Run the format decoder and verify the resulting shape."""
    decoder = DECODERS.get(fmt)
    if decoder is None:
        raise ValueError(f"Unknown structured format: {fmt}")

    label = _FORMAT_LABELS[fmt]
    try:
        data = decoder(text)
    except (ValueError, yaml.YAMLError) as e:
        # JSONDecodeError and TOMLDecodeError are ValueError subclasses
        raise DecodeError(f"Failed to parse {label} in '{source}': {e}", source) from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"Failed to parse {label} in '{source}': top level must be a mapping, "
            f"got {type(data).__name__}",
            source,
        )
    check_shape(data, source, label)
    return data


def check_shape(data: Mapping[Any, Any], source: str, label: str = "document", _trail: str = "") -> None:
    """
    Verify every key is a string and every value a string or mapping.

    Raises:
        DecodeError: Naming the source and the dotted key path at fault.
    """
    for key, value in data.items():
        if not isinstance(key, str):
            raise DecodeError(
                f"Failed to parse {label} in '{source}': key {key!r} under "
                f"'{_trail or '<root>'}' is not a string",
                source,
            )
        trail = f"{_trail}.{key}" if _trail else key
        if isinstance(value, dict):
            check_shape(value, source, label, trail)
        elif not isinstance(value, str):
            raise DecodeError(
                f"Failed to parse {label} in '{source}': value at '{trail}' must be "
                f"a string or a mapping, got {type(value).__name__}",
                source,
            )


def unify_mapping(data: Mapping[str, StructuredValue]) -> Node:
    """Convert a top-level mapping into a root whose children are its entries."""
    root = Node.root()
    root.children.extend(value_to_node(name, value) for name, value in data.items())
    return root


def value_to_node(name: str, value: StructuredValue) -> Node:
    """Recursively convert one name/value pair."""
    if isinstance(value, str):
        return Node.file(name, value)

    node = Node.directory(name)
    children: List[Node] = [value_to_node(k, v) for k, v in value.items()]
    node.children.extend(children)
    return node
