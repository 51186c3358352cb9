"""
Parse-profile Loader (``fec_config.loader``).

Responsibility
--------------
Loads YAML profile files and parses them into ``ParseOptions``.  Callers
should go through ``fec_config.get_parse_options()``; this module is the
parsing layer underneath it.

Profile format
--------------
::

    name: pipe_with_header
    description: "|"-separated export with a header line
    separator: "|"
    text_encoding: utf-8
    skip_first_line: true

Every key except ``name`` is optional and falls back to the ``ParseOptions``
default.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown key or wrongly typed value  -> ``ValueError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from fec_ingestion.domain.types import ParseOptions

_OPTION_KEYS = frozenset({"separator", "text_encoding", "skip_first_line"})
_META_KEYS = frozenset({"name", "description"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def parse_options_from_dict(data: dict[str, Any]) -> ParseOptions:
    """Build ParseOptions from a profile mapping."""
    unknown = set(data) - _OPTION_KEYS - _META_KEYS
    if unknown:
        raise ValueError(f"Unknown parse option(s): {', '.join(sorted(unknown))}")

    kwargs: dict[str, Any] = {}
    if "separator" in data:
        if not isinstance(data["separator"], str):
            raise ValueError(f"separator must be a string, got {data['separator']!r}")
        kwargs["separator"] = data["separator"]
    if "text_encoding" in data:
        if not isinstance(data["text_encoding"], str):
            raise ValueError(f"text_encoding must be a string, got {data['text_encoding']!r}")
        kwargs["text_encoding"] = data["text_encoding"]
    if "skip_first_line" in data:
        if not isinstance(data["skip_first_line"], bool):
            raise ValueError(f"skip_first_line must be a boolean, got {data['skip_first_line']!r}")
        kwargs["skip_first_line"] = data["skip_first_line"]
    return ParseOptions(**kwargs)


def load_profile(path: Path) -> tuple[str, ParseOptions]:
    """Load one profile file; the name defaults to the file stem."""
    data = load_yaml_file(path)
    return str(data.get("name", path.stem)), parse_options_from_dict(data)
