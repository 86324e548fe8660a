"""Source document readers for serialization.

This module loads a JSON or YAML document from a local path.
The parsed top-level mapping becomes the root object of a graph.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import cast

from core.constants import SUPPORTED_SOURCE_EXTENSIONS
from core.errors import BaseGraphDependencyError, SourceDocumentError


def read_source_document(source_path: str) -> dict[str, object]:
    """Load a JSON or YAML document as a root mapping.

    Args:
        source_path: Local ``.json``, ``.yaml`` or ``.yml`` file path.

    Returns:
        Parsed top-level mapping in document key order.

    Raises:
        SourceDocumentError: If the file is missing, unsupported, or invalid.
        BaseGraphDependencyError: If YAML input is given without PyYAML.
    """
    document_path = Path(source_path).expanduser()
    if not document_path.is_file():
        raise SourceDocumentError(
            f"Failed to read source at {document_path}: file does not exist. "
            "Provide an existing JSON or YAML file."
        )
    suffix = document_path.suffix.lower()
    if suffix not in SUPPORTED_SOURCE_EXTENSIONS:
        raise SourceDocumentError(
            f"Unsupported source file {document_path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    text = _read_text(document_path)
    if suffix == ".json":
        payload = _parse_json(document_path, text)
    else:
        payload = _parse_yaml(document_path, text)
    if not isinstance(payload, dict):
        raise SourceDocumentError(
            f"Invalid source document at {document_path}: expected a mapping at top level."
        )
    return cast(dict[str, object], payload)


def _read_text(document_path: Path) -> str:
    try:
        return document_path.read_text(encoding="utf-8")
    except OSError as error:
        raise SourceDocumentError(
            f"Failed to read source at {document_path}: {error}. Check file permissions and retry."
        ) from error


def _parse_json(document_path: Path, text: str) -> object:
    try:
        return cast(object, json.loads(text))
    except json.JSONDecodeError as error:
        raise SourceDocumentError(
            f"Failed to parse JSON source at {document_path}:{error.lineno}: "
            f"{error.msg}. Fix the JSON syntax and retry."
        ) from error


def _parse_yaml(document_path: Path, text: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise BaseGraphDependencyError(
            "YAML source support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    try:
        return cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise SourceDocumentError(
            f"Failed to parse YAML source at {document_path}: {error}. Fix YAML syntax and retry."
        ) from error
