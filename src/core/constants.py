"""Core constants used across basegraph modules.

This module centralizes wire-format field names and defaults.
Chunk size and hash algorithm are part of the stored record format.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".basegraph")
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OBJECTS_DIR_NAME = "objects"
OBJECT_FILE_SUFFIX = ".json"
OBJECT_SHARD_PREFIX_LENGTH = 2
CHUNK_SIZE = 5000
HASH_ALGORITHM = "md5"
TYPE_FIELD = "speckle_type"
BASE_TYPE = "Base"
REFERENCE_TYPE = "reference"
DATA_CHUNK_TYPE = "Speckle.Core.Models.DataChunk"
REFERENCED_ID_FIELD = "referencedId"
CHUNK_DATA_FIELD = "data"
ID_FIELD = "id"
CLOSURE_FIELD = "__closure"
TOTAL_CHILDREN_COUNT_FIELD = "totalChildrenCount"
DETACH_MARKER = "@"
DISALLOWED_KEY_CHARACTERS = (".", "/")
SUPPORTED_SOURCE_EXTENSIONS = (".json", ".yaml", ".yml")
