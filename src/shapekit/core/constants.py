"""
Engine defaults shared by the validation engine, settings, and domain descriptors.

Notes:
    - EngineSettings (shapekit.config) sources its defaults from here.
    - Changing MAX_DEPTH changes how deep a descriptor tree may nest before
      RecursionLimitError is raised.
"""

from __future__ import annotations

__all__ = [
    "MAX_DEPTH",
    "WILDCARD_FILE_TYPES",
    "IMAGE_FILE_TYPE",
]

# Maximum nesting of (descriptor, value) checks per validate() call.
MAX_DEPTH: int = 256

# File tags that mean "any file"; they never narrow the derived `type` field.
WILDCARD_FILE_TYPES: frozenset[str] = frozenset({"*", "*/*"})

# Tag ImageType configures on its embedded FileType.
IMAGE_FILE_TYPE: str = "jpg"
