"""Утилиты для генератора"""

from .naming import (
    find_common_prefix,
    extract_common_base_path,
    strip_base_path,
    path_to_identifier,
)

__all__ = [
    "find_common_prefix",
    "extract_common_base_path",
    "strip_base_path",
    "path_to_identifier",
]
