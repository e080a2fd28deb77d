"""
pathkit - String Path Value and Directory Entry Helpers

Provides path name/extension manipulation, thin filesystem wrappers,
directory entry filtering and sequential filename numbering.
"""

from .errors import (
    PathError,
    PathNotFoundError,
    PathExistsError,
)

from .models_path import (
    Extension,
    FsPath,
    join,
)

from .models_entries import (
    Entries,
    NumberingOptions,
    get_entries,
)

__all__ = [
    # Errors
    "PathError",
    "PathNotFoundError",
    "PathExistsError",

    # Path values
    "Extension",
    "FsPath",
    "join",

    # Entries
    "Entries",
    "NumberingOptions",
    "get_entries",
]
