"""
models_path.py - Path Value Definitions

Contains:
- Extension: Dot-prefixed filename suffix
- FsPath: String path value with name/extension helpers and thin filesystem wrappers
- join: Join path segments
"""

from dataclasses import dataclass
from typing import IO, Union, TYPE_CHECKING
import logging
import os
import shutil
import stat

from .errors import PathNotFoundError, PathExistsError

if TYPE_CHECKING:
    from .models_entries import Entries


logger = logging.getLogger(__name__)

PathLike = Union[str, "FsPath", os.PathLike]

_SEPARATORS = os.sep + (os.altsep or "")


@dataclass(frozen=True, order=True)
class Extension:
    """Filename extension including the leading dot (e.g., .png), empty if none"""
    value: str = ""

    def __post_init__(self):
        object.__setattr__(self, "value", str(self.value))

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def lower(self) -> "Extension":
        return Extension(self.value.lower())

    def upper(self) -> "Extension":
        return Extension(self.value.upper())


def join(base: PathLike, *segments: PathLike) -> "FsPath":
    """
    Join path segments with the host separator and clean the result

    Empty segments are ignored; joining nothing but empty segments gives an empty path.
    """
    first = os.fspath(base)
    # Later segments are always relative to what precedes them
    rest = [os.fspath(s).lstrip(_SEPARATORS) for s in segments]
    parts = [p for p in (first, *rest) if p]
    if not parts:
        return FsPath("")
    return FsPath(os.path.normpath(os.path.join(*parts)))


def _stat_mode(value: str) -> int:
    """st_mode of the path, 0 when stat fails for any reason"""
    try:
        return os.stat(value).st_mode
    except (OSError, ValueError):
        return 0


@dataclass(frozen=True)
class FsPath:
    """
    A filesystem path held as a plain string

    Any string is accepted, including the empty string, and the path need not exist.
    Name/extension helpers never touch the filesystem and always return a new FsPath.
    """
    value: str = ""

    def __post_init__(self):
        object.__setattr__(self, "value", os.fspath(self.value))

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    # ---- components ----

    def join(self, *segments: PathLike) -> "FsPath":
        return join(self, *segments)

    @property
    def base(self) -> str:
        """Last element (filename with extension); "." for an empty path"""
        if not self.value:
            return "."
        cleaned = os.path.normpath(self.value)
        name = os.path.basename(cleaned)
        # Root directory
        return name or cleaned

    file_name = base

    @property
    def directory(self) -> str:
        """All elements before base; "." when there are none"""
        if not self.value:
            return "."
        return os.path.dirname(os.path.normpath(self.value)) or "."

    @property
    def extension(self) -> Extension:
        return Extension(os.path.splitext(self.base)[1])

    @property
    def stem(self) -> str:
        """Filename without extension"""
        ext = self.extension
        if not ext:
            return self.base
        return self.base[:-len(ext)]

    # ---- derived paths ----

    def with_file_name(self, name: str) -> "FsPath":
        """Replace the stem, keeping directory and extension"""
        return join(self.directory, name + str(self.extension))

    def with_prefix(self, text: str) -> "FsPath":
        """Prepend text to the filename"""
        return join(self.directory, text + self.base)

    def with_suffix(self, text: str) -> "FsPath":
        """Insert text between stem and extension"""
        return join(self.directory, self.stem + text + str(self.extension))

    def with_directory(self, directory: PathLike) -> "FsPath":
        return join(directory, self.base)

    def add_extension(self, ext: Union[str, Extension]) -> "FsPath":
        """Append ext as-is, even if the path already has an extension"""
        return FsPath(self.value + str(ext))

    def with_extension(self, ext: Union[str, Extension]) -> "FsPath":
        """
        Change the extension

        An empty ext strips the current extension; a path without extension gets ext
        appended; otherwise the current extension is replaced.
        """
        current = str(self.extension)
        value = self.value
        if current and not value.endswith(current):
            # Trailing separator or "." segment after the filename
            value = os.path.normpath(value)
        root = value[:len(value) - len(current)] if current else value
        return FsPath(root + str(ext))

    def with_lower_extension(self) -> "FsPath":
        return self.with_extension(self.extension.lower())

    def with_upper_extension(self) -> "FsPath":
        return self.with_extension(self.extension.upper())

    def absolute(self) -> "FsPath":
        """Absolute form of the path, resolved against the working directory"""
        return FsPath(os.path.abspath(self.value))

    # ---- filesystem queries (any stat error counts as False) ----

    def exists(self) -> bool:
        try:
            os.stat(self.value)
        except (OSError, ValueError):
            return False
        return True

    def is_directory(self) -> bool:
        return stat.S_ISDIR(_stat_mode(self.value))

    def is_file(self) -> bool:
        return stat.S_ISREG(_stat_mode(self.value))

    # ---- filesystem mutations ----

    def create_directory(self) -> None:
        """Create the directory and missing parents; no-op if it is already a directory"""
        if self.is_directory():
            return
        logger.debug("mkdir %s", self.value)
        os.makedirs(self.value, 0o777, exist_ok=True)

    def delete_directory(self) -> None:
        """Recursively delete the directory; no-op if it is not a directory"""
        if not self.is_directory():
            return
        logger.debug("rmtree %s", self.value)
        if os.path.islink(self.value):
            # Remove the link, not the target's contents
            os.remove(self.value)
            return
        shutil.rmtree(self.value)

    def create_file(self, binary: bool = False, encoding: str = "utf-8") -> IO:
        """
        Create the file and return a handle open for writing

        Raises:
            PathExistsError: Something already exists at this path
        """
        logger.debug("create %s", self.value)
        try:
            if binary:
                return open(self.value, "xb")
            return open(self.value, "x", encoding=encoding)
        except FileExistsError:
            raise PathExistsError(self.value) from None

    def delete_file(self) -> None:
        """Delete the file; no-op if it is not a regular file"""
        if not self.is_file():
            return
        logger.debug("remove %s", self.value)
        os.remove(self.value)

    def open_file(self, binary: bool = False, encoding: str = "utf-8") -> IO:
        """
        Open the file for reading

        Raises:
            PathNotFoundError: Path is not a regular file
        """
        if not self.is_file():
            raise PathNotFoundError(self.value, "Not a regular file")
        if binary:
            return open(self.value, "rb")
        return open(self.value, "r", encoding=encoding)

    def list_entries(self) -> "Entries":
        """
        Direct children of this directory (files and directories, not recursive)

        Each child is joined with this path. Order is whatever the OS returns.

        Raises:
            PathNotFoundError: Path is not a directory
        """
        from .models_entries import Entries

        if not self.is_directory():
            raise PathNotFoundError(self.value, "Not a directory")
        names = os.listdir(self.value)
        return Entries([self.join(name) for name in names])
