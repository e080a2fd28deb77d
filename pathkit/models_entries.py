"""
models_entries.py - Directory Entry Collection

Contains:
- NumberingOptions: Sequential numbering configuration
- Entries: Ordered collection of FsPath with filter / transform / rename helpers
- get_entries: List a directory into Entries
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Union

from .models_path import Extension, FsPath, PathLike, join


@dataclass
class NumberingOptions:
    """Sequential numbering options"""
    start: int = 1                  # First counter value
    padding: int = 0                # Zero padding digits (0 means sized to the batch)
    separator: str = "_"            # Between counter and original filename

    def width(self, count: int) -> int:
        """Counter width for a batch of count entries"""
        if self.padding > 0:
            return self.padding
        return len(str(max(count, self.start + count - 1)))


@dataclass
class Entries:
    """
    Ordered collection of paths, usually the children of one directory

    Filters and transforms return new collections and keep the original order.
    for_each, for_each_file_name and prepend_sequential_numbers rewrite the entries in place.
    """
    paths: List[FsPath] = field(default_factory=list)

    def __post_init__(self):
        self.paths = [p if isinstance(p, FsPath) else FsPath(p) for p in self.paths]

    @classmethod
    def of(cls, *paths: PathLike) -> "Entries":
        return cls(list(paths))

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[FsPath]:
        return iter(self.paths)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Entries(self.paths[index])
        return self.paths[index]

    def copy(self) -> "Entries":
        return Entries(list(self.paths))

    # ---- filtering ----

    def filter(self, predicate: Callable[[FsPath], bool]) -> "Entries":
        return Entries([p for p in self.paths if predicate(p)])

    def only_existing(self) -> "Entries":
        return self.filter(lambda p: p.exists())

    def only_directories(self) -> "Entries":
        """Directories only; entries that do not exist are dropped"""
        return self.filter(lambda p: p.is_directory())

    def only_files(self) -> "Entries":
        """Regular files only; entries that do not exist are dropped"""
        return self.filter(lambda p: p.is_file())

    def with_extension(self, *extensions: Union[str, Extension]) -> "Entries":
        """Entries whose extension exactly matches one of extensions (case-sensitive)"""
        wanted = {str(e) for e in extensions}
        return self.filter(lambda p: str(p.extension) in wanted)

    # ---- transforms ----

    def to_strings(self) -> List[str]:
        return [p.value for p in self.paths]

    def to_absolute(self) -> "Entries":
        """All entries made absolute; the first failure propagates and nothing is returned"""
        return Entries([p.absolute() for p in self.paths])

    def to_base_names(self) -> "Entries":
        return Entries([FsPath(p.base) for p in self.paths])

    def distinct_extensions(self) -> List[Extension]:
        """Distinct extensions, sorted by their text (case-sensitive)"""
        return sorted({p.extension for p in self.paths})

    # ---- in-place rewriting ----

    def for_each(self, procedure: Callable[[FsPath], Optional[PathLike]]) -> None:
        """
        Apply procedure to every entry in order

        If procedure returns a path, it replaces the entry it was given.
        """
        for i, path in enumerate(self.paths):
            result = procedure(path)
            if result is not None:
                self.paths[i] = result if isinstance(result, FsPath) else FsPath(result)

    def for_each_file_name(self, procedure: Callable[[str], Optional[str]]) -> None:
        """
        Apply procedure to the filename (with extension) of every entry

        procedure only sees the filename; the returned name is joined back onto
        the entry's original directory.
        """
        for i, path in enumerate(self.paths):
            directory = path.directory
            name = path.base
            result = procedure(name)
            if result is not None:
                name = result
            self.paths[i] = join(directory, name)

    def prepend_sequential_numbers(self, options: Optional[NumberingOptions] = None) -> None:
        """
        Prefix every filename with a zero-padded counter, e.g. 01_a.txt ... 12_l.txt

        Counters follow the current order of the collection, so sort first when
        alphabetical numbering is wanted.
        """
        if options is None:
            options = NumberingOptions()

        digits = options.width(len(self.paths))
        counter = options.start - 1

        def number(name: str) -> str:
            nonlocal counter
            counter += 1
            return f"{counter:0{digits}d}{options.separator}{name}"

        self.for_each_file_name(number)


def get_entries(path: PathLike) -> Entries:
    """List the direct children of a directory (see FsPath.list_entries)"""
    if not isinstance(path, FsPath):
        path = FsPath(path)
    return path.list_entries()
