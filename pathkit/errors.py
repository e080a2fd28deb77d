"""
errors.py - Exception Types

NotFound / AlreadyExists conditions raised by path operations.
Any other host filesystem failure propagates as the plain OSError raised by the os call.
"""

import errno


class PathError(OSError):
    """Base class for errors raised by pathkit itself"""


class PathNotFoundError(PathError, FileNotFoundError):
    """Target is not a regular file / not a directory"""

    def __init__(self, filename: str, reason: str = "No such file or directory"):
        super().__init__(errno.ENOENT, reason, filename)


class PathExistsError(PathError, FileExistsError):
    """A regular file already exists at the target path"""

    def __init__(self, filename: str, reason: str = "File already exists"):
        super().__init__(errno.EEXIST, reason, filename)
