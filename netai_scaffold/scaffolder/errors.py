"""Error taxonomy for scaffolding failures.

Every failure the scaffolder can hit while touching the filesystem is mapped
to a ``ScaffoldErrorKind`` and wrapped in a ``ScaffoldError`` that carries the
offending manifest path.
"""

from __future__ import annotations

import errno
from enum import Enum


class ScaffoldErrorKind(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    NO_SPACE_LEFT = "no_space_left"
    INVALID_PATH = "invalid_path"
    PARENT_IS_NOT_A_DIRECTORY = "parent_is_not_a_directory"
    ALREADY_EXISTS_AS_WRONG_KIND = "already_exists_as_wrong_kind"
    IO_ERROR = "io_error"


class ScaffoldError(Exception):
    """Raised when a single manifest entry cannot be materialised."""

    def __init__(self, kind: ScaffoldErrorKind, path: str, message: str = "") -> None:
        self.kind = kind
        self.path = path
        self.message = message or kind.value.replace("_", " ")
        super().__init__(f"{path}: {self.message}")


_ERRNO_KINDS: dict[int, ScaffoldErrorKind] = {
    errno.EACCES: ScaffoldErrorKind.PERMISSION_DENIED,
    errno.EPERM: ScaffoldErrorKind.PERMISSION_DENIED,
    errno.EROFS: ScaffoldErrorKind.PERMISSION_DENIED,
    errno.ENOSPC: ScaffoldErrorKind.NO_SPACE_LEFT,
    errno.ENOTDIR: ScaffoldErrorKind.PARENT_IS_NOT_A_DIRECTORY,
    errno.EEXIST: ScaffoldErrorKind.ALREADY_EXISTS_AS_WRONG_KIND,
    errno.EISDIR: ScaffoldErrorKind.ALREADY_EXISTS_AS_WRONG_KIND,
    errno.ENAMETOOLONG: ScaffoldErrorKind.INVALID_PATH,
    errno.EINVAL: ScaffoldErrorKind.INVALID_PATH,
}

if hasattr(errno, "EDQUOT"):
    _ERRNO_KINDS[errno.EDQUOT] = ScaffoldErrorKind.NO_SPACE_LEFT


def classify_os_error(exc: OSError) -> ScaffoldErrorKind:
    """Map an ``OSError`` to the closest ``ScaffoldErrorKind``."""
    if isinstance(exc, PermissionError):
        return ScaffoldErrorKind.PERMISSION_DENIED
    if isinstance(exc, NotADirectoryError):
        return ScaffoldErrorKind.PARENT_IS_NOT_A_DIRECTORY
    if isinstance(exc, (FileExistsError, IsADirectoryError)):
        return ScaffoldErrorKind.ALREADY_EXISTS_AS_WRONG_KIND
    if exc.errno is not None:
        return _ERRNO_KINDS.get(exc.errno, ScaffoldErrorKind.IO_ERROR)
    return ScaffoldErrorKind.IO_ERROR


def from_os_error(exc: OSError, path: str) -> ScaffoldError:
    """Wrap *exc* as a ``ScaffoldError`` for manifest *path*."""
    return ScaffoldError(classify_os_error(exc), path, exc.strerror or str(exc))
