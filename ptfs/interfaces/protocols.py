"""
Filesystem Capability Protocols

Defines the capability surfaces every storage backend implements:

    File               - an open file handle
    Filer              - low-level path operations
    FileSystem         - Filer plus working directory and conveniences
    SymlinkFileSystem  - FileSystem plus symlink-aware operations

The surfaces are structural. A backend satisfies FileSystem by having the
methods, not by inheriting from anything, and ``isinstance`` checks against
these protocols look only at method presence.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Protocol, List, runtime_checkable

from .file_info import FileInfo


@runtime_checkable
class File(Protocol):
    """
    An open file handle.

    A handle is bound to one path at open time and owns a cursor. Every
    method raises FileClosedError once close() has been called.
    """

    def name(self) -> str:
        """Path the handle was opened with."""
        ...

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes from the cursor; b'' at end of file."""
        ...

    def read_at(self, size: int, offset: int) -> bytes:
        """Read up to size bytes at offset without moving the cursor."""
        ...

    def write(self, data: bytes) -> int:
        """Write at the cursor (or at end of file in append mode)."""
        ...

    def write_at(self, data: bytes, offset: int) -> int:
        """Write at offset without moving the cursor."""
        ...

    def write_string(self, s: str) -> int:
        """Write the UTF-8 encoding of s; returns bytes written."""
        ...

    def seek(self, offset: int, whence: int = 0) -> int:
        """Move the cursor; whence is os.SEEK_SET, SEEK_CUR or SEEK_END."""
        ...

    def truncate(self, size: int) -> None:
        ...

    def sync(self) -> None:
        ...

    def stat(self) -> FileInfo:
        ...

    def readdir(self, n: int = -1) -> List[FileInfo]:
        """
        Read directory entries.

        With n <= 0 all remaining entries are returned. With n > 0 at most
        n entries are returned, and an empty list once exhausted.
        """
        ...

    def readdirnames(self, n: int = -1) -> List[str]:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class Filer(Protocol):
    """Low-level path operations."""

    def open_file(self, path: str, flags: int, mode: int) -> File:
        """
        Open path with os.O_* flags, creating it with mode if O_CREAT.

        Raises:
            NotFoundError: path is absent and O_CREAT was not given
            AlreadyExistsError: O_CREAT|O_EXCL and path exists
            IsADirectoryError: path is a directory and write access requested
        """
        ...

    def mkdir(self, path: str, mode: int) -> None:
        """Create exactly one directory level."""
        ...

    def remove(self, path: str) -> None:
        """Delete a file, symlink or empty directory."""
        ...

    def rename(self, oldpath: str, newpath: str) -> None:
        ...

    def stat(self, path: str) -> FileInfo:
        """Describe path, following symlinks transitively."""
        ...

    def chmod(self, path: str, mode: int) -> None:
        ...

    def chtimes(self, path: str, atime: float, mtime: float) -> None:
        ...

    def chown(self, path: str, uid: int, gid: int) -> None:
        """Change ownership, or raise NotSupportedError."""
        ...


@runtime_checkable
class FileSystem(Filer, Protocol):
    """Filer plus working-directory state and convenience operations."""

    def separator(self) -> str:
        ...

    def list_separator(self) -> str:
        ...

    def chdir(self, path: str) -> None:
        ...

    def getwd(self) -> str:
        ...

    def temp_dir(self) -> str:
        ...

    def open(self, path: str) -> File:
        """Open read-only."""
        ...

    def create(self, path: str) -> File:
        """Open read-write, creating or truncating."""
        ...

    def mkdir_all(self, path: str, mode: int) -> None:
        ...

    def remove_all(self, path: str) -> None:
        ...

    def truncate(self, path: str, size: int) -> None:
        ...


@runtime_checkable
class SymlinkFileSystem(FileSystem, Protocol):
    """FileSystem plus operations that do not follow a final symlink."""

    def lstat(self, path: str) -> FileInfo:
        ...

    def lchown(self, path: str, uid: int, gid: int) -> None:
        ...

    def readlink(self, path: str) -> str:
        ...

    def symlink(self, oldname: str, newname: str) -> None:
        """Create newname as a symlink pointing at oldname."""
        ...
