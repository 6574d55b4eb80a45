"""
File Handle Module

Open file handles returned by MemFileSystem. A handle is bound to one
inode at open time; removing or renaming the path afterwards does not
affect it.

Author: YSNRFD
Version: 1.0.0
"""

import os
import threading
from typing import List, Optional

from .inode import Inode
from .path_resolver import PathResolver
from ptfs.interfaces import FileInfo
from ptfs.interfaces.flags import O_APPEND, is_readable, is_writable
from ptfs.exceptions import (
    FileClosedError,
    InvalidArgumentError,
    IsADirectoryError,
    NotADirectoryError,
    PermissionDeniedError,
)


class MemFile:
    """
    A handle to an open file or directory in a MemFileSystem.

    Example:
        >>> with fs.create('/tmp/test.txt') as f:
        ...     f.write(b'Hello, World!')
    """

    def __init__(
        self,
        name: str,
        inode: Inode,
        flags: int,
        lock: threading.RLock,
        dir_entries: Optional[List[FileInfo]] = None
    ):
        self._name = name
        self._inode = inode
        self._flags = flags
        self._lock = lock
        self._offset = 0
        self._closed = False
        self._dir_entries = dir_entries
        self._dir_offset = 0

    def __enter__(self) -> 'MemFile':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._closed:
            self.close()

    def __repr__(self) -> str:
        state = 'closed' if self._closed else f'offset={self._offset}'
        return f"MemFile({self._name!r}, {state})"

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise FileClosedError(self._name)

    def _check_readable(self) -> None:
        self._check_open()
        if self._inode.is_directory:
            raise IsADirectoryError(self._name, operation="read")
        if not is_readable(self._flags):
            raise PermissionDeniedError(self._name, operation="read")

    def _check_writable(self) -> None:
        self._check_open()
        if not is_writable(self._flags):
            raise PermissionDeniedError(self._name, operation="write")

    def name(self) -> str:
        return self._name

    def read(self, size: int = -1) -> bytes:
        """
        Read from the cursor.

        Args:
            size: Bytes to read (-1 for all remaining)

        Returns:
            Data read; b'' at end of file
        """
        with self._lock:
            self._check_readable()
            data = self._inode.read(self._offset, size)
            self._offset += len(data)
            return data

    def read_at(self, size: int, offset: int) -> bytes:
        with self._lock:
            self._check_readable()
            if offset < 0:
                raise InvalidArgumentError("negative offset", path=self._name)
            return self._inode.read(offset, size)

    def write(self, data: bytes) -> int:
        """
        Write at the cursor, or at end of file for O_APPEND handles.

        Returns:
            Number of bytes written
        """
        with self._lock:
            self._check_writable()
            if self._flags & O_APPEND:
                self._offset = self._inode.size
            written = self._inode.write(data, self._offset)
            self._offset += written
            return written

    def write_at(self, data: bytes, offset: int) -> int:
        with self._lock:
            self._check_writable()
            if offset < 0:
                raise InvalidArgumentError("negative offset", path=self._name)
            return self._inode.write(data, offset)

    def write_string(self, s: str) -> int:
        return self.write(s.encode('utf-8'))

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """
        Move the cursor.

        Args:
            offset: Offset
            whence: os.SEEK_SET, os.SEEK_CUR or os.SEEK_END

        Returns:
            New offset
        """
        with self._lock:
            self._check_open()

            if whence == os.SEEK_SET:
                position = offset
            elif whence == os.SEEK_CUR:
                position = self._offset + offset
            elif whence == os.SEEK_END:
                position = self._inode.size + offset
            else:
                raise InvalidArgumentError(f"invalid whence: {whence}", path=self._name)

            if position < 0:
                raise InvalidArgumentError("negative seek position", path=self._name)

            self._offset = position
            return position

    def truncate(self, size: int) -> None:
        with self._lock:
            self._check_writable()
            if self._inode.is_directory:
                raise IsADirectoryError(self._name, operation="truncate")
            if size < 0:
                raise InvalidArgumentError("negative size", path=self._name)
            self._inode.truncate(size)

    def sync(self) -> None:
        # Nothing is buffered.
        self._check_open()

    def stat(self) -> FileInfo:
        with self._lock:
            self._check_open()
            return self._inode.to_file_info(PathResolver.basename(self._name))

    def readdir(self, n: int = -1) -> List[FileInfo]:
        """
        Read directory entries.

        Args:
            n: Maximum number of entries; n <= 0 reads all remaining

        Returns:
            Entries sorted by name; empty once exhausted
        """
        with self._lock:
            self._check_open()
            if self._dir_entries is None:
                raise NotADirectoryError(self._name)

            remaining = self._dir_entries[self._dir_offset:]
            if n > 0:
                remaining = remaining[:n]
            self._dir_offset += len(remaining)
            return remaining

    def readdirnames(self, n: int = -1) -> List[str]:
        return [info.name for info in self.readdir(n)]

    def close(self) -> None:
        with self._lock:
            self._check_open()
            self._closed = True
            self._dir_entries = None
