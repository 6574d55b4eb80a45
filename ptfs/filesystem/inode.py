"""
Inode Module

Implements the inode abstraction for the in-memory file system.
Inodes store the metadata and content of files, directories and symlinks.

Author: YSNRFD
Version: 1.0.0
"""

import stat as stat_bits
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List

from ptfs.interfaces import FileInfo


class FileType(Enum):
    """Types of files."""
    REGULAR = stat_bits.S_IFREG
    DIRECTORY = stat_bits.S_IFDIR
    SYMLINK = stat_bits.S_IFLNK


@dataclass
class Inode:
    """
    Inode - Index Node.

    Stores metadata about a file, directory or symlink:
    - Type and permissions
    - Owner and group
    - Size and timestamps
    - File content, directory entries or symlink target
    """

    ino: int  # Inode number
    file_type: FileType
    mode: int = 0o644  # Permission bits only
    uid: int = 0
    gid: int = 0

    # Timestamps
    atime: float = field(default_factory=time.time)  # Access time
    mtime: float = field(default_factory=time.time)  # Modification time
    ctime: float = field(default_factory=time.time)  # Change time

    # Symlink target
    target: str = ''

    _data: bytearray = field(default_factory=bytearray, repr=False)

    # For directories: mapping of name -> inode number
    _entries: dict[str, int] = field(default_factory=dict, repr=False)

    @property
    def is_directory(self) -> bool:
        return self.file_type == FileType.DIRECTORY

    @property
    def is_regular_file(self) -> bool:
        return self.file_type == FileType.REGULAR

    @property
    def is_symlink(self) -> bool:
        return self.file_type == FileType.SYMLINK

    @property
    def size(self) -> int:
        if self.is_regular_file:
            return len(self._data)
        if self.is_symlink:
            return len(self.target.encode('utf-8'))
        return 0

    @property
    def stat_mode(self) -> int:
        """Permission bits combined with the type bits."""
        return self.file_type.value | self.mode

    def to_file_info(self, name: str) -> FileInfo:
        """Snapshot this inode's metadata under the given name."""
        return FileInfo(
            name=name,
            size=self.size,
            mode=self.stat_mode,
            mtime=self.mtime,
            atime=self.atime,
            uid=self.uid,
            gid=self.gid,
        )

    def chmod(self, mode: int) -> None:
        """Change permission mode."""
        self.mode = stat_bits.S_IMODE(mode)
        self.ctime = time.time()

    def chown(self, uid: int, gid: int) -> None:
        """Change owner and group; -1 leaves an ID unchanged."""
        if uid != -1:
            self.uid = uid
        if gid != -1:
            self.gid = gid
        self.ctime = time.time()

    def set_times(self, atime: float, mtime: float) -> None:
        self.atime = atime
        self.mtime = mtime
        self.ctime = time.time()

    # File operations

    def read(self, offset: int = 0, size: int = -1) -> bytes:
        """
        Read data from the file.

        Args:
            offset: Byte offset to start reading
            size: Number of bytes to read (-1 for all)

        Returns:
            Data read from the file
        """
        self.atime = time.time()

        if size < 0:
            return bytes(self._data[offset:])
        return bytes(self._data[offset:offset + size])

    def write(self, data: bytes, offset: int = 0) -> int:
        """
        Write data to the file.

        Writing past the end pads the gap with zero bytes.

        Args:
            data: Data to write
            offset: Byte offset to write at

        Returns:
            Number of bytes written
        """
        if offset > len(self._data):
            self._data.extend(bytes(offset - len(self._data)))

        self._data[offset:offset + len(data)] = data

        self.mtime = time.time()
        self.ctime = self.mtime

        return len(data)

    def truncate(self, size: int) -> None:
        """Truncate or zero-extend the file to the given size."""
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(bytes(size - len(self._data)))
        self.mtime = time.time()
        self.ctime = self.mtime

    # Directory operations

    def add_entry(self, name: str, ino: int) -> None:
        """Add a directory entry."""
        if not self.is_directory:
            raise ValueError("Not a directory")

        self._entries[name] = ino
        self.mtime = time.time()

    def remove_entry(self, name: str) -> Optional[int]:
        """Remove a directory entry."""
        if not self.is_directory:
            raise ValueError("Not a directory")

        ino = self._entries.pop(name, None)
        if ino is not None:
            self.mtime = time.time()
        return ino

    def get_entry(self, name: str) -> Optional[int]:
        """Get the inode number for a directory entry."""
        if not self.is_directory:
            return None
        return self._entries.get(name)

    def list_entries(self) -> List[tuple[str, int]]:
        """List all directory entries, sorted by name."""
        if not self.is_directory:
            return []
        return sorted(self._entries.items())

    def is_empty(self) -> bool:
        return not self._entries
