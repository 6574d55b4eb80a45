"""
ptfs Capability Interfaces

The contracts shared by every backend and wrapper:
- File, Filer, FileSystem and SymlinkFileSystem protocols
- FileInfo metadata
- open flags
"""

from .file_info import FileInfo
from .flags import (
    O_RDONLY,
    O_WRONLY,
    O_RDWR,
    O_ACCMODE,
    O_CREAT,
    O_EXCL,
    O_TRUNC,
    O_APPEND,
)
from .protocols import File, Filer, FileSystem, SymlinkFileSystem

__all__ = [
    # Metadata
    'FileInfo',
    # Flags
    'O_RDONLY',
    'O_WRONLY',
    'O_RDWR',
    'O_ACCMODE',
    'O_CREAT',
    'O_EXCL',
    'O_TRUNC',
    'O_APPEND',
    # Protocols
    'File',
    'Filer',
    'FileSystem',
    'SymlinkFileSystem',
]
