"""
ptfs - Pass-Through File Systems

Abstract filesystem capability surfaces (Filer, FileSystem,
SymlinkFileSystem, File), an in-memory reference backend, and delegating
wrappers that present a backend under a distinct concrete type.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .interfaces import File, FileInfo, Filer, FileSystem, SymlinkFileSystem
from .filesystem import MemFileSystem
from .passthrough import (
    PassthroughFiler,
    PassthroughFileSystem,
    PassthroughSymlinkFileSystem,
    new_filer,
    new_fs,
    new_symlink_fs,
    unwrap_filer,
    unwrap_fs,
    unwrap_symlink_fs,
)

__all__ = [
    # Capability surfaces
    'File',
    'FileInfo',
    'Filer',
    'FileSystem',
    'SymlinkFileSystem',
    # Backend
    'MemFileSystem',
    # Pass-through
    'PassthroughFiler',
    'PassthroughFileSystem',
    'PassthroughSymlinkFileSystem',
    'new_filer',
    'new_fs',
    'new_symlink_fs',
    'unwrap_filer',
    'unwrap_fs',
    'unwrap_symlink_fs',
]
