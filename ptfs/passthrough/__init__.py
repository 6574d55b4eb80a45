"""
ptfs Pass-Through Module

Delegating wrappers that hide a backend's concrete type:
- PassthroughFiler, PassthroughFileSystem, PassthroughSymlinkFileSystem
- new_filer, new_fs, new_symlink_fs constructors
- unwrap_filer, unwrap_fs, unwrap_symlink_fs
"""

from .wrappers import (
    PassthroughFiler,
    PassthroughFileSystem,
    PassthroughSymlinkFileSystem,
    new_filer,
    new_fs,
    new_symlink_fs,
)
from .utils import unwrap_filer, unwrap_fs, unwrap_symlink_fs

__all__ = [
    # Wrappers
    'PassthroughFiler',
    'PassthroughFileSystem',
    'PassthroughSymlinkFileSystem',
    'new_filer',
    'new_fs',
    'new_symlink_fs',
    # Unwrap
    'unwrap_filer',
    'unwrap_fs',
    'unwrap_symlink_fs',
]
