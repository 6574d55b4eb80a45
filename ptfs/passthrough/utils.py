"""
Unwrap Utilities

Each function peels exactly one pass-through layer of its own surface.
Anything else, including a wrapper of a different surface, is returned
unmodified, so repeated calls walk down nested wrappers one at a time.
"""

from ptfs.interfaces import Filer, FileSystem, SymlinkFileSystem
from .wrappers import (
    PassthroughFiler,
    PassthroughFileSystem,
    PassthroughSymlinkFileSystem,
    _backend,
)


def unwrap_filer(fs: Filer) -> Filer:
    """Return the backend of a PassthroughFiler, otherwise fs itself."""
    if type(fs) is PassthroughFiler:
        return _backend(fs)
    return fs


def unwrap_fs(fs: FileSystem) -> FileSystem:
    """Return the backend of a PassthroughFileSystem, otherwise fs itself."""
    if type(fs) is PassthroughFileSystem:
        return _backend(fs)
    return fs


def unwrap_symlink_fs(fs: SymlinkFileSystem) -> SymlinkFileSystem:
    """
    Return the backend of a PassthroughSymlinkFileSystem, otherwise fs itself.

    Example:
        >>> mfs = MemFileSystem()
        >>> layer2 = new_symlink_fs(new_symlink_fs(mfs))
        >>> unwrap_symlink_fs(unwrap_symlink_fs(layer2)) is mfs
        True
    """
    if type(fs) is PassthroughSymlinkFileSystem:
        return _backend(fs)
    return fs
