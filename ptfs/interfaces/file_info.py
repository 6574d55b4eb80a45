"""
FileInfo Module

Describes a filesystem node as returned by stat, lstat and readdir.

Author: YSNRFD
Version: 1.0.0
"""

import stat as stat_bits
from dataclasses import dataclass


@dataclass(frozen=True)
class FileInfo:
    """
    Metadata snapshot of a file, directory or symlink.

    Attributes:
        name: Final component of the queried path ("/" for the root)
        size: Length in bytes (regular files; symlinks report their
            target length, directories report 0)
        mode: Permission bits combined with a ``stat.S_IF*`` type bit
        mtime: Modification time, seconds since the epoch
        atime: Access time, seconds since the epoch
        uid: Owner user ID
        gid: Owner group ID
    """

    name: str
    size: int
    mode: int
    mtime: float
    atime: float = 0.0
    uid: int = 0
    gid: int = 0

    def is_dir(self) -> bool:
        return stat_bits.S_ISDIR(self.mode)

    def is_symlink(self) -> bool:
        return stat_bits.S_ISLNK(self.mode)

    def is_regular(self) -> bool:
        return stat_bits.S_ISREG(self.mode)

    def perm(self) -> int:
        """Permission bits only (including setuid, setgid and sticky)."""
        return stat_bits.S_IMODE(self.mode)

    def mode_type(self) -> int:
        """Type bits only."""
        return stat_bits.S_IFMT(self.mode)

    def __str__(self) -> str:
        return f"{stat_bits.filemode(self.mode)} {self.size:>8d} {self.name}"
