"""
ptfs In-Memory File System Module

Reference backend implementing every capability surface:
- Hierarchical directory structure on inodes
- Symlinks, ownership and timestamps
- Open file handles with cursors
"""

from .inode import Inode, FileType
from .path_resolver import PathResolver, ParsedPath
from .file import MemFile
from .memfs import MemFileSystem

__all__ = [
    # Inode
    'Inode',
    'FileType',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    # Backend
    'MemFile',
    'MemFileSystem',
]
