"""
In-Memory File System Module

Reference backend implementing the full SymlinkFileSystem capability:
- Hierarchical directory tree on an inode table
- Per-instance working directory
- Symlinks with transitive resolution and loop detection
- Ownership, permission bits and timestamps

Author: YSNRFD
Version: 1.0.0
"""

import threading
from dataclasses import dataclass, replace
from typing import Optional, Any, List

from .file import MemFile
from .inode import Inode, FileType
from .path_resolver import PathResolver, SEPARATOR, LIST_SEPARATOR
from ptfs.core.config_loader import MemFSConfig, get_config
from ptfs.interfaces import FileInfo
from ptfs.interfaces.flags import (
    O_RDONLY,
    O_RDWR,
    O_CREAT,
    O_EXCL,
    O_TRUNC,
    describe,
    is_writable,
)
from ptfs.exceptions import (
    NotFoundError,
    AlreadyExistsError,
    PermissionDeniedError,
    DirectoryNotEmptyError,
    IsADirectoryError,
    NotADirectoryError,
    NotASymlinkError,
    NotSupportedError,
    InvalidArgumentError,
    TooManySymlinksError,
)
from ptfs.logger import get_logger

ROOT_INO = 1


@dataclass
class _Lookup:
    """Result of walking a path through the inode tree."""
    query: str  # Queried path, absolute and normalized
    path: str  # Path actually reached after following symlinks
    parent: Optional[Inode]  # Directory holding the final entry (None for root)
    name: str  # Final entry name within parent
    inode: Optional[Inode]  # None when only the final entry is missing


class MemFileSystem:
    """
    In-memory SymlinkFileSystem.

    A new instance holds only the root directory, and its working
    directory is the root. All operations are serialized by one
    reentrant lock, shared with the handles the instance returns.

    Example:
        >>> fs = MemFileSystem()
        >>> with fs.create('/hello.txt') as f:
        ...     f.write_string('Hello, World!')
        >>> fs.stat('/hello.txt').size
        13
    """

    def __init__(self, config: Optional[MemFSConfig] = None):
        self._config = replace(config or get_config().memfs)
        self._logger = get_logger('memfs')
        self._lock = threading.RLock()
        self._inodes: dict[int, Inode] = {}
        self._next_ino = ROOT_INO + 1
        self._cwd = SEPARATOR

        root = Inode(
            ino=ROOT_INO,
            file_type=FileType.DIRECTORY,
            mode=self._config.default_dir_mode,
            uid=self._config.default_uid,
            gid=self._config.default_gid
        )
        self._inodes[ROOT_INO] = root
        self._root = root

        self._logger.debug(
            "Initialized in-memory filesystem",
            context={'max_symlink_depth': self._config.max_symlink_depth}
        )

    @property
    def config(self) -> MemFSConfig:
        return self._config

    # Internal helpers

    def _generate_ino(self) -> int:
        ino = self._next_ino
        self._next_ino += 1
        return ino

    def _absolute(self, path: str) -> str:
        if not path:
            raise InvalidArgumentError("empty path")
        if '\x00' in path:
            raise InvalidArgumentError("path contains NUL byte", path=path)
        return PathResolver.resolve(path, self._cwd)

    def _lookup(self, path: str, follow: bool = True) -> _Lookup:
        """
        Walk path from the root.

        Symlinks in non-final components are always followed; a final
        symlink only when follow is true.

        Raises:
            NotFoundError: A non-final component is missing
            NotADirectoryError: A non-final component is not a directory
            TooManySymlinksError: More than max_symlink_depth links followed
        """
        query = self._absolute(path)
        pending = PathResolver.components(query)
        if not pending:
            return _Lookup(query, SEPARATOR, None, SEPARATOR, self._root)

        current = self._root
        current_path = SEPARATOR
        hops = 0

        while True:
            name = pending.pop(0)
            if not current.is_directory:
                raise NotADirectoryError(path, context={'component': current_path})

            child_ino = current.get_entry(name)
            child = self._inodes.get(child_ino) if child_ino is not None else None
            child_path = PathResolver.join(current_path, name)

            if child is None:
                if pending:
                    raise NotFoundError(path, context={'component': child_path})
                return _Lookup(query, child_path, current, name, None)

            if child.is_symlink and (pending or follow):
                hops += 1
                if hops > self._config.max_symlink_depth:
                    raise TooManySymlinksError(path, limit=self._config.max_symlink_depth)
                pending = PathResolver.components(
                    PathResolver.join(current_path, child.target, *pending)
                )
                current, current_path = self._root, SEPARATOR
                if not pending:
                    return _Lookup(query, SEPARATOR, None, SEPARATOR, self._root)
                continue

            if not pending:
                return _Lookup(query, child_path, current, name, child)

            current, current_path = child, child_path

    def _require(self, path: str, follow: bool = True) -> _Lookup:
        """Like _lookup, but the final entry must exist."""
        found = self._lookup(path, follow)
        if found.inode is None:
            raise NotFoundError(path)
        return found

    def _new_inode(self, file_type: FileType, mode: int, target: str = '') -> Inode:
        inode = Inode(
            ino=self._generate_ino(),
            file_type=file_type,
            mode=mode & 0o7777,
            uid=self._config.default_uid,
            gid=self._config.default_gid,
            target=target
        )
        self._inodes[inode.ino] = inode
        return inode

    def _drop(self, inode: Inode) -> None:
        """Forget an inode and everything below it."""
        for _, child_ino in inode.list_entries():
            child = self._inodes.get(child_ino)
            if child is not None:
                self._drop(child)
        self._inodes.pop(inode.ino, None)

    def _dir_infos(self, directory: Inode) -> List[FileInfo]:
        return [
            self._inodes[ino].to_file_info(name)
            for name, ino in directory.list_entries()
        ]

    def _check_ownership(self, path: str, operation: str) -> None:
        if not self._config.support_ownership:
            raise NotSupportedError(path, operation=operation)

    # Filer

    def open_file(self, path: str, flags: int, mode: int) -> MemFile:
        """
        Open a file.

        Args:
            path: Path to open
            flags: os.O_* access mode combined with O_CREAT, O_EXCL,
                O_TRUNC and O_APPEND
            mode: Permission bits for a newly created file

        Returns:
            Open file handle
        """
        with self._lock:
            exclusive = bool(flags & O_CREAT and flags & O_EXCL)
            found = self._lookup(path, follow=not exclusive)
            inode = found.inode

            if inode is None:
                if not flags & O_CREAT:
                    raise NotFoundError(path)
                inode = self._new_inode(FileType.REGULAR, mode)
                found.parent.add_entry(found.name, inode.ino)
                self._logger.debug(
                    "Created file",
                    context={'path': found.path, 'ino': inode.ino, 'mode': oct(mode)}
                )
            else:
                if exclusive:
                    raise AlreadyExistsError(path)
                if inode.is_directory and is_writable(flags):
                    raise IsADirectoryError(path, operation="open")
                if flags & O_TRUNC and is_writable(flags) and inode.is_regular_file:
                    inode.truncate(0)

            entries = self._dir_infos(inode) if inode.is_directory else None

            self._logger.debug(
                "Opened file",
                context={'path': found.path, 'flags': describe(flags)}
            )
            return MemFile(path, inode, flags, self._lock, entries)

    def mkdir(self, path: str, mode: int) -> None:
        """
        Create a new directory.

        Raises:
            AlreadyExistsError: If path exists (as anything, including a symlink)
            NotFoundError: If the parent does not exist
        """
        with self._lock:
            found = self._lookup(path, follow=False)
            if found.inode is not None:
                raise AlreadyExistsError(path)

            inode = self._new_inode(FileType.DIRECTORY, mode)
            found.parent.add_entry(found.name, inode.ino)

            self._logger.debug(
                "Created directory",
                context={'path': found.path, 'ino': inode.ino}
            )

    def remove(self, path: str) -> None:
        """
        Delete a file, symlink or empty directory.

        A final symlink is removed itself, not its target.
        """
        with self._lock:
            found = self._require(path, follow=False)

            if found.parent is None:
                raise PermissionDeniedError(path, operation="remove")

            if found.inode.is_directory and not found.inode.is_empty():
                raise DirectoryNotEmptyError(path)

            found.parent.remove_entry(found.name)
            self._drop(found.inode)

            self._logger.debug("Removed", context={'path': found.path})

    def rename(self, oldpath: str, newpath: str) -> None:
        """
        Move oldpath to newpath.

        An existing file at newpath is replaced when rename_overwrite is
        set, otherwise AlreadyExistsError is raised. A directory can only
        replace an empty directory.
        """
        with self._lock:
            src = self._require(oldpath, follow=False)
            dst = self._lookup(newpath, follow=False)

            if src.parent is None:
                raise PermissionDeniedError(oldpath, operation="rename")

            if dst.inode is src.inode:
                return

            if src.inode.is_directory and PathResolver.is_within(dst.path, src.path):
                raise InvalidArgumentError(
                    "cannot move a directory into itself",
                    path=newpath,
                    context={'source': oldpath}
                )

            if dst.inode is not None:
                if dst.parent is None:
                    raise PermissionDeniedError(newpath, operation="rename")
                if not self._config.rename_overwrite:
                    raise AlreadyExistsError(newpath)
                if dst.inode.is_directory:
                    if not src.inode.is_directory:
                        raise IsADirectoryError(newpath, operation="rename")
                    if not dst.inode.is_empty():
                        raise DirectoryNotEmptyError(newpath)
                elif src.inode.is_directory:
                    raise NotADirectoryError(newpath)

                dst.parent.remove_entry(dst.name)
                self._drop(dst.inode)

            src.parent.remove_entry(src.name)
            dst.parent.add_entry(dst.name, src.inode.ino)

            self._logger.debug(
                "Renamed",
                context={'from': src.path, 'to': dst.path}
            )

    def stat(self, path: str) -> FileInfo:
        """
        Describe path, following symlinks.

        The returned name is the final component of path, not of the
        symlink target.
        """
        with self._lock:
            found = self._require(path)
            return found.inode.to_file_info(PathResolver.basename(found.query))

    def chmod(self, path: str, mode: int) -> None:
        with self._lock:
            self._require(path).inode.chmod(mode)

    def chtimes(self, path: str, atime: float, mtime: float) -> None:
        with self._lock:
            self._require(path).inode.set_times(atime, mtime)

    def chown(self, path: str, uid: int, gid: int) -> None:
        """
        Change owner and group, following symlinks.

        Raises:
            NotSupportedError: If support_ownership is disabled
        """
        with self._lock:
            found = self._require(path)
            self._check_ownership(path, "chown")
            found.inode.chown(uid, gid)

    # FileSystem

    def separator(self) -> str:
        return SEPARATOR

    def list_separator(self) -> str:
        return LIST_SEPARATOR

    def chdir(self, path: str) -> None:
        with self._lock:
            found = self._require(path)
            if not found.inode.is_directory:
                raise NotADirectoryError(path)
            self._cwd = found.query
            self._logger.debug("Changed directory", context={'cwd': self._cwd})

    def getwd(self) -> str:
        with self._lock:
            return self._cwd

    def temp_dir(self) -> str:
        return self._config.temp_dir

    def open(self, path: str) -> MemFile:
        """Open path read-only."""
        return self.open_file(path, O_RDONLY, 0)

    def create(self, path: str) -> MemFile:
        """Open path read-write, creating it or truncating it."""
        return self.open_file(path, O_RDWR | O_CREAT | O_TRUNC, self._config.default_file_mode)

    def mkdir_all(self, path: str, mode: int) -> None:
        """
        Create path and every missing ancestor.

        Existing directories (or symlinks to directories) along the way
        are accepted; any other existing node raises NotADirectoryError.

        Raises:
            AlreadyExistsError: A component is a dangling symlink
            NotADirectoryError: A component exists but is not a directory
        """
        with self._lock:
            current = SEPARATOR
            for component in PathResolver.components(self._absolute(path)):
                current = PathResolver.join(current, component)
                found = self._lookup(current)
                if found.inode is None:
                    if self._lookup(current, follow=False).inode is not None:
                        raise AlreadyExistsError(current, context={'reason': 'dangling symlink'})
                    inode = self._new_inode(FileType.DIRECTORY, mode)
                    found.parent.add_entry(found.name, inode.ino)
                    self._logger.debug(
                        "Created directory",
                        context={'path': found.path, 'ino': inode.ino}
                    )
                elif not found.inode.is_directory:
                    raise NotADirectoryError(current)

    def remove_all(self, path: str) -> None:
        """Delete path and everything below it; a missing path is not an error."""
        with self._lock:
            try:
                found = self._lookup(path, follow=False)
            except NotFoundError:
                return

            if found.inode is None:
                return

            if found.parent is None:
                raise PermissionDeniedError(path, operation="remove_all")

            found.parent.remove_entry(found.name)
            self._drop(found.inode)

            self._logger.debug("Removed tree", context={'path': found.path})

    def truncate(self, path: str, size: int) -> None:
        with self._lock:
            if size < 0:
                raise InvalidArgumentError("negative size", path=path)
            found = self._require(path)
            if found.inode.is_directory:
                raise IsADirectoryError(path, operation="truncate")
            found.inode.truncate(size)

    # SymlinkFileSystem

    def lstat(self, path: str) -> FileInfo:
        """Describe path without following a final symlink."""
        with self._lock:
            found = self._require(path, follow=False)
            return found.inode.to_file_info(PathResolver.basename(found.query))

    def lchown(self, path: str, uid: int, gid: int) -> None:
        with self._lock:
            found = self._require(path, follow=False)
            self._check_ownership(path, "lchown")
            found.inode.chown(uid, gid)

    def readlink(self, path: str) -> str:
        with self._lock:
            found = self._require(path, follow=False)
            if not found.inode.is_symlink:
                raise NotASymlinkError(path)
            return found.inode.target

    def symlink(self, oldname: str, newname: str) -> None:
        """
        Create newname as a symlink to oldname.

        The target is stored verbatim and need not exist.
        """
        with self._lock:
            if not oldname:
                raise InvalidArgumentError("empty symlink target", path=newname)

            found = self._lookup(newname, follow=False)
            if found.inode is not None:
                raise AlreadyExistsError(newname)

            inode = self._new_inode(FileType.SYMLINK, 0o777, target=oldname)
            found.parent.add_entry(found.name, inode.ino)

            self._logger.debug(
                "Created symlink",
                context={'path': found.path, 'target': oldname}
            )

    def get_stats(self) -> dict[str, Any]:
        """Get filesystem statistics."""
        with self._lock:
            counts = {file_type.name.lower(): 0 for file_type in FileType}
            for inode in self._inodes.values():
                counts[inode.file_type.name.lower()] += 1
            return {
                'total_inodes': len(self._inodes),
                'total_size': sum(inode.size for inode in self._inodes.values()
                                  if inode.is_regular_file),
                **counts,
            }
