"""
Pass-Through Wrappers

Delegating wrappers, one per capability surface. Each holds exactly one
backend reference and forwards every call to it with the same arguments,
returning the backend's result (or letting the backend's exception
propagate) unchanged.

The wrapper's only effect is identity: code holding a wrapped filesystem
sees a PassthroughFileSystem, not the backend's class, and ``isinstance``
checks against the backend's class fail. The backend can be recovered
one layer at a time with the unwrap functions in ``ptfs.passthrough.utils``.

Author: YSNRFD
Version: 1.0.0
"""

from ptfs.exceptions import InvalidArgumentError
from ptfs.interfaces import File, FileInfo, Filer, FileSystem, SymlinkFileSystem
from ptfs.logger import get_logger

_logger = get_logger('passthrough')


class PassthroughFiler:
    """
    Pass-through wrapper for a Filer.

    Example:
        >>> filer = PassthroughFiler(MemFileSystem())
        >>> filer.mkdir('/data', 0o755)
    """

    __slots__ = ('__fs',)

    _surface = Filer

    def __init__(self, fs: Filer):
        if fs is None:
            raise InvalidArgumentError("backend filesystem is None")
        if not isinstance(fs, self._surface):
            raise InvalidArgumentError(
                f"backend does not implement {self._surface.__name__}",
                context={'surface': self._surface.__name__}
            )
        self.__fs = fs

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def open_file(self, path: str, flags: int, mode: int) -> File:
        return self.__fs.open_file(path, flags, mode)

    def mkdir(self, path: str, mode: int) -> None:
        return self.__fs.mkdir(path, mode)

    def remove(self, path: str) -> None:
        return self.__fs.remove(path)

    def rename(self, oldpath: str, newpath: str) -> None:
        return self.__fs.rename(oldpath, newpath)

    def stat(self, path: str) -> FileInfo:
        return self.__fs.stat(path)

    def chmod(self, path: str, mode: int) -> None:
        return self.__fs.chmod(path, mode)

    def chtimes(self, path: str, atime: float, mtime: float) -> None:
        return self.__fs.chtimes(path, atime, mtime)

    def chown(self, path: str, uid: int, gid: int) -> None:
        return self.__fs.chown(path, uid, gid)


def _backend(wrapper: PassthroughFiler) -> Filer:
    """The backend held by a wrapper. Read only by forwarding and unwrap."""
    return wrapper._PassthroughFiler__fs


class PassthroughFileSystem(PassthroughFiler):
    """Pass-through wrapper for a FileSystem."""

    __slots__ = ()

    _surface = FileSystem

    def separator(self) -> str:
        return _backend(self).separator()

    def list_separator(self) -> str:
        return _backend(self).list_separator()

    def chdir(self, path: str) -> None:
        return _backend(self).chdir(path)

    def getwd(self) -> str:
        return _backend(self).getwd()

    def temp_dir(self) -> str:
        return _backend(self).temp_dir()

    def open(self, path: str) -> File:
        return _backend(self).open(path)

    def create(self, path: str) -> File:
        return _backend(self).create(path)

    def mkdir_all(self, path: str, mode: int) -> None:
        return _backend(self).mkdir_all(path, mode)

    def remove_all(self, path: str) -> None:
        return _backend(self).remove_all(path)

    def truncate(self, path: str, size: int) -> None:
        return _backend(self).truncate(path, size)


class PassthroughSymlinkFileSystem(PassthroughFileSystem):
    """Pass-through wrapper for a SymlinkFileSystem."""

    __slots__ = ()

    _surface = SymlinkFileSystem

    def lstat(self, path: str) -> FileInfo:
        return _backend(self).lstat(path)

    def lchown(self, path: str, uid: int, gid: int) -> None:
        return _backend(self).lchown(path, uid, gid)

    def readlink(self, path: str) -> str:
        return _backend(self).readlink(path)

    def symlink(self, oldname: str, newname: str) -> None:
        return _backend(self).symlink(oldname, newname)


def new_filer(fs: Filer) -> PassthroughFiler:
    """
    Wrap a Filer.

    Raises:
        InvalidArgumentError: If fs is None or lacks the Filer surface
    """
    filer = PassthroughFiler(fs)
    _logger.debug("Wrapped backend", context={'surface': 'Filer'})
    return filer


def new_fs(fs: FileSystem) -> PassthroughFileSystem:
    """
    Wrap a FileSystem.

    Raises:
        InvalidArgumentError: If fs is None or lacks the FileSystem surface
    """
    wrapped = PassthroughFileSystem(fs)
    _logger.debug("Wrapped backend", context={'surface': 'FileSystem'})
    return wrapped


def new_symlink_fs(fs: SymlinkFileSystem) -> PassthroughSymlinkFileSystem:
    """
    Wrap a SymlinkFileSystem.

    Raises:
        InvalidArgumentError: If fs is None or lacks the SymlinkFileSystem surface
    """
    wrapped = PassthroughSymlinkFileSystem(fs)
    _logger.debug("Wrapped backend", context={'surface': 'SymlinkFileSystem'})
    return wrapped
