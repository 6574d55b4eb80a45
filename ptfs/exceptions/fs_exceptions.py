"""
Filesystem Exceptions

Exceptions raised by filesystem backends and surfaced unchanged through
every pass-through layer. Each class corresponds to one error kind of the
capability contract and carries the matching POSIX errno.

Author: YSNRFD
Version: 1.0.0
"""

import errno as errno_codes
from typing import Optional, Any


class FileSystemException(Exception):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        errno: POSIX errno equivalent
        context: Additional context about the error
    """

    default_errno = errno_codes.EIO

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.errno = self.default_errno
        self.context = dict(context or {})
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class NotFoundError(FileSystemException):
    """
    The path, or one of its components, does not exist.

    Also raised by stat() when a symlink chain ends at a missing target.

    Example:
        >>> raise NotFoundError("/path/to/file")
    """

    default_errno = errno_codes.ENOENT

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"No such file or directory: {path}",
            path=path,
            error_code=4001,
            context=context
        )


class AlreadyExistsError(FileSystemException):
    """
    The path already exists and the operation requires it not to.

    Example:
        >>> raise AlreadyExistsError("/path/to/file")
    """

    default_errno = errno_codes.EEXIST

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File already exists: {path}",
            path=path,
            error_code=4002,
            context=context
        )


class PermissionDeniedError(FileSystemException):
    """
    Permission denied for the operation.

    Raised when the backend refuses an operation, for example removing
    the root directory or writing through a read-only handle.

    Example:
        >>> raise PermissionDeniedError("/", operation="remove")
    """

    default_errno = errno_codes.EACCES

    def __init__(
        self,
        path: str,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Permission denied: {path}",
            path=path,
            error_code=4003,
            context=ctx
        )
        self.operation = operation


class DirectoryNotEmptyError(FileSystemException):
    """
    Directory is not empty.

    Raised when a non-recursive removal targets a directory that still
    contains entries.

    Example:
        >>> raise DirectoryNotEmptyError("/path/to/dir")
    """

    default_errno = errno_codes.ENOTEMPTY

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Directory not empty: {path}",
            path=path,
            error_code=4004,
            context=context
        )


class IsADirectoryError(FileSystemException):
    """
    Path is a directory but the operation needs a non-directory.

    Example:
        >>> raise IsADirectoryError("/path/to/directory")
    """

    default_errno = errno_codes.EISDIR

    def __init__(
        self,
        path: str,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Is a directory: {path}",
            path=path,
            error_code=4008,
            context=ctx
        )
        self.operation = operation


class NotADirectoryError(FileSystemException):
    """
    Path is not a directory.

    This exception is raised when a directory operation is attempted
    on a path that is not a directory, or when a non-final path
    component names a regular file.

    Example:
        >>> raise NotADirectoryError("/path/to/file")
    """

    default_errno = errno_codes.ENOTDIR

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=context
        )


class NotASymlinkError(FileSystemException):
    """
    A symlink-only operation was applied to a node that is not a symlink.

    Example:
        >>> raise NotASymlinkError("/etc/hosts")
    """

    default_errno = errno_codes.EINVAL

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a symbolic link: {path}",
            path=path,
            error_code=4010,
            context=context
        )


class NotSupportedError(FileSystemException):
    """
    The backend does not implement an optional capability.

    Example:
        >>> raise NotSupportedError("/file", operation="chown")
    """

    default_errno = errno_codes.ENOTSUP

    def __init__(
        self,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Operation not supported: {operation or 'unknown'}",
            path=path,
            error_code=4011,
            context=ctx
        )
        self.operation = operation


class InvalidArgumentError(FileSystemException):
    """
    Malformed input, such as an empty path or a negative size.

    Example:
        >>> raise InvalidArgumentError("empty path")
    """

    default_errno = errno_codes.EINVAL

    def __init__(
        self,
        message: str = "Invalid argument",
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            path=path,
            error_code=4012,
            context=context
        )


class TooManySymlinksError(FileSystemException):
    """
    Symlink resolution exceeded the maximum chain length.

    Raised for symlink cycles and for chains longer than the backend's
    configured limit.

    Example:
        >>> raise TooManySymlinksError("/loop", limit=40)
    """

    default_errno = errno_codes.ELOOP

    def __init__(
        self,
        path: str,
        limit: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if limit is not None:
            ctx["limit"] = limit
        super().__init__(
            message=f"Too many levels of symbolic links: {path}",
            path=path,
            error_code=4013,
            context=ctx
        )
        self.limit = limit


class FileClosedError(FileSystemException):
    """
    An operation was attempted on a file handle that has been closed.

    Example:
        >>> raise FileClosedError("/tmp/test.txt")
    """

    default_errno = errno_codes.EBADF

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File already closed: {path}",
            path=path,
            error_code=4014,
            context=context
        )
