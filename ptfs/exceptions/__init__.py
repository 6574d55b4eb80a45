"""
ptfs Exception Hierarchy

Every error kind of the filesystem capability contract has its own class.
Backends raise them; pass-through wrappers surface them unchanged.

Architecture:
    FileSystemException (Base)
    ├── NotFoundError
    ├── AlreadyExistsError
    ├── IsADirectoryError
    ├── NotADirectoryError
    ├── DirectoryNotEmptyError
    ├── NotASymlinkError
    ├── PermissionDeniedError
    ├── NotSupportedError
    ├── InvalidArgumentError
    ├── TooManySymlinksError
    └── FileClosedError
    ConfigurationError
    └── ConfigValidationError
"""

from .fs_exceptions import (
    FileSystemException,
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
    FileClosedError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigValidationError,
)

__all__ = [
    # Filesystem exceptions
    "FileSystemException",
    "NotFoundError",
    "AlreadyExistsError",
    "PermissionDeniedError",
    "DirectoryNotEmptyError",
    "IsADirectoryError",
    "NotADirectoryError",
    "NotASymlinkError",
    "NotSupportedError",
    "InvalidArgumentError",
    "TooManySymlinksError",
    "FileClosedError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigValidationError",
]
