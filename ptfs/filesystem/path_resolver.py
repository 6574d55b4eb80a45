"""
Path Resolver Module

Lexical path manipulation for the in-memory filesystem. Symlinks are not
consulted here; MemFileSystem resolves them while walking the inode tree.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List

SEPARATOR = '/'
LIST_SEPARATOR = ':'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return SEPARATOR + SEPARATOR.join(self.components)
        return SEPARATOR.join(self.components) if self.components else '.'


class PathResolver:
    """
    Resolves and manipulates filesystem paths.

    Handles:
    - Absolute and relative paths
    - . and .. components
    - Path normalization
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components
        """
        is_absolute = path.startswith(SEPARATOR)

        # Split and filter empty components
        components = [c for c in path.split(SEPARATOR) if c and c != '.']

        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalize a path by resolving . and ..

        A leading .. in a relative path is kept; at the root it is dropped.

        Args:
            path: Path to normalize

        Returns:
            Normalized path string
        """
        parsed = PathResolver.parse(path)

        result: List[str] = []

        for component in parsed.components:
            if component == '..':
                if result and result[-1] != '..':
                    result.pop()
                elif not parsed.is_absolute:
                    result.append(component)
            else:
                result.append(component)

        return str(ParsedPath(parsed.is_absolute, result))

    @staticmethod
    def join(*paths: str) -> str:
        """
        Join multiple path components.

        An absolute component discards everything before it.

        Args:
            *paths: Path components to join

        Returns:
            Joined path string
        """
        if not paths:
            return '.'

        result = paths[0]

        for path in paths[1:]:
            if not path:
                continue
            if path.startswith(SEPARATOR):
                result = path
            else:
                result = result.rstrip(SEPARATOR) + SEPARATOR + path

        return PathResolver.normalize(result)

    @staticmethod
    def resolve(path: str, cwd: str = SEPARATOR) -> str:
        """
        Resolve a path relative to a current working directory.

        Args:
            path: Path to resolve
            cwd: Current working directory (absolute)

        Returns:
            Absolute resolved path
        """
        if PathResolver.is_absolute(path):
            return PathResolver.normalize(path)

        return PathResolver.normalize(cwd.rstrip(SEPARATOR) + SEPARATOR + path)

    @staticmethod
    def components(path: str) -> List[str]:
        """Components of an absolute, normalized path; [] for the root."""
        return PathResolver.parse(path).components

    @staticmethod
    def basename(path: str) -> str:
        """
        Get the base name of a path.

        Args:
            path: Path string

        Returns:
            Base name portion ("/" for the root)
        """
        normalized = PathResolver.normalize(path)

        if normalized == SEPARATOR:
            return SEPARATOR

        if SEPARATOR not in normalized:
            return normalized

        return normalized.rsplit(SEPARATOR, 1)[1]

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith(SEPARATOR)

    @staticmethod
    def is_within(path: str, ancestor: str) -> bool:
        """Check if normalized absolute path equals or lies under ancestor."""
        if ancestor == SEPARATOR:
            return True
        return path == ancestor or path.startswith(ancestor + SEPARATOR)
