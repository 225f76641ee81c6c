"""
File providers resolve a relative request path to a file on disk.

Providers are composable: a CompositeFileProvider asks each of its providers
in order and returns the first file that exists.
"""

import os

from werkzeug.security import safe_join


class FileInfo:
    """Result of resolving a path against a file provider."""

    def __init__(self, name, physical_path=None, exists=False, is_directory=False):
        self.name = name
        self.physical_path = physical_path
        self.exists = exists
        self.is_directory = is_directory

    def __repr__(self):
        return f'<FileInfo {self.name!r} exists={self.exists} path={self.physical_path!r}>'


def not_found(subpath):
    return FileInfo(os.path.basename(subpath or ''))


def is_hidden(subpath):
    segments = subpath.replace(os.sep, '/').split('/')
    return any(segment.startswith('.') and segment not in ('.', '..') for segment in segments)


class NullFileProvider:
    """Provider that never resolves anything."""

    def get_file_info(self, subpath):
        return not_found(subpath)

    def __repr__(self):
        return '<NullFileProvider>'


class PhysicalFileProvider:
    """Resolves paths under a single directory on disk."""

    def __init__(self, root):
        root = os.path.abspath(os.fspath(root))
        if not os.path.isdir(root):
            raise FileNotFoundError(f'File provider root does not exist: {root}')
        self.root = root

    def get_file_info(self, subpath):
        """
        Resolve ``subpath`` under the root.

        Paths that would escape the root (``..`` segments, absolute paths)
        never resolve, nor do hidden files or anything under a hidden
        directory (segments starting with ``.``).
        """
        if not subpath or is_hidden(subpath):
            return not_found(subpath)
        physical_path = safe_join(self.root, subpath)
        if physical_path is None or not os.path.exists(physical_path):
            return not_found(subpath)
        return FileInfo(
            os.path.basename(physical_path),
            physical_path=physical_path,
            exists=True,
            is_directory=os.path.isdir(physical_path)
        )

    def __repr__(self):
        return f'<PhysicalFileProvider {self.root!r}>'


class CompositeFileProvider:
    """Queries providers in order; the first existing file wins.

    Directories never match, so a directory in an earlier provider does not
    hide a file at the same path in a later one.
    """

    def __init__(self, providers):
        self.providers = list(providers)

    def get_file_info(self, subpath):
        for provider in self.providers:
            info = provider.get_file_info(subpath)
            if info.exists and not info.is_directory:
                return info
        return not_found(subpath)

    def __repr__(self):
        return f'<CompositeFileProvider {self.providers!r}>'
