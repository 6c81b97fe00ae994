"""File-system helpers: listing, path manipulation, directory and file management."""

from __future__ import annotations

import errno
import os
import shutil
from fnmatch import fnmatchcase


def get_files_in_directory(directory: str, pattern: str = "*.*") -> list[str]:
    """Sorted names of the regular files in ``directory`` matching ``pattern``.

    A missing or unreadable directory yields an empty list.
    """
    try:
        with os.scandir(directory) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_file(follow_symlinks=False) and fnmatchcase(entry.name, pattern)
            ]
    except OSError:
        return []
    return sorted(names)


def get_file_extension(name: str) -> str:
    """Text after the last dot, or an empty string when there is no dot."""
    idx = name.rfind(".")
    return name[idx + 1:] if idx >= 0 else ""


def get_file_name(path: str, save_ext: bool = True) -> str:
    """Last component of ``path``, optionally without its extension."""
    idx = max(path.rfind("/"), path.rfind("\\"))
    filename = path[idx + 1:] if idx >= 0 else path
    if not save_ext:
        dot = filename.rfind(".")
        if dot >= 0:
            filename = filename[:dot]
    return filename


def cd_up(path: str) -> str:
    """``path`` without its last component; unchanged if it has no separator."""
    idx = max(path.rfind("/"), path.rfind("\\"))
    return path[:idx] if idx >= 0 else path


def change_extension(path: str, new_ext: str) -> str:
    """``path`` with its extension replaced by ``new_ext``."""
    return f"{cd_up(path)}/{get_file_name(path, False)}.{new_ext}"


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def is_file(path: str) -> bool:
    return os.path.isfile(path)


def make_dir(path: str) -> None:
    """Create a directory; an existing entry of that name is accepted.

    Raises OSError for any other failure, such as a missing parent.
    """
    try:
        os.mkdir(path, 0o775)
    except OSError as exc:
        if exc.errno != errno.EEXIST:
            raise


def check_and_make_dir(path: str) -> None:
    """Create the directory unless it already exists."""
    if not is_directory(path):
        make_dir(path)


def remove_folder(path: str, verbose: bool = False) -> None:
    """Remove a directory tree; a missing directory is skipped."""
    if verbose:
        print(f'Removing folder "{path}"...', end="")
    if not is_directory(path):
        if verbose:
            print("DOES NOT EXIST -> skipped")
        return
    shutil.rmtree(path, ignore_errors=True)
    if is_directory(path):
        raise OSError(f'Failed to remove folder "{path}"')
    if verbose:
        print("DONE!")


def rename_file(old_path: str, new_path: str, verbose: bool = False) -> None:
    """Move a file, replacing any file at ``new_path``.

    A missing source or identical paths are skipped.
    """
    if verbose:
        print(f'Renaming file "{old_path}" to "{new_path}"...', end="")
    if not is_file(old_path):
        if verbose:
            print("PATH DOES NOT EXIST -> skipped")
        return
    if old_path == new_path:
        if verbose:
            print("PATH MATCH -> skipped")
        return
    try:
        shutil.move(old_path, new_path)
    except OSError:
        pass
    if not is_file(new_path):
        raise OSError(f'Failed to rename file "{old_path}"')
    if verbose:
        print("DONE!")