"""Content fingerprints for files, directories and symbolic links."""

from __future__ import annotations

import hashlib
import os
import stat
from collections import deque
from typing import Callable

Fingerprint = str

EMPTY: Fingerprint = ""

SPARSE_FINGERPRINT_THRESHOLD = 5 * 1024 * 1024
SPARSE_FINGERPRINT_SIZE = 512 * 1024

_CHUNK_SIZE = 64 * 1024


def _blake2b_256():
    return hashlib.blake2b(digest_size=32)


_HASHES: dict[str, Callable[[], "hashlib._Hash"]] = {
    "SHA256": hashlib.sha256,
    "SHA1": hashlib.sha1,
    "MD5": hashlib.md5,
    "BLAKE2b": _blake2b_256,
}


def create(
    path: str,
    file_algorithm: str,
    directory_algorithm: str,
    symlink_algorithm: str,
) -> Fingerprint:
    """Fingerprint ``path`` with the algorithm suited to its kind."""
    info = os.lstat(path)

    if stat.S_ISLNK(info.st_mode):
        if symlink_algorithm != "follow":
            return _symlink_fingerprint(path, symlink_algorithm)
        info = os.stat(path)

    if stat.S_ISDIR(info.st_mode):
        return _directory_fingerprint(path, directory_algorithm)
    if stat.S_ISREG(info.st_mode):
        return _file_fingerprint(path, file_algorithm, info.st_size)
    raise ValueError(f"unsupported file mode '{stat.filemode(info.st_mode)}'")


def _file_fingerprint(path: str, algorithm: str, size: int) -> Fingerprint:
    if algorithm == "none":
        return EMPTY
    if algorithm == "":
        algorithm = "dynamic:SHA256"

    dynamic = algorithm.startswith("dynamic:")
    name = algorithm[len("dynamic:"):] if dynamic else algorithm
    factory = _HASHES.get(name)
    if factory is None:
        raise ValueError(f"unsupported file fingerprint algorithm '{algorithm}'")

    if dynamic and size > SPARSE_FINGERPRINT_THRESHOLD:
        return _sparse_fingerprint(path, size, factory())
    return _regular_fingerprint(path, factory())


def _directory_fingerprint(path: str, algorithm: str) -> Fingerprint:
    if algorithm == "sumSizes":
        return _sum_sizes_fingerprint(path, 0)
    if algorithm in ("dynamic:sumSizes", ""):
        return _sum_sizes_fingerprint(path, 500)
    if algorithm == "none":
        return EMPTY
    raise ValueError(f"unsupported directory fingerprint algorithm '{algorithm}'")


def _symlink_fingerprint(path: str, algorithm: str) -> Fingerprint:
    if algorithm == "targetName":
        return _target_name_fingerprint(path, True)
    if algorithm == "targetNameNoExt":
        return _target_name_fingerprint(path, False)
    if algorithm == "none":
        return EMPTY
    raise ValueError(f"unsupported symbolic link fingerprint algorithm '{algorithm}'")


def _base(path: str) -> str:
    if not path:
        return "."
    trimmed = path.rstrip(os.sep)
    if not trimmed:
        return os.sep
    return trimmed[trimmed.rfind(os.sep) + 1:]


def _target_name_fingerprint(path: str, include_extension: bool) -> Fingerprint:
    try:
        target = os.readlink(path)
    except FileNotFoundError:
        return EMPTY
    except OSError as error:
        raise OSError(
            f"'{path}': could not determine target of symbolic link: {error}"
        ) from error

    name = _base(target)
    if not include_extension:
        name = name.split(".", 1)[0]
    return name


def _entries(path: str) -> list[os.DirEntry]:
    try:
        with os.scandir(path) as iterator:
            return list(iterator)
    except OSError:
        return []


def _sum_sizes_fingerprint(path: str, max_files: int) -> Fingerprint:
    """Sum the sizes of contained files, breadth first, up to ``max_files`` files."""
    pending = deque([path])
    file_count = 0
    total_size = 0

    while pending:
        directory = pending.popleft()
        for entry in _entries(directory):
            try:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(os.path.join(directory, entry.name))
                    continue
                total_size += entry.stat(follow_symlinks=False).st_size
            except OSError:
                continue

            file_count += 1
            if max_files and file_count >= max_files:
                return format(total_size, "x")

    return format(total_size, "x")


def _sparse_fingerprint(path: str, size: int, digest) -> Fingerprint:
    with open(path, "rb") as handle:
        digest.update(handle.read(SPARSE_FINGERPRINT_SIZE))

        handle.seek((size - SPARSE_FINGERPRINT_SIZE) // 2, os.SEEK_SET)
        digest.update(handle.read(SPARSE_FINGERPRINT_SIZE))

        handle.seek(-SPARSE_FINGERPRINT_SIZE, os.SEEK_END)
        digest.update(handle.read(SPARSE_FINGERPRINT_SIZE))

    return digest.hexdigest()


def _regular_fingerprint(path: str, digest) -> Fingerprint:
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()