# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause

import os
import string
import sys
from logging import getLogger

from generes.exceptions import DirectoryCreateError

log = getLogger(__name__)

HEADER_SUFFIXES = (".h", ".hpp")

_CONTROL_CHARS = frozenset(chr(c) for c in range(32)) | {"\x7f"}
_PUNCTUATION = frozenset(string.punctuation)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def echo(message: str, stream=None):
    """Print a status line, keeping undecodable path bytes intact."""
    if stream is None:
        stream = sys.stdout
    try:
        print(message, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, "encoding", None) or "utf-8"
        data = (message + "\n").encode(encoding, "surrogateescape")
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(data.decode(encoding, "replace"))
            return
        stream.flush()
        buffer.write(data)
        buffer.flush()


def normalize_output_path(path: str) -> str:
    if not path.endswith(HEADER_SUFFIXES):
        path += ".hpp"
    return path


def _sanitize(name: str) -> str:
    out = []
    for c in name:
        if c in _CONTROL_CHARS:
            continue
        if c in _PUNCTUATION or c == " ":
            out.append("_")
        else:
            out.append(c)
    return "".join(out)


def guard_name(output_path: str, namespace: str) -> str:
    """Return the include guard macro for a generated header.

    The base name of ``output_path`` loses its control characters, has
    punctuation and spaces turned into underscores and is upper-cased
    together with ``namespace``::

        >>> guard_name("out/gen.hpp", "assets")
        '_ASSETS_GEN_HPP_'
    """
    base = _sanitize(os.path.basename(output_path))
    return "_{}_{}_".format(
        namespace.translate(_ASCII_UPPER), base.translate(_ASCII_UPPER)
    )


def ensure_parent_directory(output_path: str) -> str:
    directory = os.path.dirname(output_path)
    if directory and directory != "." and not os.path.isdir(directory):
        log.debug("Creating output directory %s", directory)
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(directory, output_path) from e
    return directory
