# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause

import os
from collections import Counter
from logging import getLogger

from generes.exceptions import OutputWriteError, ResourceReadError
from generes.resources import GuardStyle
from generes.utils import echo, ensure_parent_directory, guard_name

log = getLogger(__name__)

INCLUDES = ("cstdint", "string", "vector", "unordered_map")


def read_resource(entry):
    try:
        with open(entry.source_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ResourceReadError(entry, e) from e


def format_entry(alias, data):
    values = "".join("{},".format(b) for b in data)
    return '    {{ "{alias}", {{ {values} }} }},'.format(alias=alias, values=values)


def header_lines(entries, config, on_skip=None):
    """Yield the lines of the generated header, without line terminators.

    Resources are read one at a time while the container is rendered.
    Unreadable ones are left out and handed to ``on_skip(entry, error)``.
    """
    define = guard_name(config.output_path, config.namespace)
    use_define = config.guard_style is GuardStyle.DEFINE

    yield "// this file is auto-generated by the cpp-generes program"
    yield "// see https://github.com/rue-ryuzaki/cpp-generes"
    yield ""
    if use_define:
        yield f"#ifndef {define}"
        yield f"#define {define}"
    else:
        yield "#pragma once"
    yield ""
    for include in INCLUDES:
        yield f"#include <{include}>"
    yield ""
    yield f"namespace {config.namespace} {{"
    yield (
        "static std::unordered_map<std::string, std::vector<uint8_t> > "
        f"const {config.container_name} ="
    )
    yield "{"
    for entry in entries:
        try:
            data = read_resource(entry)
        except ResourceReadError as e:
            if on_skip is None:
                raise
            on_skip(entry, e)
            continue
        log.debug("Embedding %s as '%s' (%d bytes)", entry.source_path, entry.alias, len(data))
        yield format_entry(entry.alias, data)
    yield "};"
    yield f"}}  // namespace {config.namespace}"
    if use_define:
        yield ""
        yield f"#endif  // {define}"


def _report_skipped(entry, error):
    echo(str(error))
    log.debug("Skipped %s: %s", entry.source_path, error.reason)


def _warn_duplicates(entries):
    counts = Counter(entry.alias for entry in entries)
    for alias, count in counts.items():
        if count > 1:
            log.warning(
                "alias '%s' is used by %d resources, the last one wins", alias, count
            )


def _remove_partial(output):
    try:
        os.remove(output)
    except OSError as e:
        log.warning("could not remove partial output %s: %s", output, e)
    else:
        log.debug("Removed partial output %s", output)


def emit(entries, config):
    """Write the header for ``entries`` to ``config.output_path``.

    Missing output directories are created first; failing to do so raises
    ``DirectoryCreateError`` before anything is written. A write that fails
    halfway removes the truncated file and raises ``OutputWriteError``.
    """
    entries = list(entries)
    _warn_duplicates(entries)

    output = config.output_path
    ensure_parent_directory(output)

    skipped = []

    def on_skip(entry, error):
        _report_skipped(entry, error)
        skipped.append(entry)

    # surrogateescape passes undecodable argv bytes through unchanged
    try:
        f = open(output, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise OutputWriteError(output, e) from e

    try:
        with f:
            for line in header_lines(entries, config, on_skip=on_skip):
                f.write(line + "\n")
    except OSError as e:
        _remove_partial(output)
        raise OutputWriteError(output, e) from e

    log.info(
        "Wrote %d resource(s) to %s, skipped %d",
        len(entries) - len(skipped),
        output,
        len(skipped),
    )
    return output
