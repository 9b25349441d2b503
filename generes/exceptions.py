# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause


class GeneresException(Exception):
    pass


class ResourceReadError(GeneresException):
    def __init__(self, entry, reason=None):
        self.entry = entry
        self.reason = reason
        super().__init__("[FAIL] Can't open file '{}'".format(entry.source_path))


class DirectoryCreateError(GeneresException):
    def __init__(self, directory, output):
        self.directory = directory
        self.output = output
        super().__init__(
            "[FAIL] Can't create directory '{}' for output file '{}'".format(
                directory, output
            )
        )


class OutputWriteError(GeneresException):
    def __init__(self, output, reason=None):
        self.output = output
        self.reason = reason
        message = "[FAIL] Can't write output file '{}'".format(output)
        if reason:
            message += ": {}".format(reason)
        super().__init__(message)
