# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause

from generes._version import __version__, version_info
from generes.emitter import emit, format_entry, header_lines
from generes.exceptions import (
    DirectoryCreateError,
    GeneresException,
    OutputWriteError,
    ResourceReadError,
)
from generes.resources import Defaults, EmissionConfig, GuardStyle, ResourceEntry
from generes.utils import guard_name, normalize_output_path
