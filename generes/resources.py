# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause

from enum import Enum
from typing import NamedTuple

from generes.utils import normalize_output_path


class Defaults:
    namespace = "resources"
    name = "resources"
    output = "resources.hpp"
    guards = "define"


class GuardStyle(Enum):
    DEFINE = "define"
    PRAGMA = "pragma"


class ResourceEntry(NamedTuple):
    source_path: str
    alias: str

    @classmethod
    def parse(cls, token: str) -> "ResourceEntry":
        """Split a ``file:alias`` token on its first colon."""
        path, sep, alias = token.partition(":")
        if not sep:
            raise ValueError(f"'{token}' is not a valid resource, expected file:alias")
        return cls(path, alias)


class EmissionConfig(NamedTuple):
    namespace: str = Defaults.namespace
    container_name: str = Defaults.name
    guard_style: GuardStyle = GuardStyle(Defaults.guards)
    output_path: str = Defaults.output

    @classmethod
    def create(cls, namespace=None, container_name=None, guard_style=None, output_path=None):
        """Build a config, falling back to the defaults for empty values.

        The output path always ends up with a ``.h`` or ``.hpp`` suffix.
        """
        if not guard_style:
            guard_style = Defaults.guards
        return cls(
            namespace=namespace or Defaults.namespace,
            container_name=container_name or Defaults.name,
            guard_style=GuardStyle(guard_style),
            output_path=normalize_output_path(output_path or Defaults.output),
        )
