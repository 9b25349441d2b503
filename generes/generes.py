# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause

import argparse
import logging
import sys
from logging import getLogger

from generes._version import __version__
from generes.emitter import emit
from generes.exceptions import GeneresException
from generes.resources import Defaults, EmissionConfig, GuardStyle, ResourceEntry
from generes.utils import echo

log = getLogger(__name__)

LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def resource_type(token):
    try:
        return ResourceEntry.parse(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def configure_parser():
    parser = argparse.ArgumentParser(
        prog="generes",
        description="Tool to generate C++ files with binary resources",
        epilog="Arguments can also be read from a file given as @file.",
        fromfile_prefix_chars="@",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s v{}".format(__version__)
    )
    parser.add_argument(
        "resources",
        action="extend",
        nargs="*",
        metavar="file:alias",
        type=resource_type,
        default=[],
        help="list of resources",
    )
    parser.add_argument(
        "--guards",
        choices=[g.value for g in GuardStyle],
        default=Defaults.guards,
        help="include guards",
    )
    parser.add_argument("--name", default=Defaults.name, help="name for resources")
    parser.add_argument(
        "--namespace", default=Defaults.namespace, help="namespace for resources"
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="file",
        default=Defaults.output,
        help="output file name",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logging verbosity, can be repeated",
    )
    return parser


def init_logging(verbosity):
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )
    logging.getLogger("generes").setLevel(level)


def resolve(args):
    config = EmissionConfig.create(
        namespace=args.namespace,
        container_name=args.name,
        guard_style=args.guards,
        output_path=args.output,
    )
    entries = list(args.resources or [])
    log.debug("Resolved %s with %d resource(s)", config, len(entries))
    return config, entries


def main(args=None):
    parser = configure_parser()
    parsed = parser.parse_args(args)
    init_logging(parsed.verbose)

    try:
        config, entries = resolve(parsed)
        output = emit(entries, config)
    except GeneresException as e:
        echo(str(e), sys.stderr)
        return 1

    echo("[ OK ] File '{}' generated".format(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
