#!/usr/bin/env python3
# Copyright 2026 The glyphsheet Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
from argparse import RawTextHelpFormatter
from importlib import import_module
from pathlib import Path
import sys
import argparse

from glyphsheet._version import version as __version__


def _get_subcommands():
    subcommands = {}
    for module in Path(__file__).parent.glob("*.py"):
        module = module.stem
        if module == "__init__":
            continue
        friendly_name = module.replace("_", "-")
        subcommands[friendly_name] = (module, "glyphsheet.scripts")
    return subcommands


def print_menu():
    print("glyphsheet - Version", __version__)
    print("\nBasic command examples:\n")
    print("    glyphsheet render MyFont.ttf -o MyFont.pdf")
    print("    glyphsheet dump-codepoints MyFont.ttf --show-char")
    print("    glyphsheet render --help")
    print("    glyphsheet --version\n")


subcommands = _get_subcommands()

description = "Run glyphsheet subcommands:{0}".format(
    "".join(["\n    {0}".format(sc) for sc in sorted(subcommands.keys())])
)

description += (
    "\n\nSubcommands have their own help messages.\n"
    "These are usually accessible with the -h/--help\n"
    "flag positioned after the subcommand.\n"
    "I.e.: glyphsheet subcommand -h"
)

parser = argparse.ArgumentParser(
    prog="glyphsheet", description=description, formatter_class=RawTextHelpFormatter
)
parser.add_argument("subcommand", nargs=1, help="the subcommand to execute")

parser.add_argument(
    "--list-subcommands",
    action="store_true",
    help="print the list of subcommands "
    "to stdout, separated by a space character. This is "
    "usually only used to generate the shell completion code.",
)

parser.add_argument(
    "--version", "-v", action="version", version="%(prog)s " + __version__
)


def main(args=None):
    if args is None:
        args = sys.argv
    if len(args) >= 2 and args[1] in subcommands:
        # relay
        (module, package) = subcommands[args[1]]
        mod = import_module(f".{module}", package)
        return mod.main(args[2:])
    elif "--list-subcommands" in args:
        print(" ".join(list(sorted(subcommands.keys()))))
    else:
        # shows menu and help if no args
        print_menu()
        parser.parse_args(args[1:])
        parser.print_help()


if __name__ == "__main__":
    main()
