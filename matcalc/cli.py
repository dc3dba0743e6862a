#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command line front end

    matcalc -f input_file
    matcalc -t input_file [output_file]
    matcalc -m input_file_1 input_file_2 [output_file]
    matcalc -d input_file
    matcalc -a input_file [output_file]
    matcalc -i input_file [output_file]

Matrix results go to ``output_file``, or to stdout when it is omitted.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import MEMORY_ERROR, NO_ERROR, MatCalcError, UsageError
from .operations import OPERATIONS, Operation
from .utils import VERSION
from .writer import write_matrix

logger = logging.getLogger(__name__)

PROG = "matcalc"

USAGE_EPILOG = (
    "The output file is optional. If no file is given the matrix will be "
    "written to stdout."
)


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad invocations as UsageError instead of exiting with 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Read matrices from text files and apply a linear-algebra operation.",
        epilog=USAGE_EPILOG,
    )
    group = parser.add_mutually_exclusive_group(required=True)
    for flag, op in OPERATIONS.items():
        operands = " ".join(f"input_file_{k + 1}" for k in range(op.n_inputs))
        if op.returns_matrix:
            operands += " [output_file]"
        group.add_argument(
            f"-{flag}",
            dest="operation",
            action="store_const",
            const=flag,
            help=f"{op.name}: {PROG} -{flag} {operands}",
        )
    parser.add_argument("files", nargs="+", metavar="FILE")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v shows progress, -vv shows debug output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _check_operands(op: Operation, files: List[str]) -> None:
    most = op.n_inputs + (1 if op.returns_matrix else 0)
    if not op.n_inputs <= len(files) <= most:
        raise UsageError(
            f"-{op.flag} takes {op.n_inputs} to {most} file(s), got {len(files)}"
            if most != op.n_inputs
            else f"-{op.flag} takes exactly {op.n_inputs} file(s), got {len(files)}"
        )


def run(op: Operation, files: List[str], command: str) -> None:
    inputs = files[: op.n_inputs]
    output = files[op.n_inputs] if len(files) > op.n_inputs else None
    logger.debug(f"{op.name}: inputs={inputs} output={output or 'stdout'}")

    result = op.run(*inputs)

    if op.flag == "f":
        print(f"The frobenius norm of the matrix is {result:.10g}.\n")
        return
    if op.flag == "d":
        print(f"The determinant of the matrix is {result:.10g}.\n")
        return

    if op.flag == "m":
        if result.swapped:
            print(
                "\nThe input order of these two matrices was swapped "
                "in order to find their product!\n"
            )
        result = result.matrix

    name = write_matrix(result, output, command)
    print(f"Output matrix has been printed to file {name}.\n")


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    command = " ".join([PROG, *argv])
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        op = OPERATIONS[args.operation]
        _check_operands(op, args.files)
        configure_logging(args.verbose)
        run(op, args.files, command)
    except UsageError as e:
        print(f"Incorrect operation or incorrect command line arguments: {e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return e.exit_code
    except MatCalcError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except MemoryError:
        print("Memory could not be allocated.", file=sys.stderr)
        return MEMORY_ERROR

    return NO_ERROR


if __name__ == "__main__":
    sys.exit(main())
