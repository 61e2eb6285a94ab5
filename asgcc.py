#!/usr/bin/env python3
"""
asgcc — assignment compiler CLI

Usage:
    python asgcc.py [input] [-o output.asm] [--target linux32|linux64] [-v|-vv]

Reads one statement (`name = expression`, newline-terminated) from the
input file, or from stdin when no file is given, and writes NASM assembly
to stdout or to the -o file.

Examples:
    echo "x=(a+b)*c" | python asgcc.py
    python asgcc.py stmt.txt -o stmt.asm --target linux64
    python asgcc.py stmt.txt -vv                 # trace every emitted line
"""

import argparse
import logging
import sys
import os

# Allow running from project root or as module
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from asg_compiler import compile_source, __version__
from asg_compiler.emitter import TARGET_PROFILES, DEFAULT_TARGET
from asg_compiler.parser import ParseError


def setup_logging(verbose: int):
    """Log to stderr so stdout stays clean assembly."""
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:  # -vv or more
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="[asgcc] %(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="asgcc",
        description="Translate one assignment statement to x86 assembly",
        epilog="Targets: " + ", ".join(TARGET_PROFILES.keys()),
    )
    parser.add_argument("input", nargs="?",
                        help="Input statement file (default: stdin)")
    parser.add_argument("-o", "--output", help="Output assembly file (default: stdout)")
    parser.add_argument("--target", default=DEFAULT_TARGET,
                        choices=list(TARGET_PROFILES.keys()),
                        help=f"Target profile (default: {DEFAULT_TARGET})")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase log verbosity (-v, -vv)")
    parser.add_argument("--version", action="version",
                        version=f"asgcc {__version__}")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    log = logging.getLogger("asgcc")

    # Read input
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                source = f.read()
        except FileNotFoundError:
            print(f"Error: File not found: {args.input}", file=sys.stderr)
            sys.exit(1)
        except IOError as e:
            print(f"Error reading {args.input}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        source = sys.stdin.readline()

    log.info("Input:  %s", args.input or "<stdin>")
    log.info("Target: %s - %s", args.target, TARGET_PROFILES[args.target]["description"])

    try:
        result = compile_source(source, target=args.target)
    except ParseError as e:
        print(f"Error: {e}. Aborting.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Internal compiler error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(2)

    # Write output
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        except IOError as e:
            print(f"Error writing {args.output}: {e}", file=sys.stderr)
            sys.exit(1)
        log.info("Output: %s", args.output)
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
