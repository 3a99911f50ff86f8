# incflat/parsing/parser.py
from __future__ import annotations

import argparse

from incflat.constants import DEFAULT_ENCODING, GUARD_PREFIX


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Include paths are always anchored at ROOT; there is no search path.
        - Only the root file is named on the command line; everything else
          is reached through its include directives.
    """
    p = argparse.ArgumentParser(
        prog="incflat",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "incflat – flatten #include trees into a single buffer\n"
            "Files marked with “#pragma once” are expanded once per run and "
            "wrapped in a synthesized include guard."
        ),
    )

    g_in = p.add_argument_group("Input")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_in.add_argument(
        "input",
        metavar="INPUT",
        help="Root file to flatten, relative to ROOT (e.g. 'a.glsl').",
    )
    g_in.add_argument(
        "-r",
        "--root",
        metavar="DIR",
        dest="root",
        help=(
            "Directory standing for '/': both #include \"x\" and #include <x> "
            "resolve to ROOT/x. Defaults to the current working directory."
        ),
    )
    g_in.add_argument(
        "--encoding",
        metavar="NAME",
        dest="encoding",
        default=DEFAULT_ENCODING,
        help=f"Source and output encoding (default: {DEFAULT_ENCODING}).",
    )

    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the flattened buffer to FILE instead of standard output.",
    )
    g_out.add_argument(
        "--guard-prefix",
        metavar="PREFIX",
        dest="guard_prefix",
        default=GUARD_PREFIX,
        help=f"Prefix of synthesized include-guard macros (default: {GUARD_PREFIX}).",
    )

    g_misc.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Log a JSON summary of the run to stderr.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also INCFLAT_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    return p
