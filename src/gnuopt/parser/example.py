from __future__ import annotations

import sys

from typing import Sequence

from gnuopt.parser.api import ArgType
from gnuopt.parser.api import Desc
from gnuopt.parser.errors import OptParseError
from gnuopt.parser.formatters import usage
from gnuopt.parser.optparser import parse


DESCS = [
    Desc("a", "add", ArgType.NONE, "", "add new item"),
    Desc("d", "delete", ArgType.NONE, "", "delete item"),
    Desc("h", "help", ArgType.NONE, "", "display help information and exit"),
    Desc("p", "path", ArgType.STRING, "path", "path to store output files to"),
]


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, args = parse(argv, DESCS)
    except OptParseError as e:
        print(e, file=sys.stderr)
        return 1

    if opts.has("help"):
        print("Options:")
        print(usage(DESCS), end="")
        return 0

    path = opts.get_string_or("path", "")

    if opts.has("add"):
        print(f"Adding new item into '{path}'...")
    if opts.has("delete"):
        print(f"Deleting new item from '{path}'...")

    print(f"arguments: {args}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
