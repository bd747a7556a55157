"""
Command line options parsing.

Short and long option formats are supported: ``-o`` and ``--option``.
Several short options can be grouped behind one dash: ``-abc``. An option
may take a mandatory argument. A short option's argument is either the
rest of the option string or the next command line string, so ``-ofoo``
and ``-o foo`` both pass ``foo`` to ``o``. A long option is separated
from its argument by ``=`` or by a space: ``--option=foo`` or
``--option foo``.

Options and positional arguments may be given in any order. ``--`` ends
the options; everything after it is a positional argument, even if it
starts with a dash.

Usage::

    descs = [
        Desc("a", "add", ArgType.NONE, "", "add new item"),
        Desc("p", "path", ArgType.STRING, "path", "path to store output files to"),
    ]
    try:
        opts, args = parse(sys.argv[1:], descs)
    except OptParseError as e:
        sys.exit(str(e))

    path = opts.get_string_or("path", "")
"""
from __future__ import annotations

import math
import re

from typing import Callable
from typing import Optional
from typing import Sequence

from loguru import logger

from gnuopt.parser.api import ArgType
from gnuopt.parser.api import Desc
from gnuopt.parser.api import Option
from gnuopt.parser.api import Options
from gnuopt.parser.api import OptionValue
from gnuopt.parser.api import Parsed
from gnuopt.parser.errors import BadOptionError
from gnuopt.parser.errors import MalformedOptionError
from gnuopt.parser.errors import MissingArgumentError
from gnuopt.parser.errors import OptionConflictError
from gnuopt.parser.errors import OptionError
from gnuopt.parser.errors import OptionValueError
from gnuopt.parser.errors import OptParseError
from gnuopt.parser.errors import UnexpectedArgumentError


_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

# Integer arguments are signed 64-bit.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _parse_int(val: str) -> int:
    if not _INT_RE.fullmatch(val):
        raise ValueError(f"invalid integer literal: {val!r}")
    num = int(val, 10)
    if not _INT_MIN <= num <= _INT_MAX:
        raise ValueError(f"integer out of range: {val!r}")
    return num


def _parse_float(val: str) -> float:
    if not _FLOAT_RE.fullmatch(val):
        raise ValueError(f"invalid floating-point literal: {val!r}")
    num = float(val)
    if math.isinf(num) and "inf" not in val.lower():
        raise ValueError(f"floating-point value out of range: {val!r}")
    return num


_builtin_cvt: dict[ArgType, Callable[[str], OptionValue]] = {
    ArgType.INT: _parse_int,
    ArgType.FLOAT: _parse_float,
    ArgType.STRING: str,
}


def convert_value(name: str, arg: ArgType, value: str) -> Optional[OptionValue]:
    """
    Convert the raw argument ``value`` of option ``name`` to the type
    declared by ``arg``. Raises OptionValueError if it doesn't convert.
    """
    if arg is ArgType.NONE:
        return None
    cvt = _builtin_cvt[arg]
    try:
        return cvt(value)
    except ValueError as e:
        logger.trace("option {}: {}", name, e)
        raise OptionValueError(name, value) from None


def parse(args: Sequence[str], descs: Sequence[Desc]) -> Parsed:
    """
    Parse the command line ``args`` against the options described by
    ``descs``.

    Returns the parsed options and the list of positional arguments left
    over. Any error aborts parsing and is raised as an OptParseError
    subclass; ``args`` and ``descs`` are never modified.
    """
    opts: list[Option] = []
    arguments: list[str] = []

    try:
        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "--":
                # The rest are arguments, no matter what they look like.
                arguments.extend(args[i + 1 :])
                break
            if arg[:1] == "-":
                # Only the option itself and a possible detached
                # argument are ever looked at.
                found, n = _parse_dashed(descs, args[i : i + 2])
                opts.extend(found)
                i += n
            else:
                arguments.append(arg)
                i += 1
    except OptParseError as e:
        logger.debug("parsing failed: {}", e)
        raise

    options = join(opts)
    logger.debug(
        "parsed {} option(s) and {} argument(s)", len(options), len(arguments)
    )
    return Parsed(options, arguments)


def _parse_dashed(
    descs: Sequence[Desc], args: Sequence[str]
) -> tuple[list[Option], int]:
    """
    Parse ``args[0]``, a command line string starting with a dash, and
    return the options found in it together with the number of strings
    consumed from ``args``.

    More than one option may come out of a single string, e.g. ``-abc``
    produces ``a``, ``b`` and ``c``.
    """
    arg = args[0]
    dashes = _count_dashes(arg)
    logger.trace("{!r}: {} dash(es)", arg, dashes)

    if dashes == 1:
        return _process_short_opts(descs, args)
    if dashes == 2:
        return _process_long_opt(descs, args)
    if dashes == 0:
        raise MalformedOptionError(arg, "not an option")
    raise MalformedOptionError(arg)


def _process_short_opts(
    descs: Sequence[Desc], args: Sequence[str]
) -> tuple[list[Option], int]:
    arg = args[0]
    chars = arg[1:]
    if not chars:
        raise MalformedOptionError(arg)

    opts = []
    n = 1
    for i, ch in enumerate(chars):
        desc = _find_short(descs, ch)
        if desc is None:
            raise BadOptionError(ch)
        if not desc.takes_value():
            opts.append(Option(desc))
            continue

        # The last option in a cluster takes the next string as its
        # argument, any other takes the rest of the cluster.
        if i == len(chars) - 1:
            if len(args) < 2:
                raise MissingArgumentError(ch)
            value = args[1]
            n += 1
        else:
            value = chars[i + 1 :]
        opts.append(Option(desc, [convert_value(ch, desc.arg, value)]))
        break

    return opts, n


def _process_long_opt(
    descs: Sequence[Desc], args: Sequence[str]
) -> tuple[list[Option], int]:
    name, eq, value = args[0][2:].partition("=")
    desc = _find_long(descs, name)
    if desc is None:
        raise BadOptionError(name)

    if not desc.takes_value():
        if eq:
            raise UnexpectedArgumentError(name)
        return [Option(desc)], 1

    n = 1
    if not eq:
        if len(args) < 2:
            raise MissingArgumentError(name)
        value = args[1]
        n += 1

    return [Option(desc, [convert_value(name, desc.arg, value)])], n


def join(opts: Sequence[Option]) -> Options:
    """
    Merge options sharing a descriptor into one, keeping the order in
    which descriptors first appear and the order of their arguments.
    """
    # Desc hashes by identity.
    merged: dict[Desc, Option] = {}
    for opt in opts:
        found = merged.get(opt.desc)
        if found is None:
            merged[opt.desc] = Option(opt.desc, list(opt.args))
        elif found.desc.takes_value():
            found.args.extend(opt.args)

    return Options(merged.values())


def _find_short(descs: Sequence[Desc], name: str) -> Optional[Desc]:
    for desc in descs:
        if desc.short and desc.short == name:
            return desc
    return None


def _find_long(descs: Sequence[Desc], name: str) -> Optional[Desc]:
    for desc in descs:
        if desc.long and desc.long == name:
            return desc
    return None


def _count_dashes(s: str) -> int:
    return len(s) - len(s.lstrip("-"))


def check_descs(descs: Sequence[Desc]) -> None:
    """
    Verify that ``descs`` is a usable descriptor table: every descriptor
    has a well formed short and/or long name, and no name is declared
    twice. Raises OptionError (or OptionConflictError) otherwise.

    ``parse`` doesn't call this, it assumes a valid table.
    """
    short_opts: dict[str, Desc] = {}
    long_opts: dict[str, Desc] = {}

    for desc in descs:
        if not (desc.short or desc.long):
            raise OptionError("at least one option name must be supplied", desc)
        if desc.short:
            if len(desc.short) != 1 or desc.short == "-":
                raise OptionError(
                    f"invalid short option name {desc.short!r}: "
                    "must be a single non-dash character",
                    desc,
                )
            if desc.short in short_opts:
                raise OptionConflictError(
                    f"conflicting option string: -{desc.short}", desc
                )
            short_opts[desc.short] = desc
        if desc.long:
            if desc.long.startswith("-") or "=" in desc.long:
                raise OptionError(
                    f"invalid long option name {desc.long!r}: "
                    "must not start with a dash or contain '='",
                    desc,
                )
            if desc.long in long_opts:
                raise OptionConflictError(
                    f"conflicting option string: --{desc.long}", desc
                )
            long_opts[desc.long] = desc
