from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Sequence


if TYPE_CHECKING:
    from gnuopt.parser.api import Desc


class UsageFormatter:
    """
    Formats option descriptions into aligned usage lines, e.g.::

      -a, --add          add new item
          --delete       delete item
      -h                 display help information and exit
      -p, --path <path>  path to store output files to

    Instance attributes:
      indent : int
        number of columns before the option strings
      column_gap : int
        minimum number of columns between the longest option strings
        and the description column
      arg_format : str
        format string for the argument name of options taking one;
        must contain a single "%s"
    """

    def __init__(
        self,
        indent: int = 2,
        column_gap: int = 2,
        arg_format: str = " <%s>",
    ) -> None:
        if "%s" not in arg_format:
            raise ValueError(f"invalid argument format: {arg_format!r}")
        self.indent: int = indent
        self.column_gap: int = column_gap
        self.arg_format: str = arg_format

    def sort_descs(self, descs: Sequence[Desc]) -> list[Desc]:
        return sorted(descs, key=lambda d: d.short + d.long)

    def format_option_strings(self, desc: Desc) -> str:
        """Return the option strings of ``desc``, e.g. "-p, --path <path>"."""
        s = " " * self.indent
        s += "-" + desc.short if desc.short else "  "
        if desc.long:
            s += ", " if desc.short else "  "
            s += "--" + desc.long
        if desc.takes_value():
            s += self.arg_format % desc.arg_name
        return s

    def format_usage(self, descs: Sequence[Desc]) -> str:
        descs = self.sort_descs(descs)
        lines = [self.format_option_strings(desc) for desc in descs]
        width = max((len(line) for line in lines), default=0) + self.column_gap

        result = []
        for line, desc in zip(lines, descs):
            result.append(f"{line:<{width}}{desc.description}\n")
        return "".join(result)


def usage(descs: Sequence[Desc]) -> str:
    """
    Return the usage lines for ``descs``, sorted by short and long name
    and ready to be printed.
    """
    return UsageFormatter().format_usage(descs)
