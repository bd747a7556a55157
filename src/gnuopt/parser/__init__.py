from __future__ import annotations

from gnuopt.parser.api import ArgType
from gnuopt.parser.api import Desc
from gnuopt.parser.api import Option
from gnuopt.parser.api import Options
from gnuopt.parser.api import Parsed
from gnuopt.parser.errors import BadOptionError
from gnuopt.parser.errors import MalformedOptionError
from gnuopt.parser.errors import MissingArgumentError
from gnuopt.parser.errors import OptionConflictError
from gnuopt.parser.errors import OptionError
from gnuopt.parser.errors import OptionTypeError
from gnuopt.parser.errors import OptionValueError
from gnuopt.parser.errors import OptParseError
from gnuopt.parser.errors import UnexpectedArgumentError
from gnuopt.parser.formatters import UsageFormatter
from gnuopt.parser.formatters import usage
from gnuopt.parser.optparser import check_descs
from gnuopt.parser.optparser import parse


__all__ = [
    "ArgType",
    "BadOptionError",
    "Desc",
    "MalformedOptionError",
    "MissingArgumentError",
    "OptParseError",
    "Option",
    "OptionConflictError",
    "OptionError",
    "OptionTypeError",
    "OptionValueError",
    "Options",
    "Parsed",
    "UnexpectedArgumentError",
    "UsageFormatter",
    "check_descs",
    "parse",
    "usage",
]
