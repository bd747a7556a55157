from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from gnuopt.parser.api import Desc


class OptParseError(Exception):
    """
    Base class for every error raised while parsing a command line.
    """

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class BadOptionError(OptParseError):
    """
    Raised if an option name not present in the descriptor table is seen
    on the command line.
    """

    def __init__(self, opt_str: str) -> None:
        super().__init__(f"unrecognized option '{opt_str}'")
        self.opt_str = opt_str


class MissingArgumentError(OptParseError):
    """
    Raised if an option requiring an argument is the last thing on the
    command line.
    """

    def __init__(self, opt_str: str) -> None:
        super().__init__(f"option '{opt_str}' requires an argument")
        self.opt_str = opt_str


class UnexpectedArgumentError(OptParseError):
    """
    Raised if a long option without an argument is given one with ``=``.
    """

    def __init__(self, opt_str: str) -> None:
        super().__init__(f"option '{opt_str}' doesn't allow an argument")
        self.opt_str = opt_str


class OptionValueError(OptParseError):
    """
    Raised if an option argument can't be converted to the option's type.
    """

    def __init__(self, opt_str: str, value: str) -> None:
        super().__init__(f"invalid argument for option '{opt_str}'")
        self.opt_str = opt_str
        self.value = value


class MalformedOptionError(OptParseError):
    def __init__(self, arg: str, msg: str = "invalid option format") -> None:
        super().__init__(msg)
        self.arg = arg


class OptionTypeError(TypeError):
    """
    Raised if a typed accessor is used on an option declared with a
    different argument type. This is a programming error, not bad input.
    """


class OptionError(Exception):
    """
    Raised if a descriptor is created with invalid or inconsistent names.
    """

    def __init__(self, msg: str, desc: Desc) -> None:
        super().__init__(msg)
        self.msg = msg
        self.option_id = str(desc)

    def __str__(self) -> str:
        if self.option_id:
            return f"option {self.option_id}: {self.msg}"
        return self.msg


class OptionConflictError(OptionError):
    """
    Raised if two descriptors in one table share a short or long name.
    """
