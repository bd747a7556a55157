from __future__ import annotations

import enum

from dataclasses import dataclass
from dataclasses import field

from typing import NamedTuple
from typing import Optional
from typing import TypeVar
from typing import Union

from gnuopt.parser.errors import OptionTypeError


OptionValue = Union[int, float, str]

T = TypeVar("T", int, float, str)


def _repr(self) -> str:
    return f"<{self.__class__.__name__} at 0x{id(self):x}: {self}>"


class ArgType(enum.Enum):
    NONE = enum.auto()
    FLOAT = enum.auto()
    INT = enum.auto()
    STRING = enum.auto()


@dataclass(frozen=True, eq=False)
class Desc:
    """
    Describes one option accepted on the command line.

    Either ``short`` or ``long`` may be empty when the option has no short
    or long spelling respectively, but not both.

    Descriptors compare by identity: parsed options refer back to the
    exact instance they were declared with, so repeated occurrences on
    the command line are merged by instance and never by name.
    """

    short: str = ""
    """One letter name, given on the command line after a single dash."""

    long: str = ""
    """Long name, given on the command line after two dashes."""

    arg: ArgType = ArgType.NONE
    """Type of the option's argument, ``ArgType.NONE`` for plain flags."""

    arg_name: str = ""
    """Argument name shown in usage text."""

    description: str = ""
    """Help text shown in usage text."""

    def __str__(self) -> str:
        names = []
        if self.short:
            names.append("-" + self.short)
        if self.long:
            names.append("--" + self.long)
        return "/".join(names)

    __repr__ = _repr

    def takes_value(self) -> bool:
        return self.arg is not ArgType.NONE

    def matches(self, name: str) -> bool:
        return bool(name) and name in (self.short, self.long)


@dataclass
class Option:
    """An option found on the command line together with its arguments."""

    desc: Desc
    args: list[OptionValue] = field(default_factory=list)


class Options(list[Option]):
    """
    Options parsed from a command line, one entry per distinct descriptor
    in order of first appearance.

    Accessors look options up by either short or long name. The singular
    accessors (``get_int`` etc.) return the last value given for an
    option, or ``None`` if the option wasn't passed at all; the plural
    ones return every value in command line order.
    """

    def option(self, name: str) -> Optional[Option]:
        for opt in self:
            if opt.desc.matches(name):
                return opt
        return None

    def has(self, name: str) -> bool:
        return self.option(name) is not None

    def _args(self, name: str, arg: ArgType) -> list[OptionValue]:
        opt = self.option(name)
        if opt is None:
            return []
        if opt.desc.arg is not arg:
            raise OptionTypeError(
                f"option {opt.desc}: not {arg.name.lower()} option"
                f" (declared {opt.desc.arg.name.lower()})"
            )
        return list(opt.args)

    def _arg(self, name: str, arg: ArgType) -> Optional[OptionValue]:
        args = self._args(name, arg)
        if not args:
            return None
        return args[-1]

    @staticmethod
    def _or(value: Optional[T], default: T) -> T:
        if value is None:
            return default
        return value

    def get_int(self, name: str) -> Optional[int]:
        return self._arg(name, ArgType.INT)

    def get_ints(self, name: str) -> list[int]:
        return self._args(name, ArgType.INT)

    def get_int_or(self, name: str, default: int) -> int:
        return self._or(self.get_int(name), default)

    def get_float(self, name: str) -> Optional[float]:
        return self._arg(name, ArgType.FLOAT)

    def get_floats(self, name: str) -> list[float]:
        return self._args(name, ArgType.FLOAT)

    def get_float_or(self, name: str, default: float) -> float:
        return self._or(self.get_float(name), default)

    def get_string(self, name: str) -> Optional[str]:
        return self._arg(name, ArgType.STRING)

    def get_strings(self, name: str) -> list[str]:
        return self._args(name, ArgType.STRING)

    def get_string_or(self, name: str, default: str) -> str:
        return self._or(self.get_string(name), default)


class Parsed(NamedTuple):
    options: Options
    arguments: list[str]
