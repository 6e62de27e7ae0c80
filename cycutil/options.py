"""Option table definitions and option-name matching for command-line parsing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence, Union

PERFECT_MATCH = -1
"""Returned by :func:`calc_match` when the whole option name matched."""


class OptError(enum.IntEnum):
    """Outcome of processing one command-line argument."""

    SUCCESS = 0
    # Looks like an option but is not in the option table.
    OPT_INVALID = -1
    # Several options partially matched the text (only without EXACT).
    OPT_MULTIPLE = -2
    # The option takes no argument but a combined one was supplied.
    ARG_INVALID = -3
    # A combined argument was given to a separate-argument option (PEDANTIC).
    ARG_INVALID_TYPE = -4
    # A required argument was not supplied.
    ARG_MISSING = -5
    # An option argument looks like another option (not with NOERR).
    ARG_INVALID_DATA = -6


class OptFlag(enum.IntFlag):
    """Flags that change how arguments are parsed."""

    NONE = 0
    EXACT = 0x0001
    NOSLASH = 0x0002
    SHORTARG = 0x0004
    CLUMP = 0x0008
    USEALL = 0x0010
    NOERR = 0x0020
    PEDANTIC = 0x0040
    ICASE_SHORT = 0x0100
    ICASE_LONG = 0x0200
    ICASE_WORD = 0x0400
    ICASE = 0x0700


class ArgType(enum.Enum):
    """Kind of argument an option accepts."""

    NONE = enum.auto()  # -o, --opt
    REQ_SEP = enum.auto()  # -o ARG, --opt ARG
    REQ_CMB = enum.auto()  # -oARG, -o=ARG, --opt=ARG
    OPT = enum.auto()  # -o[ARG], -o[=ARG], --opt[=ARG]
    MULTI = enum.auto()  # -o N ARG1 ... ARGN


@dataclass(frozen=True)
class OptionSpec:
    """One entry of the option table.

    ``text`` is the name to match, e.g. ``"open"``, ``"-"``, ``"-f"`` or
    ``"--file"``. Names always use hyphens; a slash marker on the command
    line is turned into a hyphen before matching.
    """

    id: int
    text: str
    arg_type: ArgType = ArgType.NONE

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError("option id must not be negative")
        if not self.text:
            raise ValueError("option text must not be empty")
        if self.text.startswith("/"):
            raise ValueError("option text must use '-' as its marker, not '/'")


def _kind_flag(source: str) -> OptFlag:
    """The case-insensitivity flag that applies to an option name."""
    if not source.startswith("-"):
        return OptFlag.ICASE_WORD
    if len(source) <= 2 and source[1:2] != "-":
        return OptFlag.ICASE_SHORT
    return OptFlag.ICASE_LONG


def _fold(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def calc_match(source: Optional[str], test: Optional[str], flags: int = 0) -> int:
    """Count how many characters of ``test`` match the option name ``source``.

    Returns ``PERFECT_MATCH`` (-1) for a full match, 0 for no match, and the
    number of matching characters (leading hyphens excluded) when ``test`` is
    a strict prefix of ``source``.
    """
    if not source or test is None:
        return 0

    kind = _kind_flag(source)
    icase = bool(int(flags) & int(kind))

    # match and skip leading hyphens
    i = 0
    while i < len(source) and source[i] == "-" and i < len(test) and test[i] == "-":
        i += 1
    src = source[i:]
    tst = test[i:]
    if src.startswith("-") or tst.startswith("-"):
        return 0

    length = 0
    for s_ch, t_ch in zip(src, tst):
        if icase:
            s_ch, t_ch = _fold(s_ch), _fold(t_ch)
        if s_ch != t_ch:
            break
        length += 1

    if length == len(src):
        # source exhausted: perfect only if test is exhausted too
        return PERFECT_MATCH if length == len(tst) else 0
    if length < len(tst):
        # test has characters left that did not match
        return 0
    return length


def lookup_option(
    options: Sequence[OptionSpec], text: str, flags: int = 0
) -> Union[int, OptError]:
    """Find ``text`` in the option table.

    Returns the index of the matching option. A partial match is accepted
    only without ``OptFlag.EXACT`` and only when it is a clear winner.
    Otherwise returns ``OptError.OPT_INVALID`` or ``OptError.OPT_MULTIPLE``.
    """
    best = -1
    best_len = 0
    last_len = 0

    for index, option in enumerate(options):
        match_len = calc_match(option.text, text, flags)
        if match_len == PERFECT_MATCH:
            return index
        if match_len > 0 and match_len >= best_len:
            last_len = best_len
            best_len = match_len
            best = index

    if (int(flags) & OptFlag.EXACT) or best == -1:
        return OptError.OPT_INVALID
    return best if best_len > last_len else OptError.OPT_MULTIPLE