"""A command-line parser that walks the arguments one option at a time.

Arguments that are not options are collected as files, in the order they
appeared on the command line. Options may be matched partially, clumped
(``-abc``), carry combined (``--opt=ARG``, ``-oARG``) or separate
(``-o ARG``) arguments, or take several following arguments.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from cycutil.options import ArgType, OptError, OptFlag, OptionSpec, lookup_option

# A leading slash stands for a hyphen only where paths do not start with one.
_ACCEPT_SLASH = sys.platform == "win32"


@dataclass(frozen=True)
class ParsedOption:
    """One processed option.

    ``id`` is the option table id, or -1 when the option could not be
    identified. ``text`` is the option name from the table (or the text seen
    on the command line for an unknown option). ``arg`` is the option's
    argument where one was given. ``error`` tells whether processing
    succeeded.
    """

    id: int
    text: Optional[str]
    arg: Optional[str]
    error: OptError = OptError.SUCCESS

    @property
    def ok(self) -> bool:
        return self.error is OptError.SUCCESS


class MultiArgError(Exception):
    """Raised when the requested option arguments cannot be supplied."""

    def __init__(self, error: OptError) -> None:
        super().__init__(f"cannot take option arguments: {error.name}")
        self.error = error


class SimpleOpt:
    """Parse ``argv`` against a table of :class:`OptionSpec` entries.

    Call :meth:`next` (or iterate) until it is exhausted, then read the
    remaining arguments with :meth:`files`. The first element of ``argv`` is
    taken as the program name and skipped unless ``OptFlag.USEALL`` is set.
    The list passed in is not modified.
    """

    def __init__(
        self, argv: Sequence[str], options: Sequence[OptionSpec], flags: int = 0
    ) -> None:
        self._argv: List[str] = list(argv)
        self._last_arg = len(self._argv)
        self._options: Sequence[OptionSpec] = options
        self._flags = int(flags)
        self._next_option = 0 if self._flags & OptFlag.USEALL else 1
        self._clump: Optional[str] = None
        self._last_error = OptError.SUCCESS

    def __iter__(self) -> Iterator[ParsedOption]:
        while (parsed := self.next()) is not None:
            yield parsed

    def set_options(self, options: Sequence[OptionSpec]) -> None:
        """Replace the option table; takes effect from the next option."""
        self._options = options

    def set_flags(self, flags: int) -> None:
        """Replace the flags. Changing ``OptFlag.USEALL`` here has no effect."""
        self._flags = int(flags)

    def has_flag(self, flag: int) -> bool:
        """True when every bit of ``flag`` is set."""
        return (self._flags & int(flag)) == int(flag)

    def files(self) -> List[str]:
        """The arguments that were not processed as options."""
        return self._argv[self._last_arg:]

    def stop(self) -> None:
        """Treat every argument not yet processed as a file."""
        if self._next_option < self._last_arg:
            self._shuffle(self._next_option, self._last_arg - self._next_option)

    def multi_arg(self, count: int) -> List[str]:
        """Take the next ``count`` arguments as arguments of the current option.

        Raises :class:`MultiArgError` when too few arguments remain or when
        one of them looks like an option (unless ``OptFlag.NOERR`` is set).
        """
        result = self._take_args(count)
        if isinstance(result, OptError):
            raise MultiArgError(result)
        return result

    def next(self) -> Optional[ParsedOption]:
        """Process the next option; None once all options are processed."""
        if self._clump:
            parsed, valid = self._next_clumped()
            while self._clump and not valid and self.has_flag(OptFlag.NOERR):
                parsed, valid = self._next_clumped()
            if valid or not self.has_flag(OptFlag.NOERR):
                return parsed
        self._clump = None

        option_idx = self._next_option
        self._last_error = OptError.SUCCESS
        table_idx: int = OptError.OPT_INVALID
        opt_idx = option_idx
        option_text: Optional[str] = None
        option_arg: Optional[str] = None

        while table_idx < 0 and opt_idx < self._last_arg:
            option_arg = None
            arg = self._prepare(self._argv[opt_idx])
            if arg.startswith("-"):
                name, sep, rest = arg.partition("=")
                if sep:
                    arg, option_arg = name, rest
            table_idx = lookup_option(self._options, arg, self._flags)

            # Not found: try the short forms "-oARG" and "-abc".
            if (
                table_idx < 0
                and option_arg is None
                and len(arg) > 2
                and arg[0] == "-"
                and arg[1] != "-"
            ):
                if self.has_flag(OptFlag.SHORTARG):
                    short = "-" + arg[1]
                    idx = lookup_option(self._options, short, self._flags)
                    if idx >= 0 and self._options[idx].arg_type in (
                        ArgType.REQ_CMB,
                        ArgType.OPT,
                    ):
                        option_arg = arg[2:]
                        arg = short
                        table_idx = idx

                if table_idx < 0 and self.has_flag(OptFlag.CLUMP):
                    self._clump = arg[1:]
                    self._next_option += 1
                    if opt_idx > option_idx:
                        self._shuffle(option_idx, opt_idx - option_idx)
                    return self.next()

            if table_idx < 0:
                if not self.has_flag(OptFlag.NOERR) and arg.startswith("-"):
                    option_text = arg
                    break
                opt_idx += 1

        if opt_idx >= self._last_arg:
            if opt_idx > option_idx:
                self._shuffle(option_idx, opt_idx - option_idx)
            return None
        self._next_option += 1

        option_id = -1
        arg_type = ArgType.NONE
        error = OptError.SUCCESS
        if table_idx < 0:
            error = OptError(table_idx)
        else:
            spec = self._options[table_idx]
            option_id = spec.id
            option_text = spec.text
            arg_type = spec.arg_type
            if arg_type is ArgType.NONE:
                if option_arg is not None:
                    error = OptError.ARG_INVALID
            elif arg_type is ArgType.REQ_SEP:
                if option_arg is not None and self.has_flag(OptFlag.PEDANTIC):
                    error = OptError.ARG_INVALID_TYPE
            elif arg_type is ArgType.REQ_CMB:
                if option_arg is None:
                    error = OptError.ARG_MISSING

        if opt_idx > option_idx:
            self._shuffle(option_idx, opt_idx - option_idx)

        if arg_type is ArgType.REQ_SEP and option_arg is None and error is OptError.SUCCESS:
            taken = self._take_args(1)
            if isinstance(taken, OptError):
                error = taken
            else:
                option_arg = taken[0]

        self._last_error = error
        return ParsedOption(option_id, option_text, option_arg, error)

    def _prepare(self, arg: str) -> str:
        if (
            _ACCEPT_SLASH
            and not self.has_flag(OptFlag.NOSLASH)
            and len(arg) > 1
            and arg[0] == "/"
            and arg[1] != "-"
        ):
            return "-" + arg[1:]
        return arg

    def _next_clumped(self) -> tuple:
        assert self._clump
        short = "-" + self._clump[0]
        self._clump = self._clump[1:]

        # clumped options are always matched exactly
        table_idx = lookup_option(self._options, short, OptFlag.EXACT)
        if table_idx < 0:
            error = OptError(table_idx)
            self._last_error = error
            return ParsedOption(-1, short, None, error), False

        spec = self._options[table_idx]
        if spec.arg_type is ArgType.NONE:
            self._last_error = OptError.SUCCESS
            return ParsedOption(spec.id, spec.text, None), True

        if spec.arg_type is ArgType.REQ_CMB and self._clump:
            arg = self._clump
            self._clump = ""
            self._last_error = OptError.SUCCESS
            return ParsedOption(spec.id, spec.text, arg), True

        self._last_error = OptError.ARG_MISSING
        return ParsedOption(-1, spec.text, None, OptError.ARG_MISSING), True

    def _take_args(self, count: int):
        if self._next_option + count > self._last_arg:
            self._last_error = OptError.ARG_MISSING
            return OptError.ARG_MISSING
        args = self._argv[self._next_option:self._next_option + count]
        if not self.has_flag(OptFlag.NOERR):
            if any(self._prepare(a).startswith("-") for a in args):
                self._last_error = OptError.ARG_INVALID_DATA
                return OptError.ARG_INVALID_DATA
        self._next_option += count
        return args

    def _shuffle(self, start: int, count: int) -> None:
        """Move ``count`` arguments at ``start`` to the end, among the files."""
        moved = self._argv[start:start + count]
        del self._argv[start:start + count]
        self._argv.extend(moved)
        self._last_arg -= count