
"""
Option registry and argument walk.

Options are registered up front, each binding an option name (``P``, ``C``,
``NR``, ...) to a value parser and a destination. :meth:`CmdLineArgs.parse`
then walks the argument vector once:

1. ``argv[0]`` (the program name) is skipped.
2. ``/H`` and ``/HD`` print the short or detailed help and exit with status 0.
3. Every other token must be ``/<name>``; its value is the next argument.
   ``/<name>:<value>`` is accepted as well, when the config allows it.
4. The value is run through the option's parser.

All values are validated before any destination is written, so a failed
parse leaves every destination as it was. The first error stops the walk;
it is logged as a single line naming the option and the reason, followed by a
hint to ask for help, and its exit code is returned.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Sequence, Tuple, TypeVar

from .config import DispatcherConfig
from .destination import Destination
from .help import print_and_exit
from .logger import logger
from .user_error import UserError
from .value_parsers import ValueParseError


T = TypeVar("T")

OptionName = str
ValueParser = Callable[[str], T]


class DuplicateOption(ValueError):
    def __init__(self, name: OptionName) -> None:
        super().__init__(f"Option {name!r} is already registered.")
        self.name = name


class InvalidOptionName(ValueError):
    def __init__(self, name: OptionName, reason: str) -> None:
        super().__init__(f"Invalid option name {name!r}: {reason}.")
        self.name = name


class UnknownOption(UserError):
    def __init__(self, option: str) -> None:
        self.option = option
        self._init("Unknown option %s.", option)


class MissingValue(UserError):
    def __init__(self, option: str) -> None:
        self.option = option
        self._init("Option %s requires a value.", option)


class UnexpectedArgument(UserError):
    def __init__(self, token: str) -> None:
        self.token = token
        self._init("Unexpected argument %r, expected an option.", token)


class MissingRequiredOption(UserError):
    def __init__(self, option: str) -> None:
        self.option = option
        self._init("Option %s must be specified.", option)


class InvalidOptionValue(UserError):
    def __init__(self, option: str, reason: ValueParseError) -> None:
        self.option = option
        self.reason = reason
        self._init("Invalid value for option %s: " + reason.fmt,
                   option, *reason.fmt_args, code=reason.code)


@dataclass(frozen=True)
class _Option(Generic[T]):
    parser: ValueParser[T]
    destination: Destination[T]
    required: bool

    def __call__(self, token: str) -> T:
        return self.parser(token)

    def commit(self, value: T) -> None:
        self.destination.assign(value)


class CmdLineArgs:
    def __init__(self, config: DispatcherConfig = DispatcherConfig()) -> None:
        self.config = config
        self._options: Dict[OptionName, _Option[object]] = {}
        self._parsed = False

    def add_option(self,
                   name: OptionName,
                   parser: ValueParser[T],
                   destination: Destination[T],
                   required: bool = False,
                   ) -> None:
        """
        Bind ``destination`` to the option ``name``.

        On the command line, ``/<name> <token>`` will store ``parser(token)``
        into ``destination``. Registering a name twice is a programming error
        and raises :class:`DuplicateOption`.
        """

        self._check_name(name)
        if name in self._options or name in self.config.reserved_names:
            raise DuplicateOption(name)
        self._options[name] = _Option(parser, destination, required)  # type: ignore

    def _check_name(self, name: OptionName) -> None:
        if not name:
            raise InvalidOptionName(name, "must not be empty")
        if self.config.introducer in name:
            raise InvalidOptionName(name, f"must not contain {self.config.introducer!r}")
        separator = self.config.value_separator
        if separator is not None and separator in name:
            raise InvalidOptionName(name, f"must not contain {separator!r}")
        if any(c.isspace() for c in name):
            raise InvalidOptionName(name, "must not contain whitespace")

    def display(self, name: OptionName) -> str:
        return self.config.introducer + name

    def parse(self, argv: Sequence[str], params: object) -> int:
        """
        Process the arguments once all options have been added.

        ``params`` is the aggregate the destinations point into. It is not
        touched here other than through the destinations.
        Returns 0 on success and a non-zero exit code otherwise.
        """

        if self._parsed:
            raise RuntimeError("CmdLineArgs.parse() may only be called once.")
        self._parsed = True

        try:
            pending = self._walk(argv[1:])
        except UserError as e:
            program = argv[0] if argv else "sim"
            logger.error(e.fmt, *e.fmt_args)
            logger.error("Run '%s %s' for usage.",
                         program, self.display(self.config.help_switch))
            return e.code

        for option, value in pending:
            option.commit(value)

        logger.debug("Parsed parameters: %r.", params)
        return 0

    def _walk(self, args: Sequence[str]) -> List[Tuple[_Option[object], object]]:
        pending: List[Tuple[_Option[object], object]] = []
        seen = set()

        i = 0
        while i < len(args):
            token = args[i]

            if token == self.display(self.config.help_switch):
                print_and_exit(self.config.short_help)
            if token == self.display(self.config.detailed_help_switch):
                print_and_exit(self.config.detailed_help)

            if len(token) < 2 or not token.startswith(self.config.introducer):
                raise UnexpectedArgument(token)

            name = token[1:]
            separator = self.config.value_separator
            if separator is not None and separator in name:
                name, value = name.split(separator, 1)
                i += 1
            elif i + 1 < len(args):
                value = args[i + 1]
                i += 2
            elif name in self._options:
                raise MissingValue(token)
            else:
                raise UnknownOption(token)

            try:
                option = self._options[name]
            except KeyError:
                raise UnknownOption(self.display(name))

            try:
                parsed = option(value)
            except ValueParseError as e:
                raise InvalidOptionValue(self.display(name), e) from e

            if name in seen:
                logger.debug("Option %s given again, using the last value.",
                             self.display(name))
            seen.add(name)
            pending.append((option, parsed))

        for name, option in self._options.items():
            if option.required and name not in seen:
                raise MissingRequiredOption(self.display(name))

        return pending
