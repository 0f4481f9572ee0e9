
from dataclasses import dataclass
from typing import Optional

from .help import SHORT_HELP, DETAILED_HELP


@dataclass(frozen=True)
class DispatcherConfig:
    """
    Fixed conventions of a command line.

      .introducer           : lead character of an option token
      .help_switch          : name printing the short help
      .detailed_help_switch : name printing the detailed help
      .value_separator      : joins a name and its value in one token
                              (/P:file.txt); None accepts only /P file.txt
      .short_help           : text for help_switch
      .detailed_help        : text for detailed_help_switch
    """
    introducer: str = "/"
    help_switch: str = "H"
    detailed_help_switch: str = "HD"
    value_separator: Optional[str] = ":"
    short_help: str = SHORT_HELP
    detailed_help: str = DETAILED_HELP

    def __post_init__(self) -> None:
        if len(self.introducer) != 1:
            raise ValueError(f"Introducer must be a single character, got {self.introducer!r}.")
        if self.value_separator == "":
            raise ValueError("Value separator must be None or non-empty.")
        if self.value_separator is not None and self.introducer in self.value_separator:
            raise ValueError(f"Value separator {self.value_separator!r} must not contain the introducer.")
        for switch in (self.help_switch, self.detailed_help_switch):
            if not switch or self.introducer in switch:
                raise ValueError(f"Invalid help switch {switch!r}.")
            if self.value_separator is not None and self.value_separator in switch:
                raise ValueError(f"Help switch {switch!r} must not contain the value separator.")
        if self.help_switch == self.detailed_help_switch:
            raise ValueError("Help switches must differ.")

    @property
    def reserved_names(self) -> frozenset[str]:
        return frozenset((self.help_switch, self.detailed_help_switch))
