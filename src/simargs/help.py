
import sys
from typing import NoReturn


SHORT_HELP = """\
Usage: sim /P <param-file> /O <output-prefix> [options]

  /P  <file>     Parameter file (required).
  /O  <prefix>   Output file path prefix (required).
  /PP <file>     Pre-parameter file.
  /D  <file>     Population density file.
  /C  <n>        Number of threads.
  /NR <n>        Number of realisations.
  /S  <seed>     Setup seed.
  /R  <seed>     Run seed.
  /L  <level>    Log level.

  /H             Show this message.
  /HD            Show detailed help.
"""

DETAILED_HELP = """\
Usage: sim /P <param-file> /O <output-prefix> [options]

Every option takes exactly one value, either as the next argument
(/P params.txt) or joined to the option with a colon (/P:params.txt).
Option names are case-sensitive. If an option is given more than once,
the last value is used.

Required:
  /P <file>
      Parameter file. Must exist and be readable.
  /O <prefix>
      Output file path prefix. The directory it points into must exist and
      be writable. Output files are named <prefix>.<suffix>.

Input files:
  /PP <file>
      Pre-parameter file holding values shared between parameter files.
      Must exist and be readable.
  /D <file>
      Population density file. Must exist and be readable.

Run control:
  /C <n>
      Number of threads, at least 1. Default: 1.
  /NR <n>
      Number of realisations to run, at least 1. Default: 1.
  /S <seed>
      Seed for setting up the network. Integer in [-2147483647, 2147483647].
  /R <seed>
      Seed for running the realisations. Same range as /S.

Diagnostics:
  /L <level>
      One of debug, info, warning, error. Default: warning.
      Diagnostics are written to standard error.

Help:
  /H     Show the short usage summary and exit.
  /HD    Show this message and exit.

Exit status is 0 on success and 1 on any error in the arguments.
"""


def print_and_exit(text: str) -> NoReturn:
    sys.stdout.write(text)
    sys.stdout.flush()
    sys.exit(0)


def print_help_and_exit() -> NoReturn:
    print_and_exit(SHORT_HELP)


def print_detailed_help_and_exit() -> NoReturn:
    print_and_exit(DETAILED_HELP)
