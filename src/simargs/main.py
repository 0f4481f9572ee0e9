
from typing import Sequence
from .mainwrap import mainwrap
from .dispatcher import CmdLineArgs
from .destination import Field
from .params import SimParams
from .user_error import UserError
from .logger import logger
from .value_parsers import (
    parse_read_file,
    parse_write_dir_prefix,
    parse_integer,
    parse_long,
    parse_log_level,
)


class InvalidParameter(UserError):
    def __init__(self, option: str, value: object, reason: str) -> None:
        self.option = option
        self._init("Option %s: %r %s.", option, value, reason)


def cli_args(params: SimParams) -> CmdLineArgs:
    args = CmdLineArgs()
    args.add_option("P", parse_read_file, Field(params, "param_file"), required=True)
    args.add_option("O", parse_write_dir_prefix, Field(params, "output_prefix"), required=True)
    args.add_option("PP", parse_read_file, Field(params, "pre_param_file"))
    args.add_option("D", parse_read_file, Field(params, "density_file"))
    args.add_option("C", parse_integer, Field(params, "num_threads"))
    args.add_option("NR", parse_integer, Field(params, "num_realisations"))
    args.add_option("S", parse_long, Field(params, "setup_seed"))
    args.add_option("R", parse_long, Field(params, "run_seed"))
    args.add_option("L", parse_log_level, Field(params, "log_level"))
    return args


def check_params(params: SimParams) -> None:
    if params.num_threads < 1:
        raise InvalidParameter("/C", params.num_threads, "must be at least 1")
    if params.num_realisations < 1:
        raise InvalidParameter("/NR", params.num_realisations, "must be at least 1")


def main(argv: Sequence[str]) -> int:
    params = SimParams()
    rc = cli_args(params).parse(argv, params)
    if rc != 0:
        return rc

    logger.setLevel(params.log_level)
    check_params(params)

    logger.info("Parameter file: %r.", params.param_file)
    logger.info("Output prefix: %r.", params.output_prefix)
    if params.pre_param_file is not None:
        logger.info("Pre-parameter file: %r.", params.pre_param_file)
    if params.density_file is not None:
        logger.info("Density file: %r.", params.density_file)
    logger.info("Using %s thread(s) for %s realisation(s).",
                params.num_threads, params.num_realisations)
    logger.debug("Seeds: setup=%r, run=%r.", params.setup_seed, params.run_seed)
    return 0


def cli() -> None:
    mainwrap(main)


if __name__ == "__main__": cli()  # noqa
