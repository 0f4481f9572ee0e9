
from dataclasses import dataclass
from typing import Optional
import logging


@dataclass
class SimParams:
    """Parameters of a simulation run, as given on the command line."""
    param_file: Optional[str] = None
    pre_param_file: Optional[str] = None
    density_file: Optional[str] = None
    output_prefix: Optional[str] = None
    num_threads: int = 1
    num_realisations: int = 1
    setup_seed: Optional[int] = None
    run_seed: Optional[int] = None
    log_level: int = logging.WARN
