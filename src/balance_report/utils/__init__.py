"""Utils for the balance report."""

from .logger import get_logger, setup_logging
from .token_math import LAMPORTS_PER_SOL, lamports_to_sol, sum_ui_amounts
