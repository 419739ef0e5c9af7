"""
Logging module for the value_iteration library.

This module provides JSON-formatted logging functionality for the library.
The "value_iteration" logger stays silent until setup_logger is called.
"""

import logging

from value_iteration.logging.logger import (
    setup_logger,
    get_logger,
    log_cycle_closure,
    log_state_utility,
    log_empty_candidates
)

logging.getLogger("value_iteration").addHandler(logging.NullHandler())

__all__ = [
    "setup_logger",
    "get_logger",
    "log_cycle_closure",
    "log_state_utility",
    "log_empty_candidates"
]
