"""
Logger implementation for the value_iteration library.

This module provides JSON-formatted logging functionality for the library.
Logs are written to timestamped files in a 'logs' directory.
"""

import os
import json
import logging
import datetime
from typing import Any, Optional
import numpy as np

# JSON formatter that can handle numpy values, states and actions
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""
    
    def _serialize(self, obj: Any) -> Any:
        """Serialize objects to JSON-compatible format."""
        if isinstance(obj, np.ndarray):
            # Only show a sample for large arrays
            if obj.size > 100:
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, (list, tuple)):
            if len(obj) > 100:
                return [self._serialize(item) for item in list(obj)[:5]] + ["..."]
            return [self._serialize(item) for item in obj]
        elif isinstance(obj, dict):
            return {k: self._serialize(v) for k, v in obj.items()}
        elif isinstance(obj, (str, int, float, bool)) or obj is None:
            return obj
        # States, actions and other domain values are logged by their repr
        return repr(obj)
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }
        
        # Handle the case where the message is already a dict
        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()
            
            # Add any extra attributes
            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)
        
        return json.dumps(log_data)


# Logger configured by setup_logger, None until then
_logger = None

def setup_logger(
    debug: bool = False,
    log_level: str = "info",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up the logger with the specified configuration.
    
    Only the first call configures the logger; later calls return it as is.
    
    Args:
        debug: Whether to enable debugging
        log_level: The log level (debug, info, warning, error)
        log_file: Optional custom log file path
        
    Returns:
        Configured logger instance
    """
    global _logger
    
    if _logger is not None:
        return _logger
    
    logger = logging.getLogger("value_iteration")
    
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR
    }
    
    if debug:
        logger.setLevel(level_map.get(log_level.lower(), logging.INFO))
    else:
        logger.setLevel(logging.WARNING)  # Minimal logging when debug is False
    
    if log_file is None or not os.path.isabs(log_file):
        logs_dir = os.path.join(os.getcwd(), "logs")
        os.makedirs(logs_dir, exist_ok=True)
    
    if log_file is None:
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(logs_dir, f"value_iteration_{timestamp}.json")
    elif not os.path.isabs(log_file):
        # If relative path, put it in the logs directory
        log_file = os.path.join(logs_dir, log_file)
    
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)
    
    _logger = logger
    
    if debug:
        logger.info({
            "event": "logger_initialized",
            "log_level": log_level,
            "log_file": log_file
        })
    
    return logger


def get_logger() -> logging.Logger:
    """
    Get the library logger.
    
    Until setup_logger is called this is the bare "value_iteration" logger,
    which only has a NullHandler; nothing is written anywhere.
    
    Returns:
        Logger instance
    """
    if _logger is None:
        return logging.getLogger("value_iteration")
    
    return _logger


# Helper functions for common logging patterns

def log_cycle_closure(state: Any, next_state: Any, path_length: int) -> None:
    """
    Log that a next state was found on the visited path.
    
    Args:
        state: State being expanded
        next_state: Revisited state that closed the cycle
        path_length: Length of the visited path after the closure
    """
    logger = get_logger()
    
    if not logger.isEnabledFor(logging.DEBUG):
        return
    
    logger.debug({
        "event": "cycle_closure",
        "state": str(state),
        "next_state": str(next_state),
        "path_length": path_length
    })


def log_state_utility(state: Any, utility: float, num_actions: int) -> None:
    """
    Log the utility computed for a state.
    
    Args:
        state: Evaluated state
        utility: Best expected value over its actions
        num_actions: Number of actions that were compared
    """
    logger = get_logger()
    
    if not logger.isEnabledFor(logging.DEBUG):
        return
    
    logger.debug({
        "event": "state_utility",
        "state": str(state),
        "utility": utility,
        "num_actions": num_actions
    })


def log_empty_candidates(kind: str, state: Any, action: Any = None) -> None:
    """
    Log a modeling error where there was nothing to aggregate over.
    
    Args:
        kind: What was empty ("actions" or "outcomes")
        state: State being expanded
        action: Action whose outcomes were empty, if any
    """
    logger = get_logger()
    
    log_data = {
        "event": "empty_candidate_set",
        "kind": kind,
        "state": str(state)
    }
    
    if action is not None:
        log_data["action"] = str(action)
    
    logger.error(log_data)
