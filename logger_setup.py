# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "circle_sim"
LOG_ROOT = "runs"
LOG_FILE_NAME = "animation.log"

def _build_handlers(log_file, fmt):
    """Console and file handlers sharing one formatter."""
    formatter = logging.Formatter(fmt)
    handlers = [logging.FileHandler(log_file), logging.StreamHandler()]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers

def configure_logger(run_id, level, fmt, log_root=LOG_ROOT):
    """
    Points the "circle_sim" logger at runs/<run_id>/animation.log and the console.

    Data Contract:
    - Inputs:
        - run_id (str): Names the log directory of this run.
        - level (str | int): Logging level, e.g. "INFO".
        - fmt (str): logging.Formatter format string.
        - log_root (str): Parent directory of all run directories.
    - Outputs: str - Path of the log file.
    - Side Effects: Creates the run directory. Replaces (and closes) any
      handlers a previous call attached.
    - Invariants: The logger never propagates to root, so pygame and numba
      output stays out of the run log.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    run_dir = os.path.join(log_root, run_id)
    os.makedirs(run_dir, exist_ok=True)
    log_file = os.path.join(run_dir, LOG_FILE_NAME)

    for stale in list(logger.handlers):
        stale.close()
        logger.removeHandler(stale)
    for handler in _build_handlers(log_file, fmt):
        logger.addHandler(handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return log_file

def setup_logging(config_path='config.json'):
    """
    Configures application logging from the 'run_id' and 'logging' entries
    ('level', 'format') of the config file. Returns the log file path.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    log_config = config['logging']
    return configure_logger(config['run_id'], log_config['level'], log_config['format'])
