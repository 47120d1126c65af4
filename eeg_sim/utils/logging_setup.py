"""
Logging configuration for EEG simulation
"""

import logging


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for simulation runs

    - INFO: what is being simulated (event counts, signal shapes)
    - DEBUG: per-stage details (onset ranges, source shapes)

    Args:
        debug: If True, enable DEBUG level logging
    """
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Reduce verbosity of third-party libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('mne').setLevel(logging.WARNING)

    if debug:
        logging.info("Debug logging enabled")
