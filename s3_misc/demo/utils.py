# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Utility functions for the s3-misc demo.

This module provides logging configuration and timing/tracing helpers
for the demo runner.
"""

import logging
import os
import time

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s'

# Enable a debug trace of every request's parameters if requested
TRACE_OPERATIONS = os.environ.get('S3_MISC_TRACE_OPS', '').lower() in ('true', '1', 'yes')

logger = logging.getLogger('S3Misc')

def default_log_level() -> str:
    """Log level from ``S3_MISC_LOG_LEVEL``, defaulting to INFO."""
    return os.environ.get('S3_MISC_LOG_LEVEL', 'INFO').upper()

def configure_logging(level: str = None):
    """
    Configure logging for the demo.

    Log records go to stderr so they never mix with the responses printed
    on stdout.

    Args:
        level (str, optional): Level name such as ``DEBUG``. Defaults to
            :func:`default_log_level`.
    """
    level = (level or default_log_level()).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)

def time_function(func_name, start_time):
    """
    Helper function for timing operations.

    Calculates and logs the elapsed time for a step.

    Args:
        func_name (str): Name of the step being timed
        start_time (float): Start time from time.time()

    Returns:
        float: Elapsed time in seconds
    """
    elapsed = time.time() - start_time
    logger.debug(f"{func_name} completed in {elapsed:.4f} seconds")
    return elapsed

def trace_op(operation, key, **details):
    """
    Trace a request for debugging purposes.

    Logs the request parameters when the S3_MISC_TRACE_OPS environment
    variable is set.

    Args:
        operation (str): The operation being performed
        key (str): The object key or prefix the operation targets
        **details: Additional details to log
    """
    if TRACE_OPERATIONS:
        detail_str = ', '.join(f"{k}={v}" for k, v in details.items())
        logger.debug(f"TRACE: {operation} on {key} {detail_str}")
