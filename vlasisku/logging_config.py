"""
Logging setup for the vlasisku command line.

Query results are written to stdout, so log records only ever go to stderr
and, when asked for, to a log file.
"""
import logging
import sys

PLAIN_FORMAT = '%(levelname)s: %(message)s'
DEBUG_FORMAT = '%(asctime)s %(name)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s'

# Context values longer than this are cut off
MAX_CONTEXT_CHARS = 200


def setup_logging(log_file=None, level=logging.WARNING, debug=False):
    """
    Route log records to stderr and optionally to a file.

    Calling it again replaces the handlers of the previous call.

    Args:
        log_file: Optional path to a log file, opened in append mode.
        level: Logging level (default: WARNING).
        debug: If True, log at DEBUG with timestamps and source locations.
    """
    if debug:
        level = logging.DEBUG
    formatter = logging.Formatter(DEBUG_FORMAT if debug else PLAIN_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger(__name__).debug(
        f"Logging at {logging.getLevelName(level)}"
        + (f", appending to {log_file}" if log_file else "")
    )


def _shorten(value):
    text = str(value)
    if len(text) > MAX_CONTEXT_CHARS:
        return text[:MAX_CONTEXT_CHARS] + "..."
    return text


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message, then one DEBUG line per context entry.

    Context lines are only built when DEBUG is enabled.
    """
    logger = logger or logging.getLogger()
    logger.log(level, message)

    if not context or not logger.isEnabledFor(logging.DEBUG):
        return
    for key, value in context.items():
        logger.debug(f"  {key}: {_shorten(value)}")
