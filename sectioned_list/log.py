"""Log helpers with a [sectioned_list] prefix."""

from sectioned_list.config import get_config


def log(message):
    """Log a message with [sectioned_list] prefix."""
    print(f"[sectioned_list] {message}")


def debug(message, verbose=None):
    """Log only when verbose is true.

    With verbose left as None, logging.verbose from the config decides.
    """
    if verbose is None:
        verbose = get_config()["logging"]["verbose"]
    if verbose:
        log(message)
