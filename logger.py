import sys

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = bool(enabled)


def is_verbose() -> bool:
    return _verbose


def print_(*args, file=None) -> None:
    """Prints a debug line, only when verbose output is on."""
    if not _verbose:
        return
    print("DEBUG:", *args, file=file if file is not None else sys.stdout)
