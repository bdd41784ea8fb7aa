from .console import ConsoleChannel, run_console

__all__ = [
    "ConsoleChannel",
    "run_console",
]
