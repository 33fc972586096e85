"""Console output utilities, colors and input diagnostics"""

import os
import sys


class Colors:
    """ANSI colors for terminal output"""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"

    @classmethod
    def disable(cls):
        """Disable colors for non-TTY or when NO_COLOR is set"""
        cls.RESET = cls.RED = cls.GREEN = ""


# Initialize colors based on environment
if os.environ.get("NO_COLOR"):
    Colors.disable()
elif not sys.stdout.isatty():
    Colors.disable()


# Error categories reported by print_warning
ERR_OVERFLOW = "overflow"
ERR_NO_FQDN = "no FQDN input"
ERR_NO_PORT = "no port input"


def print_newline():
    """Print a blank line"""
    print()


def print_warning(func_name: str, err_type: str):
    """Print a warning naming the error category and the function it came from"""
    print(f"{Colors.RED}Warning! Error: {err_type} in function {func_name}{Colors.RESET}")


def print_overflow(func_name: str, num: int):
    """Print the number of overflows, if any"""
    if num > 0:
        print_warning(func_name, ERR_OVERFLOW)
        print(f"{Colors.RED}Number of overflows: {num}{Colors.RESET}")


def print_prompt(text: str):
    """Print a prompt without a trailing newline"""
    print(text, end="", flush=True)


def msg_echo(text: str):
    """Print a confirmation line"""
    print(f"{Colors.GREEN}{text}{Colors.RESET}")
