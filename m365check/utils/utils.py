import configparser
import sys
import threading
import time
from pathlib import Path
from typing import Union

from colorama import Fore
from random_user_agent.params import SoftwareName, OperatingSystem
from random_user_agent.user_agent import UserAgent

LINE_FEED = '\n'

PRINT_LOCK = threading.Lock()

DEFAULTS = {
    "NETWORK": {
        "timeout": "30",
        "threads": "1",
        "verify": "1",
    },
    "LOGGING": {
        "file": "m365check_#date#.log",
    },
    "DEBUG": {
        "developer": "0",
    },
}


def get_project_root() -> Path:
    return Path(__file__).parent.parent


def get_log_root() -> Path:
    return Path.home().joinpath(".m365check", "log")


def load_config(path: Union[str, Path, None] = None) -> configparser.ConfigParser:
    """
    Build the runtime configuration.
    Built-in defaults are loaded first, then the bundled config.ini, then the user supplied file (if any).
    Missing files are silently skipped, so every key always has a value.
    """
    config = configparser.ConfigParser(allow_no_value=True, interpolation=configparser.ExtendedInterpolation())
    config.read_dict(DEFAULTS)
    config.read(str(get_project_root().joinpath("config", "config.ini")))
    if path:
        config.read(str(path))
    return config


def validate_config(config: configparser.ConfigParser):
    """
    Make sure every numeric setting parses, so a bad value is reported before any lookup.
    """
    for section, key, cast in [
        ("NETWORK", "timeout", float),
        ("NETWORK", "threads", int),
        ("NETWORK", "verify", int),
        ("DEBUG", "developer", int),
    ]:
        value = config.get(section, key)
        try:
            cast(value)
        except (TypeError, ValueError):
            raise ValueError(f"[{section}] {key} = {value!r} is not a valid {cast.__name__}")


def colors(string, color):
    return f"{color}{string}{Fore.RESET}"


def colored(message, color: Fore, symbol="*", indent=0):
    return " " * indent + colors(f"[{symbol}] ", color) + message


def thread_safe_print(message, flush=False, lock=None):
    if not lock:
        lock = PRINT_LOCK
    with lock:
        print(message, flush=flush)


def info(message, indent=0, lock=None):
    thread_safe_print(colored(message, indent=indent, symbol="*", color=Fore.BLUE), flush=True, lock=lock)


def error(message, indent=0, lock=None):
    thread_safe_print(colored(message, indent=indent, symbol="-", color=Fore.RED), flush=True, lock=lock)


def fatal(message, indent=0, lock=None):
    thread_safe_print(colored(message, indent=indent, symbol="-", color=Fore.RED), flush=True, lock=lock)
    sys.exit(1)


def success(message, indent=0, lock=None):
    thread_safe_print(colored(message, indent=indent, symbol="+", color=Fore.GREEN), flush=True, lock=lock)


def warning(message, indent=0, lock=None):
    thread_safe_print(colored(message, indent=indent, symbol="#", color=Fore.YELLOW), flush=True, lock=lock)


def progress(message, indent=0, lock=None):
    thread_safe_print(colored(message, indent=indent, symbol=">", color=Fore.CYAN), flush=True, lock=lock)


def highlight(what, color=Fore.LIGHTCYAN_EX):
    return f"{color}{what}{Fore.RESET}"


def time_label():
    return time.strftime('%Y%m%d%H%M%S')


def logfile(fmt: str, script: str):
    return fmt.replace(
        "#date#", time_label()
    ).replace(
        "#enumerator#", script
    )


def get_random_user_agent():
    software_names = [SoftwareName.CHROME.value]
    operating_systems = [OperatingSystem.WINDOWS.value, OperatingSystem.LINUX.value]
    user_agent_rotator = UserAgent(software_names=software_names, operating_systems=operating_systems, limit=100)

    return user_agent_rotator.get_random_user_agent()
