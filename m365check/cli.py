import argparse
import configparser
import os
from pathlib import Path

from colorama import Fore, Style

from m365check import __version__
from m365check.actions.check import Check
from m365check.utils.utils import load_config, validate_config, warning, fatal

BANNER = [
    "Microsoft 365 User Checker",
    "Written by Keiran \"Affix\" Smith",
    "https://github.com/Affix/m365check",
]


def print_logo():
    for line in BANNER:
        print(f"{Style.BRIGHT}{Fore.MAGENTA}{line}{Style.RESET_ALL}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Checks whether e-mail addresses belong to existing Microsoft 365 accounts. "
                    "Without --email or --file, a single address is read from standard input."
    )
    parser.add_argument("-e", "--email", required=False, default=None,
                        help="E-mail address of a single user to check")
    parser.add_argument("-f", "--file", required=False, default=None,
                        help="File containing a list of e-mail addresses to check, one per line")
    parser.add_argument("-t", "--threads", required=False, default=None, type=int,
                        help="Concurrent lookups in file mode (Override config)")
    parser.add_argument("--timeout", required=False, default=None, type=float,
                        help="Seconds to wait for each lookup, 0 to wait forever (Override config)")
    parser.add_argument("-c", "--config", required=False, default=None,
                        help="Configuration file")
    parser.add_argument("-v", "--verbose", required=False, action="store_true",
                        help="Log responses of the identity service")
    parser.add_argument("--no-banner", required=False, action="store_true",
                        help="Do not print the banner")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    if os.name == 'nt':
        os.system('color')
    args = build_parser().parse_args(argv)
    if not args.no_banner:
        print_logo()

    if args.config and not Path(args.config).is_file():
        warning(f"Configuration file {args.config} not found, using defaults")
    try:
        config = load_config(args.config)
        if args.threads is not None:
            config.set("NETWORK", "threads", str(args.threads))
        if args.timeout is not None:
            config.set("NETWORK", "timeout", str(args.timeout))
        if args.verbose:
            config.set("DEBUG", "developer", "1")
        validate_config(config)
    except (configparser.Error, ValueError) as e:
        fatal(f"Invalid configuration: {e}")

    Check(config).safe_execute(**vars(args))
    return 0
