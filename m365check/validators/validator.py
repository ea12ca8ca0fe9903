import configparser
import logging
from abc import ABC, abstractmethod
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator, Union

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from m365check.utils.utils import get_log_root, get_random_user_agent, load_config, logfile, warning
from m365check.validators.structures.exceptions import LookupFailed
from m365check.validators.structures.verdict import Verdict


class Validator(ABC):
    """
    This interface is used to define the basic methods that must be implemented by all the remote lookup clients.
    A validator owns the HTTP session and the log file, and turns one address into at most one Verdict.
    It is the only place of the project allowed to touch the network.
    """
    def __init__(self, config: configparser.ConfigParser = None):
        self.config = config if config is not None else load_config()

        self.timeout = float(self.config.get("NETWORK", "timeout"))
        self.threads = max(1, int(self.config.get("NETWORK", "threads")))
        self.verify = int(self.config.get("NETWORK", "verify")) > 0
        self.debug = int(self.config.get("DEBUG", "developer")) > 0

        if not self.verify:
            urllib3.disable_warnings(InsecureRequestWarning)

        self.__headers = {
            "User-Agent": get_random_user_agent(),
            "Accept": "*/*",
            "Accept-Encoding": "gzip, deflate",
        }
        self.session = requests.session()
        self.session.verify = self.verify
        self.session.headers = self.__headers
        self.session.max_redirects = 5

        self.logger = logging.Logger(name="m365check")
        log_path = self.logfile()
        handler = logging.NullHandler()
        if log_path:
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                handler = logging.FileHandler(str(log_path), mode="a")
                handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            except OSError as e:
                # Lookups go on without a log file
                warning(f"Cannot write log file {log_path}: {e}")
        self.logger.addHandler(handler)
        self.logger.setLevel(level=logging.INFO if not self.debug else logging.DEBUG)

    def logfile(self) -> Union[Path, None]:
        fmt = self.config.get("LOGGING", "file")
        if not fmt or fmt.strip() == "":
            return None
        path = Path(logfile(fmt=fmt.strip(), script=self.__class__.__name__)).expanduser()
        if not path.is_absolute():
            path = get_log_root().joinpath(path)
        return path

    @property
    def request_timeout(self):
        # 0 means no timeout at all, as requests does by default
        return self.timeout if self.timeout > 0 else None

    def lookup(self, address: str) -> Verdict:
        if not address:
            raise ValueError("Cannot look up an empty address")
        self.logger.debug(f"Looking up {address}")
        verdict = self.execute(address)
        self.logger.info(f"{verdict.to_string()} (IfExistsResult: {verdict.code})")
        return verdict

    def safe_validate(self, address: str) -> tuple:
        try:
            return address, self.lookup(address), None
        except LookupFailed as e:
            self.logger.error(f"Lookup failed for {e}")
            return address, None, e

    def safe_lookup(self, address: str) -> Union[Verdict, None]:
        _, verdict, _ = self.safe_validate(address)
        return verdict

    def validate_all(self, addresses: Iterable[str]) -> Iterator[tuple]:
        """
        Yield (address, verdict, failure) for every address, in input order.
        Exactly one of verdict and failure is set.
        With more than one thread, lookups run on a bounded pool over a sliding window, but results are still
        handed back on the calling thread, so consumers never need a lock.
        """
        if self.threads <= 1:
            for address in addresses:
                yield self.safe_validate(address)
            return
        # At most threads * 2 addresses are in flight, the input is read lazily
        window = self.threads * 2
        pending = deque()
        executor = ThreadPoolExecutor(self.threads)
        try:
            for address in addresses:
                pending.append(executor.submit(self.safe_validate, address))
                if len(pending) >= window:
                    yield pending.popleft().result()
            while pending:
                yield pending.popleft().result()
        finally:
            for future in pending:
                future.cancel()
            executor.shutdown(wait=True)

    def close(self):
        self.session.close()
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @abstractmethod
    def execute(self, address: str) -> Verdict:
        pass
