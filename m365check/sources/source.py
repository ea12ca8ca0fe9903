import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Union


def normalize(token: str) -> str:
    return token.strip()


class AddressSource(ABC):
    """
    A finite, non-restartable stream of candidate addresses.
    Every address handed out is trimmed and non-empty.
    """
    def __iter__(self) -> Iterator[str]:
        return self.addresses()

    @abstractmethod
    def addresses(self) -> Iterator[str]:
        pass

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class LiteralSource(AddressSource):
    def __init__(self, value: str):
        self.value = value

    def addresses(self) -> Iterator[str]:
        address = normalize(self.value or "")
        if address:
            yield address


class FileSource(AddressSource):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        # Opened right away, a missing file must abort the run before any lookup
        self.__handle = open(self.path, "rb")

    def addresses(self) -> Iterator[str]:
        for raw in self.__handle:
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            address = normalize(line)
            if not address:
                continue
            yield address

    def close(self):
        self.__handle.close()


class InteractiveSource(AddressSource):
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def addresses(self) -> Iterator[str]:
        try:
            line = self.stream.readline()
        except (OSError, UnicodeDecodeError):
            return
        address = normalize(line or "")
        if address:
            yield address
