from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from m365check.utils.utils import LINE_FEED, success, error, highlight
from m365check.validators.structures.enums import IfExistsResult
from m365check.validators.structures.exceptions import LookupFailed
from m365check.validators.structures.verdict import Verdict


class ResultSink(ABC):
    def __init__(self):
        self.valid = 0
        self.invalid = 0
        self.failed = 0

    def accept(self, verdict: Verdict):
        if verdict.exists:
            self.valid += 1
        else:
            self.invalid += 1
        self.report(verdict)
        self.store(verdict)

    def reject(self, failure: LookupFailed):
        self.failed += 1
        error(f"Lookup failed for {highlight(failure.address)} -- {failure.reason}")

    @staticmethod
    def report(verdict: Verdict):
        if verdict.exists:
            success(f"Found existing user : {highlight(verdict.address)}")
            return
        message = f"User does not exist : {highlight(verdict.address)}"
        # Anything but a plain "unknown user" is worth a second look
        if verdict.code is not None and verdict.code != IfExistsResult.INVALID_USERNAME.value:
            message += f" -- IfExistsResult {IfExistsResult.describe(verdict.code)}"
        error(message)

    @abstractmethod
    def store(self, verdict: Verdict):
        pass

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class ConsoleSink(ResultSink):
    def store(self, verdict: Verdict):
        pass


class PartitionedSink(ResultSink):
    """
    Splits verdicts between <stem>_valid.txt and <stem>_invalid.txt, next to the input file.
    Both files are truncated on open and stay open until close().
    """
    def __init__(self, input_path: Union[str, Path]):
        super().__init__()
        self.valid_path, self.invalid_path = PartitionedSink.partition_paths(input_path)
        self.__valid = open(self.valid_path, "w", encoding="utf-8", newline="")
        try:
            self.__invalid = open(self.invalid_path, "w", encoding="utf-8", newline="")
        except OSError:
            self.__valid.close()
            raise

    @staticmethod
    def partition_paths(input_path: Union[str, Path]) -> tuple:
        path = Path(input_path)
        parent = path.parent
        stem = path.stem
        return parent.joinpath(f"{stem}_valid.txt"), parent.joinpath(f"{stem}_invalid.txt")

    def store(self, verdict: Verdict):
        handle = self.__valid if verdict.exists else self.__invalid
        handle.write(verdict.address + LINE_FEED)

    def close(self):
        self.__valid.close()
        self.__invalid.close()
