from pathlib import Path
from typing import Union

from m365check.actions.action import Action
from m365check.sinks.sink import ResultSink, ConsoleSink, PartitionedSink
from m365check.sources.source import AddressSource, LiteralSource, FileSource, InteractiveSource
from m365check.utils.utils import info, progress, highlight
from m365check.validators.credentialtype import CredentialType
from m365check.validators.validator import Validator


class Check(Action):
    """
    Drives addresses through a validator.

    The run mode is picked once, from the arguments:
      - email: a single address, printed to the console
      - file: every non-blank line of the file, split into <stem>_valid.txt and <stem>_invalid.txt
      - neither: one line from standard input, printed to the console
    """
    def __init__(self, config=None, validator: Validator = None, stdin=None):
        super().__init__(config)
        self.validator = validator
        self.stdin = stdin

    def execute(self, **kwargs) -> ResultSink:
        email = kwargs.get("email")
        path = kwargs.get("file")

        if self.validator is None:
            self.validator = CredentialType(self.config)
        with self.validator:
            if email:
                return self.check_single(LiteralSource(email))
            elif path:
                return self.check_file(path)
            info("Using STDIN")
            return self.check_single(InteractiveSource(self.stdin))

    def check_single(self, source: AddressSource) -> ConsoleSink:
        sink = ConsoleSink()
        with source:
            self.run(source, sink)
        return sink

    def check_file(self, path: Union[str, Path]) -> PartitionedSink:
        # Input first: a missing file must not leave empty partitions behind
        with FileSource(path) as source, PartitionedSink(path) as sink:
            progress(f"Checking addresses from {highlight(path)}")
            self.run(source, sink)
        progress(f"Done: {sink.valid} valid, {sink.invalid} invalid, {sink.failed} failed")
        info(f"Existing users: {highlight(sink.valid_path)}")
        info(f"Unknown users: {highlight(sink.invalid_path)}")
        return sink

    def run(self, source: AddressSource, sink: ResultSink):
        for address, verdict, failure in self.validator.validate_all(source):
            if failure is not None:
                sink.reject(failure)
            else:
                sink.accept(verdict)
