class LookupFailed(Exception):
    """
    A lookup that produced no verdict.
    The address is "unknown", never "does not exist".
    """
    def __init__(self, address, reason=""):
        super().__init__(f"{address}: {reason}")
        self.address = address
        self.reason = reason


class TransportError(LookupFailed):
    def __init__(self, address, cause: Exception):
        super().__init__(address, f"{cause.__class__.__name__}: {cause}")
        self.cause = cause


class DecodeError(LookupFailed):
    def __init__(self, address, reason="", status_code=None):
        if status_code is not None:
            reason = f"HTTP {status_code}: {reason}"
        super().__init__(address, reason)
        self.status_code = status_code
