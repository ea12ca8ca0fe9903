class Verdict:
    """
    Existence outcome for one address.
    `code` is the raw IfExistsResult, kept for diagnostics only.
    """
    def __init__(self, address: str, exists: bool, code=None):
        self.address = address
        self.exists = exists
        self.code = code

    def __eq__(self, other):
        if not isinstance(other, Verdict):
            return NotImplemented
        return (self.address, self.exists, self.code) == (other.address, other.exists, other.code)

    def __repr__(self):
        return f"Verdict(address={self.address!r}, exists={self.exists}, code={self.code})"

    def to_string(self):
        return f"{self.address}:{'valid' if self.exists else 'invalid'}"
