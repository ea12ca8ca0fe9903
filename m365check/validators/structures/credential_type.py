from typing import Union

from m365check.validators.structures.enums import IfExistsResult
from m365check.validators.structures.exceptions import DecodeError
from m365check.validators.structures.verdict import Verdict


class CredentialTypeResponse:
    """
    Decoded body of a GetCredentialType call.

    Only IfExistsResult is load bearing. Everything else the service sends back
    (Display, ThrottleStatus, Credentials, EstsProperties, apiCanary, ...) is
    kept as an opaque mapping and never interpreted.
    """
    EXISTS = IfExistsResult.VALID_USERNAME.value

    def __init__(self, if_exists_result: int, fields: dict = None):
        self.if_exists_result = if_exists_result
        self.fields = fields if fields is not None else {}

    @property
    def throttle_status(self):
        return self.fields.get("ThrottleStatus")

    @property
    def exists(self) -> bool:
        return self.if_exists_result == CredentialTypeResponse.EXISTS

    @property
    def result(self) -> Union[IfExistsResult, None]:
        return IfExistsResult.from_value(self.if_exists_result)

    def to_verdict(self, address: str) -> Verdict:
        return Verdict(address, self.exists, code=self.if_exists_result)

    @staticmethod
    def from_json(address: str, body, status_code=None) -> "CredentialTypeResponse":
        if not isinstance(body, dict):
            raise DecodeError(address, f"expected a JSON object, got {type(body).__name__}", status_code=status_code)
        if "IfExistsResult" not in body.keys():
            raise DecodeError(address, "IfExistsResult missing from response", status_code=status_code)
        code = body["IfExistsResult"]
        # bool is an int subclass, a true/false here is a schema change
        if isinstance(code, bool) or not isinstance(code, int):
            raise DecodeError(address, f"IfExistsResult is not an integer: {code!r}", status_code=status_code)
        return CredentialTypeResponse(code, fields=body)
