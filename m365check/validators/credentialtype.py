# This validator queries the GetCredentialType endpoint used by the Microsoft 365 login page
# to decide whether an account exists. It does not submit any password and should not
# show up in the sign-in logs of the tenant.

# Note: Microsoft throttles this service, so quick, repeated attempts against the same
# tenant may produce false negatives. Throttled answers carry a non-zero IfExistsResult
# and end up in the invalid partition.
import requests

from m365check.validators.structures.credential_type import CredentialTypeResponse
from m365check.validators.structures.exceptions import TransportError, DecodeError
from m365check.validators.structures.verdict import Verdict
from m365check.validators.validator import Validator


class CredentialType(Validator):
    TARGET = "https://login.microsoftonline.com/common/GetCredentialType"

    def __init__(self, config=None):
        super().__init__(config)
        self.target = CredentialType.TARGET
        self.session.headers["Accept"] = "application/json"

    def execute(self, address: str) -> Verdict:
        data = {"Username": address}
        try:
            res = self.session.post(self.target, json=data, timeout=self.request_timeout)
        except requests.RequestException as e:
            raise TransportError(address, e) from e

        self.logger.debug(f"{address}: HTTP {res.status_code} - {res.text}")
        try:
            body = res.json()
        except ValueError as e:
            raise DecodeError(address, f"response is not JSON ({e})", status_code=res.status_code) from e

        credential_type = CredentialTypeResponse.from_json(address, body, status_code=res.status_code)
        if credential_type.throttle_status:
            result = credential_type.result
            self.logger.warning(f"{address}: ThrottleStatus {credential_type.throttle_status}, "
                                f"IfExistsResult {credential_type.if_exists_result} "
                                f"({result.name.lower() if result else 'unrecognised'})")
        return credential_type.to_verdict(address)
