"""
Pytest configuration and fixtures for all tests.
"""

import json
from unittest.mock import Mock

import pytest

from m365check.utils.utils import load_config
from m365check.validators.credentialtype import CredentialType


def make_response(body=None, status_code=200, text=None):
    """Build a stand-in for requests.Response."""
    res = Mock()
    res.status_code = status_code
    if isinstance(body, Exception):
        res.json.side_effect = body
        res.text = text if text is not None else ""
    else:
        res.json.return_value = body
        res.text = text if text is not None else json.dumps(body)
    return res


def credential_type_body(username, code, throttle=0):
    """A GetCredentialType answer as the service sends it."""
    return {
        "Username": username,
        "Display": username,
        "IfExistsResult": code,
        "IsUnmanaged": False,
        "ThrottleStatus": throttle,
        "Credentials": {
            "PrefCredential": 1,
            "HasPassword": True,
            "RemoteNgcParams": None,
            "FidoParams": None,
            "SasParams": None,
            "CertAuthParams": None,
            "GoogleParams": None,
            "FacebookParams": None,
            "OtcNotAutoSent": False,
        },
        "EstsProperties": {"DomainType": 3, "UserTenantBranding": None},
        "IsSignupDisallowed": True,
        "apiCanary": "AQABAAAAAAD--DLA3VO7QrddgJg7WevrAgoNrS",
    }


def post_by_username(codes: dict):
    """
    side_effect for session.post answering from a {address: code-or-exception} map.
    """
    def post(url, json=None, timeout=None, **kwargs):
        username = json["Username"]
        outcome = codes[username]
        if isinstance(outcome, Exception):
            raise outcome
        return make_response(credential_type_body(username, outcome))
    return post


@pytest.fixture
def config(tmp_path):
    """Default configuration, logging into the test's temporary directory."""
    cfg = load_config()
    cfg.set("LOGGING", "file", str(tmp_path.joinpath("log", "#enumerator#_#date#.log")))
    return cfg


@pytest.fixture
def validator(config):
    """A CredentialType validator whose session never reaches the network."""
    v = CredentialType(config)
    v.session.post = Mock()
    yield v
    v.close()
