from enum import Enum


class ExtendedEnum(Enum):
    @classmethod
    def get_name(cls, value):
        if isinstance(value, str):
            value = int(value)
        _types = dict(map(lambda c: (c.value, c.name.lower()), cls))
        return _types[value] if value in _types.keys() else None

    @classmethod
    def from_value(cls, value):
        _types = dict(map(lambda c: (c.value, c), cls))
        return _types[value] if value in _types.keys() else None


class IfExistsResult(ExtendedEnum):
    UNKNOWN_ERROR = -1
    VALID_USERNAME = 0
    INVALID_USERNAME = 1
    UNKNOWN_USERNAME = 2
    THROTTLE = 3
    ERROR = 4
    VALID_USERNAME_DIFFERENT_IDP = 5
    VALID_USERNAME_2 = 6

    @staticmethod
    def describe(code: int) -> str:
        name = IfExistsResult.get_name(code)
        return f"{code} ({name})" if name else f"{code} (unrecognised)"
