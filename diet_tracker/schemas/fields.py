import re

from marshmallow import fields

MISSING = "missing"

_DIGITS_RE = re.compile(r"[0-9]+")

# Largest value a 32-bit INTEGER column holds
MAX_INT = 2**31 - 1


class TrimmedStr(fields.String):
    """String that is stripped and must not be blank afterwards."""

    default_error_messages = {
        "required": MISSING,
        "null": MISSING,
        "blank": MISSING,
    }

    def _deserialize(self, value, attr, data, **kwargs):
        value = super()._deserialize(value, attr, data, **kwargs)
        value = value.strip()
        if not value:
            raise self.make_error("blank")
        return value


class WholeNumber(fields.Field):
    """Positive integer given as a JSON number or a string of digits.

    Booleans, floats, signs and other text are rejected instead of coerced.
    """

    default_error_messages = {
        "required": MISSING,
        "null": MISSING,
        "invalid": "{name} must be a positive integer",
    }

    def __init__(self, label: str = "Value", maximum: int = MAX_INT, **kwargs):
        super().__init__(**kwargs)
        self.label = label
        self.maximum = maximum

    def _invalid(self):
        return self.make_error("invalid", name=self.label)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self._invalid()
        if isinstance(value, int):
            number = value
        elif isinstance(value, str) and _DIGITS_RE.fullmatch(value.strip()):
            digits = value.strip()
            if len(digits) > len(str(self.maximum)):
                raise self._invalid()
            number = int(digits)
        else:
            raise self._invalid()
        if number < 1 or number > self.maximum:
            raise self._invalid()
        return number
