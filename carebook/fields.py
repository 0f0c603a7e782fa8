import re

from carebook.errors import ValidationError


# ────────────────────────────────────────────────────────────────────────────
# Field value types
# ────────────────────────────────────────────────────────────────────────────
class Field:
    """
    Validated, immutable wrapper around a single raw string.

    Subclasses set ``LABEL`` and override ``validate``; a value that does not
    pass raises ``ValidationError`` naming the field and the raw input.
    """
    __slots__ = ("_value",)
    LABEL = "Field"

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise ValidationError(self.LABEL, repr(value), "Value must be text.")
        v = value.strip()
        self.validate(v)
        object.__setattr__(self, "_value", v)

    def validate(self, value: str) -> None:
        if not value:
            raise ValidationError(self.LABEL, value, f"{self.LABEL} cannot be empty.")

    @property
    def value(self) -> str:
        return self._value

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __eq__(self, other):
        return type(other) is type(self) and other._value == self._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __lt__(self, other):
        return self._value < other._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self):
        return self._value


class Name(Field):
    LABEL = "Name"
    NAME_RE = re.compile(r"[^\W_]+(?: +[^\W_]+)*")

    def validate(self, value: str) -> None:
        super().validate(value)
        if not Name.NAME_RE.fullmatch(value):
            raise ValidationError(self.LABEL, value,
                                  "Names should only contain alphanumeric characters and spaces.")


class Phone(Field):
    LABEL = "Phone"
    MIN_DIGITS = 3

    def validate(self, value: str) -> None:
        if not value.isdigit() or not value.isascii() or len(value) < Phone.MIN_DIGITS:
            raise ValidationError(self.LABEL, value,
                                  f"Phone numbers should only contain digits, at least {Phone.MIN_DIGITS} long.")


class Email(Field):
    LABEL = "Email"
    _ALNUM = r"[A-Za-z0-9]"
    _LOCAL = rf"{_ALNUM}(?:[A-Za-z0-9+_.\-]*{_ALNUM})?"
    _LABEL_PART = rf"{_ALNUM}(?:[A-Za-z0-9\-]*{_ALNUM})?"
    _LAST_LABEL = rf"{_ALNUM}(?:[A-Za-z0-9\-]*{_ALNUM})"
    EMAIL_RE = re.compile(rf"{_LOCAL}@(?:{_LABEL_PART}\.)*{_LAST_LABEL}")

    def validate(self, value: str) -> None:
        if not Email.EMAIL_RE.fullmatch(value):
            raise ValidationError(self.LABEL, value,
                                  "Emails should be of the format local-part@domain.")


class Address(Field):
    LABEL = "Address"


class Tag(Field):
    LABEL = "Tag"
    TAG_RE = re.compile(r"[A-Za-z0-9]+")

    def validate(self, value: str) -> None:
        if not Tag.TAG_RE.fullmatch(value):
            raise ValidationError(self.LABEL, value, "Tag names should be alphanumeric.")


class Specialty(Field):
    LABEL = "Specialty"

    def validate(self, value: str) -> None:
        super().validate(value)
        if not Name.NAME_RE.fullmatch(value):
            raise ValidationError(self.LABEL, value,
                                  "Specialties should only contain alphanumeric characters and spaces.")
