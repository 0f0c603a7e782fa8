"""
Errors raised while parsing and executing commands.

Every error here is a user-input or consistency error: the command is
aborted, the store is left as it was and the message is shown to the user.
"""


class CareBookError(Exception):
    """Base class for all command errors."""


# ────────────────────────────────────────────────────────────────────────────
# Parse time
# ────────────────────────────────────────────────────────────────────────────
class ParseError(CareBookError):
    """Malformed command: unknown tag, duplicate prefix, bad index..."""


class ValidationError(ParseError):
    def __init__(self, field: str, raw: str, message: str):
        self.field = field
        self.raw = raw
        super().__init__(f"{field}: '{raw}' is invalid. {message}")


class NoFieldsEditedError(ParseError):
    def __init__(self):
        super().__init__("At least one field to edit must be provided.")


# ────────────────────────────────────────────────────────────────────────────
# Execution time
# ────────────────────────────────────────────────────────────────────────────
class CommandError(CareBookError):
    """Command is well formed but cannot be applied to the current model."""


class InvalidIndexError(CommandError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"The person index {index} is invalid.")


class TypeMismatchError(CommandError):
    def __init__(self, message: str = "The person at this index is not of the type given."):
        super().__init__(message)


class DuplicateRecordError(CommandError):
    def __init__(self):
        super().__init__("This person already exists in the address book.")
