from enum import Enum

FORBIDDEN_CHARACTERS = frozenset("@<>()")


class InvalidPartKind(Enum):
    EMPTY = "empty"
    FORBIDDEN_CHARACTER = "forbidden_character"


class InvalidPartError(ValueError):
    """A user-part, domain-part or display name was rejected."""

    def __init__(self, kind: InvalidPartKind, fragment: str):
        self.kind = kind
        self.fragment = fragment
        if kind is InvalidPartKind.EMPTY:
            message = "part must not be empty"
        else:
            message = f"part contains a forbidden character: {fragment!r}"
        super().__init__(message)


def _is_forbidden(ch: str) -> bool:
    return ch in FORBIDDEN_CHARACTERS or ch.isspace()


def validate_part(fragment: str) -> None:
    """Check one fragment of an address or mailbox.

    Rules:
    - must not be empty
    - must not contain any of ``@ < > ( )`` or whitespace

    Raises InvalidPartError otherwise. Same rule for user, domain and name.
    """
    if not fragment:
        raise InvalidPartError(InvalidPartKind.EMPTY, fragment)
    if any(_is_forbidden(ch) for ch in fragment):
        raise InvalidPartError(InvalidPartKind.FORBIDDEN_CHARACTER, fragment)
