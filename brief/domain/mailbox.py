from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from brief.domain.address import Address, ParseAddressError
from brief.domain.validation import InvalidPartError, validate_part


class ParseMailboxErrorKind(Enum):
    MISSING_ANGLE_BRACKETS = "missing_angle_brackets"
    MISSING_OPENING_ANGLE_BRACKET = "missing_opening_angle_bracket"
    MISSING_CLOSING_ANGLE_BRACKET = "missing_closing_angle_bracket"
    WRONG_ORDER_ANGLE_BRACKETS = "wrong_order_angle_brackets"
    INVALID_NAME = "invalid_name"
    INVALID_ADDRESS = "invalid_address"


_MESSAGES = {
    ParseMailboxErrorKind.MISSING_ANGLE_BRACKETS: "a name and address must be separated by angle brackets",
    ParseMailboxErrorKind.MISSING_OPENING_ANGLE_BRACKET: "missing opening angle bracket '<'",
    ParseMailboxErrorKind.MISSING_CLOSING_ANGLE_BRACKET: "missing closing angle bracket '>'",
    ParseMailboxErrorKind.WRONG_ORDER_ANGLE_BRACKETS: "'>' appears before '<'",
    ParseMailboxErrorKind.INVALID_NAME: "invalid name",
    ParseMailboxErrorKind.INVALID_ADDRESS: "invalid address",
}


class ParseMailboxError(ValueError):
    def __init__(
        self,
        kind: ParseMailboxErrorKind,
        cause: Optional[Union[InvalidPartError, ParseAddressError]] = None,
    ):
        self.kind = kind
        self.cause = cause
        message = _MESSAGES[kind]
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    @classmethod
    def from_address_error(cls, error: ParseAddressError) -> "ParseMailboxError":
        return cls(ParseMailboxErrorKind.INVALID_ADDRESS, error)


def _parse_address(text: str) -> Address:
    try:
        return Address.parse(text)
    except ParseAddressError as e:
        raise ParseMailboxError.from_address_error(e) from e


@dataclass(frozen=True)
class Mailbox:
    """Value object for an optional display name plus an Address.

    Accepted text forms:
    - ``user@domain``
    - ``<user@domain>``
    - ``Name <user@domain>`` (anything after ``>`` is ignored)

    A name given to the constructor or ``try_new`` is validated. A name taken
    from the bracketed text form is only trimmed, so ``John Doe <j@d.com>``
    is accepted.
    """

    name: Optional[str]
    address: Address

    def __post_init__(self) -> None:
        if self.name is not None:
            try:
                validate_part(self.name)
            except InvalidPartError as e:
                raise ParseMailboxError(ParseMailboxErrorKind.INVALID_NAME, e) from e

    @classmethod
    def try_new(cls, name: Optional[str], address: Address) -> "Mailbox":
        return cls(name, address)

    @classmethod
    def new_unchecked(cls, name: Optional[str], address: Address) -> "Mailbox":
        mailbox = object.__new__(cls)
        object.__setattr__(mailbox, "name", name)
        object.__setattr__(mailbox, "address", address)
        return mailbox

    @classmethod
    def parse(cls, text: str) -> "Mailbox":
        has_open = "<" in text
        has_close = ">" in text

        if has_close and not has_open:
            raise ParseMailboxError(ParseMailboxErrorKind.MISSING_OPENING_ANGLE_BRACKET)
        if has_open and not has_close:
            raise ParseMailboxError(ParseMailboxErrorKind.MISSING_CLOSING_ANGLE_BRACKET)

        if has_open and has_close:
            if text.index("<") > text.index(">"):
                raise ParseMailboxError(ParseMailboxErrorKind.WRONG_ORDER_ANGLE_BRACKETS)
            name_part, rest = text.split("<", 1)
            address_part = rest.split(">", 1)[0]
            name = name_part.strip() or None
            return cls.new_unchecked(name, _parse_address(address_part))

        # No brackets: only a bare address is allowed
        if " " in text:
            raise ParseMailboxError(ParseMailboxErrorKind.MISSING_ANGLE_BRACKETS)
        return cls.new_unchecked(None, _parse_address(text))

    def format(self) -> str:
        if self.name is not None:
            return f"{self.name} <{self.address.format()}>"
        return f"<{self.address.format()}>"

    def __str__(self) -> str:
        return self.format()
