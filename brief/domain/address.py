from dataclasses import dataclass
from enum import Enum
from typing import Optional

from brief.domain.validation import InvalidPartError, validate_part


class ParseAddressErrorKind(Enum):
    MISSING_USER_OR_DOMAIN = "missing_user_or_domain"
    INVALID_USER = "invalid_user"
    INVALID_DOMAIN = "invalid_domain"


class ParseAddressError(ValueError):
    def __init__(self, kind: ParseAddressErrorKind, cause: Optional[InvalidPartError] = None):
        self.kind = kind
        self.cause = cause
        if kind is ParseAddressErrorKind.MISSING_USER_OR_DOMAIN:
            message = "address must be in the form user@domain"
        elif kind is ParseAddressErrorKind.INVALID_USER:
            message = f"invalid user: {cause}"
        else:
            message = f"invalid domain: {cause}"
        super().__init__(message)


@dataclass(frozen=True)
class Address:
    """Value object for a ``user@domain`` address.

    - user and domain are validated on construction (user first)
    - the last ``@`` separates user from domain when parsing
    - ``format()`` is the exact inverse of ``parse()``
    """

    user: str
    domain: str

    def __post_init__(self) -> None:
        try:
            validate_part(self.user)
        except InvalidPartError as e:
            raise ParseAddressError(ParseAddressErrorKind.INVALID_USER, e) from e
        try:
            validate_part(self.domain)
        except InvalidPartError as e:
            raise ParseAddressError(ParseAddressErrorKind.INVALID_DOMAIN, e) from e

    @classmethod
    def try_new(cls, user: str, domain: str) -> "Address":
        return cls(user, domain)

    @classmethod
    def new_unchecked(cls, user: str, domain: str) -> "Address":
        """Build an address without validation, for parts already known to be valid."""
        address = object.__new__(cls)
        # frozen dataclass: bypass __setattr__
        object.__setattr__(address, "user", user)
        object.__setattr__(address, "domain", domain)
        return address

    @classmethod
    def parse(cls, text: str) -> "Address":
        if "@" not in text:
            raise ParseAddressError(ParseAddressErrorKind.MISSING_USER_OR_DOMAIN)
        user, domain = text.rsplit("@", 1)
        return cls.try_new(user, domain)

    def format(self) -> str:
        return f"{self.user}@{self.domain}"

    def __str__(self) -> str:
        return self.format()
