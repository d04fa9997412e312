from dataclasses import dataclass
from enum import Enum
from typing import Union

from brief.domain.mailbox import Mailbox
from brief.domain.mailbox_list import MailboxList


class HeaderName(Enum):
    FROM = "From"
    TO = "To"


@dataclass(frozen=True)
class Header:
    """A message header holding a list of mailboxes. No folding is applied."""

    name: HeaderName
    mailboxes: MailboxList

    def __post_init__(self) -> None:
        # A single mailbox is promoted to a one-element list
        if isinstance(self.mailboxes, Mailbox):
            object.__setattr__(self, "mailboxes", MailboxList.from_single(self.mailboxes))

    @classmethod
    def from_(cls, mailboxes: Union[MailboxList, Mailbox]) -> "Header":
        return cls(HeaderName.FROM, mailboxes)

    @classmethod
    def to(cls, mailboxes: Union[MailboxList, Mailbox]) -> "Header":
        return cls(HeaderName.TO, mailboxes)

    def format(self) -> str:
        return f"{self.name.value}: {self.mailboxes.format()}"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.format()
