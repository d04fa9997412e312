from dataclasses import dataclass
from typing import Iterator, List, Tuple

from brief.domain.mailbox import Mailbox


@dataclass(frozen=True)
class MailboxList:
    """Value object for an ordered list of mailboxes.

    - splits by comma
    - trims whitespace around each entry
    - fails on the first entry that does not parse (empty entries included)
    - preserves original order
    """

    values: Tuple[Mailbox, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def parse(cls, text: str) -> "MailboxList":
        return cls(tuple(Mailbox.parse(part.strip()) for part in text.split(",")))

    @classmethod
    def from_single(cls, mailbox: Mailbox) -> "MailboxList":
        return cls((mailbox,))

    def format(self) -> str:
        return ", ".join(m.format() for m in self.values)

    def to_list(self) -> List[Mailbox]:
        return list(self.values)

    def __str__(self) -> str:
        return self.format()

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Mailbox]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Mailbox:
        return self.values[index]
