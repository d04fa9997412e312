import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from brief.domain.header import Header
from brief.domain.mailbox import Mailbox
from brief.domain.mailbox_list import MailboxList

MailboxInput = Union[MailboxList, Mailbox, str]

HEADER_SEPARATOR = "\r\n"


@dataclass(frozen=True)
class Message:
    headers: Tuple[Header, ...] = ()

    def format(self) -> str:
        return HEADER_SEPARATOR.join(h.format() for h in self.headers)


def _to_mailbox_list(value: MailboxInput) -> MailboxList:
    if isinstance(value, MailboxList):
        return value
    if isinstance(value, Mailbox):
        return MailboxList.from_single(value)
    try:
        return MailboxList.parse(value)
    except ValueError as e:
        logging.error(f"メールボックス解析エラー: {type(e).__name__}: {str(e)}")
        raise


class MessageBuilder:
    """Collect headers and build an immutable Message.

    Accepts MailboxList, a single Mailbox, or raw text for From/To.
    Parse errors are logged and propagated; the caller decides what to show.
    """

    def __init__(self):
        self._headers: List[Header] = []

    def header(self, header: Header) -> "MessageBuilder":
        self._headers.append(header)
        return self

    def from_(self, mailboxes: MailboxInput) -> "MessageBuilder":
        return self.header(Header.from_(_to_mailbox_list(mailboxes)))

    def to(self, mailboxes: MailboxInput) -> "MessageBuilder":
        return self.header(Header.to(_to_mailbox_list(mailboxes)))

    def build(self) -> Message:
        logging.info(f"メッセージ構築: headers={[h.name.value for h in self._headers]}")
        return Message(headers=tuple(self._headers))
