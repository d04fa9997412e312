from typing import List

from brief.domain.mailbox_list import MailboxList


def parse_mailboxes(text: str) -> List[str]:
    """カンマ区切りの文字列を解析し、正規化した表記のリストを返す（VOへ委譲）"""
    return [m.format() for m in MailboxList.parse(text)]
