"""
仕様: メールボックス一覧の解析
"""


def test_parse_comma_separated_mailboxes():
    """正常系: カンマ区切りの文字列から、正規化された表記のリストを順序どおりに抽出できる"""
    from brief.mailbox_parser import parse_mailboxes

    input_text = "name <user@domain.com>, usertwo@domaintwo.com"
    result = parse_mailboxes(input_text)
    assert result == ["name <user@domain.com>", "<usertwo@domaintwo.com>"]


def test_trim_whitespace_around_mailboxes():
    """正規化: 各エントリの前後の空白はトリミングされる"""
    from brief.mailbox_parser import parse_mailboxes

    result = parse_mailboxes("  user@domain.com ,   name   <usertwo@domaintwo.com>  ")
    assert result == ["<user@domain.com>", "name <usertwo@domaintwo.com>"]


def test_empty_entry_raises_error():
    """堅牢性: 空のエントリは無視されず、例外を発生させる"""
    import pytest

    from brief.domain.mailbox import ParseMailboxError
    from brief.mailbox_parser import parse_mailboxes

    with pytest.raises(ParseMailboxError):
        parse_mailboxes("user@domain.com,,usertwo@domaintwo.com")
