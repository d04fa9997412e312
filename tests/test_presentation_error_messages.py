"""
Presentation: describe_error
"""

from brief.domain.address import Address
from brief.domain.mailbox import Mailbox, ParseMailboxError
from brief.domain.validation import InvalidPartError, validate_part


def _raised(fn, *args):
    try:
        fn(*args)
    except Exception as e:
        return e
    raise AssertionError("expected an exception")


def test_bracket_errors_explain_expected_form():
    from brief.presentation.error_messages import describe_error

    assert "名前 <user@domain>" in describe_error(_raised(Mailbox.parse, "user user@domain.com"))
    assert "「>」" in describe_error(_raised(Mailbox.parse, "<user@domain.com"))
    assert "「<」" in describe_error(_raised(Mailbox.parse, "user@domain.com>"))
    assert "順序" in describe_error(_raised(Mailbox.parse, ">user@domain.com<"))


def test_address_errors_follow_cause_to_failing_part():
    from brief.presentation.error_messages import describe_error

    assert "user@domain" in describe_error(_raised(Mailbox.parse, "userdomain.com"))
    assert "ユーザー名が空" in describe_error(_raised(Address.parse, "@domain.com"))
    assert "ドメイン" in describe_error(_raised(Address.try_new, "user", "do main"))


def test_name_and_part_errors():
    from brief.presentation.error_messages import describe_error

    err = _raised(Mailbox.try_new, "(x)", Address.parse("user@domain.com"))
    assert isinstance(err, ParseMailboxError)
    assert "表示名" in describe_error(err)

    part_err = _raised(validate_part, "")
    assert isinstance(part_err, InvalidPartError)
    assert "入力値が空" in describe_error(part_err)


def test_unknown_exception_falls_back_to_generic_message():
    from brief.presentation.error_messages import describe_error

    msg = describe_error(RuntimeError("boom"))
    assert "解析に失敗しました" in msg and "boom" in msg
