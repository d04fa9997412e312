from typing import Optional

from brief.domain.address import ParseAddressError, ParseAddressErrorKind
from brief.domain.mailbox import ParseMailboxError, ParseMailboxErrorKind
from brief.domain.validation import InvalidPartError, InvalidPartKind

_PART_MESSAGES = {
    InvalidPartKind.EMPTY: "が空です。",
    InvalidPartKind.FORBIDDEN_CHARACTER: "に使用できない文字（@ < > ( ) または空白）が含まれています。",
}

_MAILBOX_MESSAGES = {
    ParseMailboxErrorKind.MISSING_ANGLE_BRACKETS: "名前とアドレスは「名前 <user@domain>」の形式で入力してください。",
    ParseMailboxErrorKind.MISSING_OPENING_ANGLE_BRACKET: "「<」が不足しています。",
    ParseMailboxErrorKind.MISSING_CLOSING_ANGLE_BRACKET: "「>」が不足しています。",
    ParseMailboxErrorKind.WRONG_ORDER_ANGLE_BRACKETS: "「<」と「>」の順序が正しくありません。",
}


def _part_message(label: str, exc: Optional[InvalidPartError]) -> str:
    if exc is None:  # pragma: no cover - always set by the domain layer
        return f"{label}が正しくありません。"
    return f"{label}{_PART_MESSAGES[exc.kind]}"


def _address_message(exc: ParseAddressError) -> str:
    if exc.kind is ParseAddressErrorKind.MISSING_USER_OR_DOMAIN:
        return "メールアドレスは user@domain の形式で入力してください。"
    if exc.kind is ParseAddressErrorKind.INVALID_USER:
        return _part_message("ユーザー名", exc.cause)
    return _part_message("ドメイン", exc.cause)


def describe_error(exc: Exception) -> str:
    """Map a parse/validation exception to a user-facing message.

    Policy:
    - bracket errors: explain the expected form
    - invalid name/address: follow the cause to the failing part
    - others: generic message including str(exc)
    """

    if isinstance(exc, ParseMailboxError):
        if exc.kind in _MAILBOX_MESSAGES:
            return _MAILBOX_MESSAGES[exc.kind]
        if exc.kind is ParseMailboxErrorKind.INVALID_NAME:
            return _part_message("表示名", exc.cause)
        return _address_message(exc.cause)

    if isinstance(exc, ParseAddressError):
        return _address_message(exc)

    if isinstance(exc, InvalidPartError):
        return _part_message("入力値", exc)

    return f"メールアドレスの解析に失敗しました: {str(exc)}"
