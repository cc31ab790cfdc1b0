class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException, ValueError):
    """入力値が不正・範囲外の場合（営業時間外、時間数が 1〜8 以外など）"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class SlotConflictException(BusinessRuleViolationException):
    """指定の時間帯が既存の予約と重複している場合"""

    pass


class InvalidTransitionException(BusinessRuleViolationException):
    """許可されていないステータス遷移が要求された場合"""

    pass


class StorageException(DomainException):
    """永続化層の障害（書き込みは行われていないことを保証する）"""

    pass
