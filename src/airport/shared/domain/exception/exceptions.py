class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（不正な引数・入力の競合）"""

    pass


class ResourceNotFoundException(BusinessRuleViolationException):
    """リソースが見つからない場合

    呼び出し側からは不正な引数として扱えるよう BusinessRuleViolationException を継承する。
    """

    pass


class InvalidStateException(DomainException):
    """集約の内部整合性チェックに失敗した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（version が期待値と異なる場合）"""

    pass
