import json

from pydantic import ValidationError

from courtside.shared.domain.exception import (
    DomainException,
    InvalidTransitionException,
    ResourceNotFoundException,
    SlotConflictException,
    ValidationException,
)

_STATUS_BY_EXCEPTION: tuple[tuple[type[DomainException], int], ...] = (
    (ValidationException, 400),
    (ResourceNotFoundException, 404),
    (SlotConflictException, 409),
    (InvalidTransitionException, 400),
)


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(error: Exception) -> dict:
    """ドメイン例外・入力検証エラーを HTTP レスポンスに変換する

    対応表にない例外は 500 として扱う（呼び出し側でログ出力すること）。
    """
    if isinstance(error, ValidationError):
        return api_response(
            400,
            {
                "message": "Validation failed",
                "errors": error.errors(include_url=False, include_context=False),
            },
        )
    for exception_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(error, exception_type):
            return api_response(status_code, {"message": str(error)})
    return api_response(500, {"message": "Internal server error"})
