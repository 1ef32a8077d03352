# chat_backend/core/errors.py
"""
호출 가능한 원격 프로시저(callable)에서 사용하는 분류된 오류 타입.

실패는 두 종류뿐입니다.
- invalid-argument: 필수 필드 누락/빈 값 (저장소 접근 전에 검사)
- unknown: 저장소 계층에서 발생한 모든 오류 (원본 메시지를 details에 첨부)

"User does not exist", "User account already exists" 같은 업무 상태는
오류가 아니라 정상 결과(status)로 반환됩니다.
"""
from typing import Any, Dict, Optional


class CallableError(Exception):
    """기계가 읽을 수 있는 code, 사람이 읽을 message, 선택적 details를 가지는 기본 오류."""
    code = 'unknown'
    http_status = 500

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def status(self) -> str:
        # 'invalid-argument' -> 'INVALID_ARGUMENT'
        return self.code.replace('-', '_').upper()

    def to_dict(self) -> Dict[str, Any]:
        error = {"status": self.status, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return error


class InvalidArgumentError(CallableError):
    code = 'invalid-argument'
    http_status = 400


class UnknownError(CallableError):
    code = 'unknown'
    http_status = 500


def require_fields(message: str, **values: Optional[str]) -> None:
    """
    필수 문자열 필드가 모두 존재하고 비어 있지 않은지 확인합니다.
    하나라도 없으면 저장소에 접근하기 전에 InvalidArgumentError를 발생시킵니다.
    """
    missing = [name for name, value in values.items() if not value or not isinstance(value, str)]
    if missing:
        raise InvalidArgumentError(message, details={"missing": missing})
