# chat_backend/utils/datetime_utils.py
"""
채팅 메시지 timestamp 처리를 위한 시간 유틸리티 모듈

- 모든 시간은 UTC timezone-aware datetime으로 통일합니다.
- Firestore에서 읽은 timestamp를 UTC datetime으로 정규화합니다.
- API 응답/요청에 쓰이는 ISO 8601 문자열을 생성/파싱합니다.
"""

import logging
from datetime import datetime, timezone
from typing import Any
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 UTC datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00.123456Z
        - 2024-01-15T10:30:00 (UTC로 간주)
        """
        try:
            if not iso_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)

            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)

            return dt.astimezone(timezone.utc)

        except Exception as e:
            logger.error(f"ISO datetime 파싱 실패: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """datetime 객체를 'Z' 접미사를 가진 ISO 포맷 문자열로 변환"""
        try:
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            else:
                dt = dt.astimezone(timezone.utc)

            return dt.isoformat().replace('+00:00', 'Z')

        except Exception as e:
            logger.error(f"ISO 문자열 변환 실패: {dt} - {e}")
            raise ValueError(f"datetime 객체를 ISO 문자열로 변환할 수 없습니다: {dt}")

    @staticmethod
    def from_firestore(value: Any) -> Any:
        """
        Firestore에서 읽은 timestamp 값을 UTC datetime으로 정규화합니다.
        (DatetimeWithNanoseconds도 datetime의 하위 클래스입니다.)
        datetime이 아닌 값은 그대로 반환합니다.
        """
        if not isinstance(value, datetime):
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
