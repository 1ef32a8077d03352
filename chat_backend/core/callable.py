# chat_backend/core/callable.py
"""
Firebase callable 규약을 Flask 위에서 처리하는 헬퍼.

요청:  POST /<operation>  {"data": {...}}
성공:  200 {"result": {...}}
실패:  4xx/5xx {"error": {"status", "message", "details"}}
"""
import logging
from typing import Any, Dict

from flask import jsonify, request
from marshmallow import Schema, ValidationError

from chat_backend.core.errors import CallableError, InvalidArgumentError

logger = logging.getLogger(__name__)


def load_callable_data(schema: Schema, missing_message: str) -> Dict[str, Any]:
    """요청 본문의 'data' 객체를 꺼내 스키마로 검증한 결과를 반환합니다."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict) or not isinstance(body.get('data'), dict):
        logger.info(f"callable 요청 형식 오류 (path: {request.path})")
        raise InvalidArgumentError("Request body must be a JSON object with a 'data' field")

    data = body['data']
    logger.info(f"Received {request.path} request data: {data}")
    try:
        return schema.load(data)
    except ValidationError as err:
        logger.info(f"Required fields are missing: {err.messages}")
        raise InvalidArgumentError(missing_message, details=err.messages)


def callable_result(result: Dict[str, Any]):
    return jsonify({"result": result}), 200


def callable_error(err: CallableError):
    return jsonify({"error": err.to_dict()}), err.http_status
