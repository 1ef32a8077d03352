# chat_backend/api/messages/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from chat_backend.utils.datetime_utils import DateTimeUtils

class PostMessageRequestSchema(Schema):
    """
    postMessage / addMessage callable의 data 객체를 검증하는 스키마.
    """
    class Meta:
        unknown = EXCLUDE

    text = fields.Str(required=True, validate=validate.Length(min=1, error="text는 비어 있을 수 없습니다."))
    user_id = fields.Str(required=True, data_key='userId', validate=validate.Length(min=1))

class GetChatRequestSchema(Schema):
    """
    getChat callable의 data 객체를 검증하는 스키마.
    since는 ISO 8601 문자열이며 해당 시각 이후(포함)의 메시지만 조회합니다.
    """
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Str(required=True, data_key='userId', validate=validate.Length(min=1))
    since = fields.Str(load_default=None, allow_none=True)
    limit = fields.Int(load_default=None, allow_none=True, validate=validate.Range(min=1, max=500))

class UserChatRequestSchema(Schema):
    """deleteChat callable의 data 객체를 검증하는 스키마."""
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Str(required=True, data_key='userId', validate=validate.Length(min=1))

class MessageResponseSchema(Schema):
    """
    메시지 정보 응답을 위한 JSON 형식.
    Firestore 필드명(userId, timestamp)과 동일한 키를 사용합니다.
    """
    messageId = fields.Str(attribute='message_id')
    text = fields.Str()
    userId = fields.Str(attribute='user_id')
    timestamp = fields.Function(
        lambda message: DateTimeUtils.to_iso_string(message.timestamp) if message.timestamp else None
    )
