# chat_backend/api/accounts/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

class UserIdRequestSchema(Schema):
    """
    register / login / logout callable의 data 객체를 검증하는 스키마.
    """
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Str(
        required=True,
        data_key='userId',
        validate=validate.Length(min=1, error="userId는 비어 있을 수 없습니다.")
    )

class RenameUserIdRequestSchema(Schema):
    """
    renameUserId / updateUserId 요청의 data 객체를 검증하는 스키마.
    """
    class Meta:
        unknown = EXCLUDE

    old_user_id = fields.Str(required=True, data_key='oldUserId', validate=validate.Length(min=1))
    new_user_id = fields.Str(required=True, data_key='newUserId', validate=validate.Length(min=1))

class StatusResponseSchema(Schema):
    """계정 관련 callable의 공통 응답 형식"""
    status = fields.Str(required=True)
