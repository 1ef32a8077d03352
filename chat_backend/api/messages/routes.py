# chat_backend/api/messages/routes.py
from flask import Blueprint, current_app

from chat_backend.core.callable import load_callable_data, callable_result
from chat_backend.core.errors import InvalidArgumentError
from chat_backend.utils.datetime_utils import DateTimeUtils
from chat_backend.api.messages.schemas import (
    PostMessageRequestSchema, GetChatRequestSchema, UserChatRequestSchema, MessageResponseSchema
)

messages_bp = Blueprint('messages_bp', __name__)


@messages_bp.route('/postMessage', methods=['POST'])
@messages_bp.route('/addMessage', methods=['POST'], endpoint='add_message')
def post_message():
    """
    사용자의 채팅 로그에 메시지를 추가합니다.
    - 성공 시 {"status": "success", "messageId": ...}를 반환합니다.
    - addMessage는 같은 동작의 기존 이름입니다.
    """
    message_service = current_app.services['messages']
    data = load_callable_data(PostMessageRequestSchema(), "Required fields (text or userId) are missing")
    message_id = message_service.post_message(data['text'], data['user_id'])
    return callable_result({"status": "success", "messageId": message_id})


@messages_bp.route('/getChat', methods=['POST'])
def get_chat():
    """사용자의 메시지 목록을 timestamp 오름차순으로 반환합니다."""
    message_service = current_app.services['messages']
    data = load_callable_data(GetChatRequestSchema(), "Required fields (userId) are missing")

    since = None
    if data.get('since') is not None:
        try:
            since = DateTimeUtils.parse_iso_datetime(data['since'])
        except ValueError as e:
            raise InvalidArgumentError("Invalid 'since' timestamp", details=str(e))

    messages = message_service.get_chat(data['user_id'], since=since, limit=data.get('limit'))
    return callable_result({
        "status": "success",
        "messages": MessageResponseSchema(many=True).dump(messages)
    })


@messages_bp.route('/deleteChat', methods=['POST'])
def delete_chat():
    message_service = current_app.services['messages']
    data = load_callable_data(UserChatRequestSchema(), "Required fields (userId) are missing")
    deleted_count = message_service.delete_chat(data['user_id'])
    return callable_result({"status": "success", "deletedCount": deleted_count})
