# chat_backend/api/messages/services.py

import logging
from datetime import datetime
from typing import List, Optional

from firebase_admin import firestore

from chat_backend.core.errors import UnknownError, require_fields
from chat_backend.models.message import ChatMessage

logger = logging.getLogger(__name__)

# Firestore WriteBatch 한 번에 담을 수 있는 최대 쓰기 수
BATCH_WRITE_LIMIT = 500


class MessageService:
    """
    사용자별 채팅 메시지 로그('chats/{userId}/messages')를 관리하는 서비스 클래스.
    - 메시지는 추가만 가능하며, 순서는 서버가 부여한 timestamp로 정해집니다.
    - userId가 'users' 컬렉션에 등록되어 있는지는 확인하지 않습니다.
    """
    def __init__(self, db, chats_collection: str = 'chats',
                 messages_subcollection: str = 'messages', page_limit: int = 100):
        self.db = db
        self.chats_ref = self.db.collection(chats_collection)
        self.messages_subcollection = messages_subcollection
        self.page_limit = page_limit

    def _messages_ref(self, user_id: str):
        return self.chats_ref.document(user_id).collection(self.messages_subcollection)

    def post_message(self, text: str, user_id: str) -> str:
        """새 메시지를 사용자의 메시지 로그에 추가하고, 생성된 메시지 ID를 반환합니다."""
        require_fields("Required fields (text or userId) are missing", text=text, userId=user_id)
        try:
            message = ChatMessage(text=text, user_id=user_id)
            _, message_ref = self._messages_ref(user_id).add(message.to_firestore())
            logger.info(f"메시지 저장 완료 (user_id: {user_id}, message_id: {message_ref.id})")
            return message_ref.id
        except Exception as e:
            logger.error(f"Error adding message (user_id: {user_id}): {e}", exc_info=True)
            raise UnknownError("An error occurred while adding the message", details=str(e)) from e

    def get_chat(self, user_id: str, since: Optional[datetime] = None,
                 limit: Optional[int] = None) -> List[ChatMessage]:
        """사용자의 메시지를 timestamp 오름차순으로 조회합니다."""
        require_fields("Required fields (userId) are missing", userId=user_id)
        try:
            query = self._messages_ref(user_id)
            if since is not None:
                query = query.where('timestamp', '>=', since)
            query = query.order_by('timestamp', direction=firestore.Query.ASCENDING)
            docs = query.limit(limit or self.page_limit).stream()
            return [ChatMessage.from_snapshot(doc) for doc in docs]
        except Exception as e:
            logger.error(f"Error fetching chat (user_id: {user_id}): {e}", exc_info=True)
            raise UnknownError("An error occurred while fetching the chat", details=str(e)) from e

    def delete_chat(self, user_id: str) -> int:
        """
        사용자의 메시지를 모두 삭제하고 삭제한 개수를 반환합니다.
        WriteBatch 한도(500건) 단위로 나누어 커밋합니다.
        """
        require_fields("Required fields (userId) are missing", userId=user_id)
        deleted_count = 0
        try:
            messages_ref = self._messages_ref(user_id)
            while True:
                docs = list(messages_ref.limit(BATCH_WRITE_LIMIT).stream())
                if not docs:
                    break

                batch = self.db.batch()
                for doc in docs:
                    batch.delete(doc.reference)
                batch.commit()
                deleted_count += len(docs)

            logger.info(f"채팅 삭제 완료 (user_id: {user_id}, count: {deleted_count})")
            return deleted_count
        except Exception as e:
            logger.error(f"Error deleting chat (user_id: {user_id}, deleted so far: {deleted_count}): {e}", exc_info=True)
            raise UnknownError("An error occurred while deleting the chat", details=str(e)) from e
