# chat_backend/models/message.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

from firebase_admin import firestore

from chat_backend.utils.datetime_utils import DateTimeUtils

@dataclass
class ChatMessage:
    """
    Firestore 'chats/{userId}/messages' 하위 컬렉션의 문서 구조를 정의하는 데이터클래스.
    timestamp는 저장 시 서버 시간(SERVER_TIMESTAMP)으로 채워집니다.
    """
    text: str
    user_id: str
    message_id: Optional[str] = None
    timestamp: Union[datetime, Any] = field(default=firestore.SERVER_TIMESTAMP)

    def to_firestore(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'userId': self.user_id,
            'timestamp': self.timestamp,
        }

    @classmethod
    def from_snapshot(cls, doc) -> 'ChatMessage':
        data = doc.to_dict() or {}
        return cls(
            text=data.get('text'),
            user_id=data.get('userId'),
            message_id=doc.id,
            timestamp=DateTimeUtils.from_firestore(data.get('timestamp')),
        )
