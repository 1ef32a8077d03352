# chat_backend/models/user.py
from dataclasses import dataclass
from typing import Any, Dict

@dataclass
class UserAccount:
    """
    Firestore 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    문서 ID가 곧 user_id이며, 문서 본문에는 로그인 상태만 저장합니다.
    """
    user_id: str
    logged_in: bool = True

    def to_firestore(self) -> Dict[str, Any]:
        return {'loggedIn': self.logged_in}

    @classmethod
    def from_snapshot(cls, doc) -> 'UserAccount':
        data = doc.to_dict() or {}
        return cls(user_id=doc.id, logged_in=bool(data.get('loggedIn', False)))
