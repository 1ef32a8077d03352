# chat_backend/models/__init__.py
from .user import UserAccount
from .message import ChatMessage

__all__ = ['UserAccount', 'ChatMessage']
