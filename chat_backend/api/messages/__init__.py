# chat_backend/api/messages/__init__.py
"""
메시지 로그(Message Log) API

postMessage(addMessage) / getChat / deleteChat callable을 제공합니다.
"""

from .routes import messages_bp
from .services import MessageService

__all__ = ['messages_bp', 'MessageService']
