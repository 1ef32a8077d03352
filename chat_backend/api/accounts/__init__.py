# chat_backend/api/accounts/__init__.py
"""
계정 디렉터리(Account Directory) API

register / login / logout / renameUserId callable을 제공합니다.
"""

from .routes import accounts_bp
from .services import AccountService, AccountStatus

__all__ = ['accounts_bp', 'AccountService', 'AccountStatus']
