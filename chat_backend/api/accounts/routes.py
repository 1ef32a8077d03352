# chat_backend/api/accounts/routes.py
import logging
from flask import Blueprint, jsonify, current_app

from chat_backend.core.callable import load_callable_data, callable_result
from chat_backend.api.accounts.schemas import (
    UserIdRequestSchema, RenameUserIdRequestSchema, StatusResponseSchema
)

accounts_bp = Blueprint('accounts_bp', __name__)

USER_ID_MISSING = "Required fields (userId) are missing"
RENAME_IDS_MISSING = "Required fields (old and new userId) are missing"


def _status_result(status):
    return callable_result(StatusResponseSchema().dump({"status": status.value}))


@accounts_bp.route('/register', methods=['POST'])
def register():
    """신규 사용자를 등록합니다. 이미 있으면 'User account already exists'를 반환합니다."""
    account_service = current_app.services['accounts']
    data = load_callable_data(UserIdRequestSchema(), USER_ID_MISSING)
    return _status_result(account_service.register(data['user_id']))


@accounts_bp.route('/login', methods=['POST'])
def login():
    account_service = current_app.services['accounts']
    data = load_callable_data(UserIdRequestSchema(), USER_ID_MISSING)
    return _status_result(account_service.login(data['user_id']))


@accounts_bp.route('/logout', methods=['POST'])
def logout():
    account_service = current_app.services['accounts']
    data = load_callable_data(UserIdRequestSchema(), USER_ID_MISSING)
    return _status_result(account_service.logout(data['user_id']))


@accounts_bp.route('/renameUserId', methods=['POST'])
def rename_user_id():
    """
    사용자 문서를 oldUserId에서 newUserId로 옮깁니다.
    다른 callable과 동일하게 {"result": {"status": ...}} 형식으로 응답합니다.
    """
    account_service = current_app.services['accounts']
    data = load_callable_data(RenameUserIdRequestSchema(), RENAME_IDS_MISSING)
    status = account_service.rename_user_id(data['old_user_id'], data['new_user_id'])
    return _status_result(status)


@accounts_bp.route('/updateUserId', methods=['POST'])
def update_user_id():
    """
    기존 클라이언트 호환용 HTTP 엔드포인트.
    요청은 renameUserId와 같지만, 성공 시 envelope 없이 200 {"status": ...}를 그대로 반환합니다.
    오류는 다른 callable과 같은 {"error": {...}} 형식입니다.
    """
    account_service = current_app.services['accounts']
    data = load_callable_data(RenameUserIdRequestSchema(), RENAME_IDS_MISSING)
    status = account_service.rename_user_id(data['old_user_id'], data['new_user_id'])
    logging.info(f"updateUserId 처리 결과: {status.value}")
    return jsonify(StatusResponseSchema().dump({"status": status.value})), 200
