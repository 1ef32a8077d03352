# chat_backend/api/accounts/services.py

import logging
from enum import Enum

from google.api_core.exceptions import AlreadyExists

from chat_backend.core.errors import UnknownError, require_fields
from chat_backend.models.user import UserAccount

logger = logging.getLogger(__name__)


class AccountStatus(str, Enum):
    """
    계정 관련 callable이 반환하는 업무 상태 값.
    모두 정상 결과이며, 호출자는 오류 여부가 아니라 이 값으로 분기해야 합니다.
    """
    ALREADY_EXISTS = "User account already exists"
    REGISTERED = "User has successfully registered"
    DOES_NOT_EXIST = "User does not exist"
    LOGGED_IN = "User has successfully logged in"
    LOGGED_OUT = "User has successfully logged out"
    UPDATED = "User has successfully updated"


class AccountService:
    """
    'users' 컬렉션의 사용자 문서(문서 ID = userId, 본문 = {loggedIn})를 관리하는 서비스 클래스.
    Firestore 클라이언트는 app 팩토리에서 생성되어 주입됩니다.
    """
    def __init__(self, db, users_collection: str = 'users'):
        self.db = db
        self.users_ref = self.db.collection(users_collection)

    def register(self, user_id: str) -> AccountStatus:
        """
        신규 사용자 문서를 loggedIn=True 상태로 생성합니다.
        이미 존재하면 아무것도 변경하지 않고 ALREADY_EXISTS를 반환합니다.
        """
        require_fields("Required fields (userId) are missing", userId=user_id)
        try:
            user_ref = self.users_ref.document(user_id)
            if user_ref.get().exists:
                return AccountStatus.ALREADY_EXISTS

            # create()는 문서가 이미 있으면 실패하므로 동시 가입 요청에도 기존 문서를 덮어쓰지 않습니다.
            try:
                user_ref.create(UserAccount(user_id=user_id, logged_in=True).to_firestore())
            except AlreadyExists:
                return AccountStatus.ALREADY_EXISTS

            logger.info(f"사용자 등록 완료 (user_id: {user_id})")
            return AccountStatus.REGISTERED
        except Exception as e:
            logger.error(f"Error registering (user_id: {user_id}): {e}", exc_info=True)
            raise UnknownError("An error occurred while registering", details=str(e)) from e

    def login(self, user_id: str) -> AccountStatus:
        """사용자의 loggedIn 값을 True로 설정합니다. 이미 True여도 다시 기록합니다."""
        return self._set_logged_in(user_id, True)

    def logout(self, user_id: str) -> AccountStatus:
        """사용자의 loggedIn 값을 False로 설정합니다."""
        return self._set_logged_in(user_id, False)

    def _set_logged_in(self, user_id: str, logged_in: bool) -> AccountStatus:
        action = "logging in" if logged_in else "logging out"
        require_fields("Required fields (userId) are missing", userId=user_id)
        try:
            user_ref = self.users_ref.document(user_id)
            if not user_ref.get().exists:
                return AccountStatus.DOES_NOT_EXIST

            user_ref.update({'loggedIn': logged_in})
            return AccountStatus.LOGGED_IN if logged_in else AccountStatus.LOGGED_OUT
        except Exception as e:
            logger.error(f"Error {action} (user_id: {user_id}): {e}", exc_info=True)
            raise UnknownError(f"An error occurred while {action}", details=str(e)) from e

    def rename_user_id(self, old_user_id: str, new_user_id: str) -> AccountStatus:
        """
        사용자 문서를 새 userId로 옮깁니다.

        1. old 문서를 읽고, 없으면 쓰기 없이 DOES_NOT_EXIST를 반환합니다.
        2. new 문서 set({loggedIn}) -> old 문서 delete 순서로 하나의 WriteBatch에 담아 커밋합니다.
           배치는 원자적으로 반영되므로 두 문서 중 하나만 바뀐 상태는 남지 않습니다.

        new 문서가 이미 존재하면 덮어씁니다. 재시도 시 old 문서가 이미 없으므로
        DOES_NOT_EXIST가 반환되고 아무것도 변경되지 않습니다.
        """
        require_fields(
            "Required fields (old and new userId) are missing",
            oldUserId=old_user_id, newUserId=new_user_id
        )
        try:
            old_ref = self.users_ref.document(old_user_id)
            old_doc = old_ref.get()
            if not old_doc.exists:
                return AccountStatus.DOES_NOT_EXIST

            # 같은 ID로의 변경은 set 후 delete가 문서를 지워버리므로 쓰기 없이 완료 처리합니다.
            if old_user_id == new_user_id:
                return AccountStatus.UPDATED

            account = UserAccount.from_snapshot(old_doc)
            new_ref = self.users_ref.document(new_user_id)

            batch = self.db.batch()
            batch.set(new_ref, UserAccount(user_id=new_user_id, logged_in=account.logged_in).to_firestore())
            batch.delete(old_ref)
            batch.commit()

            logger.info(f"사용자 ID 변경 완료 ({old_user_id} -> {new_user_id})")
            return AccountStatus.UPDATED
        except Exception as e:
            logger.error(f"Error updating user ({old_user_id} -> {new_user_id}): {e}", exc_info=True)
            raise UnknownError("An error occurred while updating user", details=str(e)) from e
