# chat_backend/services/firestore_service.py
import os
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from flask import Flask

logger = logging.getLogger(__name__)

def init_firestore(app: Flask):
    """
    Firebase Admin SDK를 초기화하고 Firestore 클라이언트를 반환합니다.

    - FIREBASE_CREDENTIALS_PATH가 설정되어 있으면 해당 서비스 계정 키로 초기화합니다.
    - 설정되어 있지 않으면 Application Default Credentials를 사용합니다.
      (FIRESTORE_EMULATOR_HOST가 설정된 경우 에뮬레이터로 연결됩니다.)
    - 이미 초기화된 앱이 있으면 재초기화하지 않습니다.
    """
    if not firebase_admin._apps:
        cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
        project_id = app.config.get('FIREBASE_PROJECT_ID')
        options = {'projectId': project_id} if project_id else None

        if cred_path:
            if not os.path.exists(cred_path):
                raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
            firebase_admin.initialize_app(credentials.Certificate(cred_path), options)
            logger.info(f"Firebase 초기화 완료 (credentials: {cred_path})")
        else:
            firebase_admin.initialize_app(options=options)
            logger.info("Firebase 초기화 완료 (Application Default Credentials)")

    return firestore.client()
