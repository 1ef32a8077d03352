# chat_backend/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # Firebase 프로젝트 ID. 비어 있으면 서비스 계정 키 또는 기본 자격 증명에서 추론합니다.
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # Firestore 컬렉션 이름. 기존 클라이언트와 호환되도록 기본값을 유지합니다.
    USERS_COLLECTION = os.getenv('USERS_COLLECTION', 'users')
    CHATS_COLLECTION = os.getenv('CHATS_COLLECTION', 'chats')
    MESSAGES_SUBCOLLECTION = os.getenv('MESSAGES_SUBCOLLECTION', 'messages')

    # getChat 요청에 limit이 없을 때 반환할 최대 메시지 수
    CHAT_PAGE_LIMIT = int(os.getenv('CHAT_PAGE_LIMIT', 100))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    # 개발용 Firebase 프로젝트에 연결하기 위한 서비스 계정 키 파일 경로
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH')

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

class ProductionConfig(Config):
    """운영 환경 설정. 키 파일이 없으면 Application Default Credentials를 사용합니다."""
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

# FLASK_ENV 값에 따라 create_app에서 적절한 설정을 선택하는 데 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
