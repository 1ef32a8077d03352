# chat_backend/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

# - 설정 및 공통 오류
from chat_backend.core.config import config_by_name
from chat_backend.core.callable import callable_error
from chat_backend.core.errors import CallableError, UnknownError

# - Firestore 초기화
from chat_backend.services.firestore_service import init_firestore

# - API 블루프린트 및 서비스
from chat_backend.api.accounts.routes import accounts_bp
from chat_backend.api.accounts.services import AccountService
from chat_backend.api.messages.routes import messages_bp
from chat_backend.api.messages.services import MessageService

def create_app(config_name=None, db=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' / 'testing' / 'production'. 없으면 FLASK_ENV를 사용합니다.
    :param db: 이미 생성된 Firestore 클라이언트. 주어지면 Firebase 초기화를 건너뜁니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 로깅 설정
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=app.config['LOG_LEVEL'], format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    # =====================================================================================
    # 5. Firestore 클라이언트 및 서비스 인스턴스 생성 (의존성 주입)
    # =====================================================================================
    if db is None:
        try:
            db = init_firestore(app)
        except Exception as e:
            logging.error(f"Failed to initialize Firestore: {e}")
            raise

    app.services = {}
    app.services['accounts'] = AccountService(db, users_collection=app.config['USERS_COLLECTION'])
    app.services['messages'] = MessageService(
        db,
        chats_collection=app.config['CHATS_COLLECTION'],
        messages_subcollection=app.config['MESSAGES_SUBCOLLECTION'],
        page_limit=app.config['CHAT_PAGE_LIMIT']
    )

    # =====================================================================================
    # 6. 블루프린트 등록 (callable 이름이 곧 경로)
    # =====================================================================================
    app.register_blueprint(accounts_bp)
    app.register_blueprint(messages_bp)

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok"}), 200

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(CallableError)
    def handle_callable_error(err):
        return callable_error(err)

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 404/405 등 HTTP 예외는 Flask 기본 응답을 그대로 사용
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return callable_error(UnknownError("An unexpected error occurred", details=str(err)))

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
