# chat_backend/conftest.py
"""
테스트 공용 픽스처.

FakeFirestore는 서비스가 사용하는 Firestore 클라이언트 API의 일부
(collection/document/get/create/set/update/delete/add/batch/where/order_by/limit/stream)를
메모리에서 흉내 냅니다. SERVER_TIMESTAMP는 단조 증가하는 UTC 시각으로 치환됩니다.
"""
import copy
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from firebase_admin import firestore
from google.api_core.exceptions import AlreadyExists, NotFound

from chat_backend import create_app


class FakeDocumentSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, store, path):
        self._store = store
        self._path = path

    @property
    def id(self):
        return self._path[-1]

    @property
    def path(self):
        return '/'.join(self._path)

    def get(self):
        return FakeDocumentSnapshot(self, self._store.read(self._path))

    def create(self, data):
        if self._store.read(self._path) is not None:
            raise AlreadyExists(f"Document already exists: {self.path}")
        self._store.write(self._path, data)

    def set(self, data):
        self._store.write(self._path, data)

    def update(self, data):
        current = self._store.read(self._path)
        if current is None:
            raise NotFound(f"No document to update: {self.path}")
        current.update(data)
        self._store.write(self._path, current)

    def delete(self):
        self._store.remove(self._path)

    def collection(self, name):
        return FakeCollectionReference(self._store, self._path + (name,))


class FakeQuery:
    OPERATORS = {
        '==': lambda a, b: a == b,
        '>=': lambda a, b: a >= b,
        '>': lambda a, b: a > b,
        '<=': lambda a, b: a <= b,
        '<': lambda a, b: a < b,
    }

    def __init__(self, store, collection_path, filters=(), order=None, limit_count=None):
        self._store = store
        self._collection_path = collection_path
        self._filters = filters
        self._order = order
        self._limit_count = limit_count

    def _copy(self, **changes):
        params = dict(filters=self._filters, order=self._order, limit_count=self._limit_count)
        params.update(changes)
        return FakeQuery(self._store, self._collection_path, **params)

    def where(self, field, op, value):
        return self._copy(filters=self._filters + ((field, op, value),))

    def order_by(self, field, direction=firestore.Query.ASCENDING):
        return self._copy(order=(field, direction))

    def limit(self, count):
        return self._copy(limit_count=count)

    def stream(self):
        docs = [
            FakeDocumentSnapshot(FakeDocumentReference(self._store, path), data)
            for path, data in self._store.children(self._collection_path)
        ]
        for field, op, value in self._filters:
            docs = [
                doc for doc in docs
                if field in doc._data and self.OPERATORS[op](doc._data[field], value)
            ]
        if self._order:
            field, direction = self._order
            docs = [doc for doc in docs if field in doc._data]
            docs.sort(key=lambda doc: doc._data[field], reverse=direction == firestore.Query.DESCENDING)
        if self._limit_count is not None:
            docs = docs[:self._limit_count]
        return iter(docs)


class FakeCollectionReference(FakeQuery):
    def __init__(self, store, path):
        super().__init__(store, path)

    @property
    def id(self):
        return self._collection_path[-1]

    def document(self, document_id=None):
        document_id = document_id or uuid.uuid4().hex[:20]
        return FakeDocumentReference(self._store, self._collection_path + (document_id,))

    def add(self, data):
        doc_ref = self.document()
        doc_ref.set(data)
        return self._store.server_time(), doc_ref


class FakeWriteBatch:
    def __init__(self, store):
        self._store = store
        self._writes = []

    def set(self, reference, data):
        self._writes.append(lambda: reference.set(data))

    def update(self, reference, data):
        self._writes.append(lambda: reference.update(data))

    def delete(self, reference):
        self._writes.append(reference.delete)

    def commit(self):
        for write in self._writes:
            write()
        self._writes = []
        self._store.batch_commits += 1


class FakeFirestore:
    def __init__(self):
        self._docs = {}
        self._last_timestamp = None
        self.batch_commits = 0

    def server_time(self):
        now = datetime.now(timezone.utc)
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    def collection(self, name):
        return FakeCollectionReference(self, (name,))

    def batch(self):
        return FakeWriteBatch(self)

    # --- 내부 저장소 ---
    def read(self, path):
        data = self._docs.get(path)
        return copy.deepcopy(data) if data is not None else None

    def write(self, path, data):
        resolved = {
            key: self.server_time() if value is firestore.SERVER_TIMESTAMP else value
            for key, value in data.items()
        }
        self._docs[path] = copy.deepcopy(resolved)

    def remove(self, path):
        self._docs.pop(path, None)

    def children(self, collection_path):
        depth = len(collection_path) + 1
        return sorted(
            (path, data) for path, data in self._docs.items()
            if len(path) == depth and path[:-1] == collection_path
        )

    def paths(self):
        return sorted(self._docs)


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def app(db):
    return create_app('testing', db=db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def call(client):
    """callable 규약({"data": ...})으로 POST 요청을 보내는 헬퍼"""
    def _call(name, data):
        return client.post(f'/{name}', json={'data': data})
    return _call
