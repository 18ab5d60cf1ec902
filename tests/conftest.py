"""测试公共 fixtures：内存 SQLite 数据库与 FastAPI 测试客户端。"""
import os

# 在导入应用之前指定内存数据库，避免测试写入本地文件
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_api.database import Base, get_db, init_db
from todo_api.main import app


@pytest.fixture
def engine():
    """每个测试独立的内存数据库引擎"""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """直接操作存储层使用的数据库会话"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """替换 get_db 依赖的测试客户端"""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers():
    """会话 s1 的请求头"""
    return {"x-session-id": "s1"}
