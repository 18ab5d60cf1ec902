"""数据库初始化测试"""
from unittest.mock import patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from todo_api.database import Base, init_db
from todo_api.services.task_service import TaskService


def test_schema_created(engine):
    inspector = inspect(engine)
    assert "tasks" in inspector.get_table_names()

    columns = {col["name"] for col in inspector.get_columns("tasks")}
    assert columns == {"id", "session_id", "title", "completed", "created_at", "updated_at"}

    indexes = {idx["name"]: idx["column_names"] for idx in inspector.get_indexes("tasks")}
    assert indexes["idx_tasks_session_id"] == ["session_id"]


def test_init_db_is_idempotent(engine, db):
    TaskService.create_task(db, "t1", "s1", "survives restart")

    # 再次初始化不应报错，也不应清空已有数据
    init_db(bind=engine)
    init_db(bind=engine)

    assert [t.id for t in TaskService.list_tasks(db, "s1")] == ["t1"]


def test_init_db_failure_is_raised(engine):
    error = OperationalError("CREATE TABLE", {}, Exception("unable to open database file"))
    with patch.object(Base.metadata, "create_all", side_effect=error):
        with pytest.raises(OperationalError):
            init_db(bind=engine)
