import pytest
from fastapi.testclient import TestClient
from main import app
from app.services.student_store import InMemoryStudentStore, get_student_store
from app.utils.logger import AuditLogger, get_audit_logger


@pytest.fixture
def store():
    return InMemoryStudentStore()


@pytest.fixture
def audit(tmp_path):
    return AuditLogger(log_dir=str(tmp_path / "logs"), enabled=True)


@pytest.fixture
def client(store, audit):
    app.dependency_overrides[get_student_store] = lambda: store
    app.dependency_overrides[get_audit_logger] = lambda: audit
    yield TestClient(app)
    app.dependency_overrides.clear()
