import threading
import uuid
from typing import Dict, List, Optional, Protocol
from app.models.student import Student, StudentCreate, StudentUpdate


class StudentStoreError(Exception):
    """Base error raised by student stores."""


class DuplicateStudentError(StudentStoreError):
    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student with id {student_id} already exists")


class StudentStore(Protocol):
    """Data-access capabilities the students router depends on."""

    def list_all(self) -> List[Student]: ...

    def find_by_id(self, student_id: str) -> Optional[Student]: ...

    def insert(self, student: StudentCreate) -> Student: ...

    def replace(self, student_id: str, student: StudentUpdate) -> Optional[Student]: ...

    def remove_by_id(self, student_id: str) -> Optional[Student]: ...


class InMemoryStudentStore:
    """Student store backed by a dict, keyed by id in insertion order."""

    def __init__(self, students: Optional[List[Student]] = None):
        self._students: Dict[str, Student] = {}
        self._lock = threading.Lock()
        for student in students or []:
            self.insert(StudentCreate(**student.model_dump()))

    def list_all(self) -> List[Student]:
        with self._lock:
            return [s.model_copy() for s in self._students.values()]

    def find_by_id(self, student_id: str) -> Optional[Student]:
        with self._lock:
            student = self._students.get(student_id)
            return student.model_copy() if student else None

    def insert(self, student: StudentCreate) -> Student:
        with self._lock:
            student_id = student.id if student.id is not None else str(uuid.uuid4())
            if student_id in self._students:
                raise DuplicateStudentError(student_id)
            stored = Student(id=student_id, **student.model_dump(exclude={"id"}))
            self._students[student_id] = stored
            return stored.model_copy()

    def replace(self, student_id: str, student: StudentUpdate) -> Optional[Student]:
        with self._lock:
            if student_id not in self._students:
                return None
            # Ids are immutable, the path id always wins
            updated = Student(id=student_id, **student.model_dump(exclude={"id"}))
            self._students[student_id] = updated
            return updated.model_copy()

    def remove_by_id(self, student_id: str) -> Optional[Student]:
        with self._lock:
            return self._students.pop(student_id, None)

    def clear(self):
        with self._lock:
            self._students.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)


# Process-wide store used by the API
student_store = InMemoryStudentStore()


def get_student_store() -> StudentStore:
    return student_store
