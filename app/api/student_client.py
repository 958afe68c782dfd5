import httpx
from urllib.parse import quote
from typing import Optional, List
from app.config import settings
from app.models.student import Student, StudentCreate, StudentUpdate


class StudentApiClient:
    """Client for interacting with the Student CRUD API."""
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None
    ):
        self.base_url = (base_url or settings.student_api_base).rstrip("/")
        self.timeout = timeout or settings.request_timeout
        self._transport = transport
        self._headers = {"Content-Type": "application/json"}
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers,
            transport=self._transport,
            timeout=self.timeout
        )
    
    async def list_students(self) -> List[Student]:
        """List all students."""
        async with self._client() as client:
            response = await client.get("/students/")
            response.raise_for_status()
            return [Student(**s) for s in response.json()]
    
    async def get_student(self, student_id: str) -> Optional[Student]:
        """Get a student by ID, or None if it does not exist."""
        async with self._client() as client:
            response = await client.get(f"/students/{quote(student_id, safe='')}")
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return Student(**response.json())
    
    async def create_student(self, student: StudentCreate) -> Student:
        """Create a student. The server assigns an id when none is given."""
        async with self._client() as client:
            response = await client.post(
                "/students/",
                json=student.model_dump(exclude_none=True)
            )
            response.raise_for_status()
            return Student(**response.json())
    
    async def update_student(self, student_id: str, student: StudentUpdate) -> Student:
        """
        Replace a student.

        Raises httpx.HTTPStatusError with a 400 status when the student does not exist.
        """
        async with self._client() as client:
            response = await client.put(
                f"/students/{quote(student_id, safe='')}",
                json=student.model_dump(exclude={"id"})
            )
            response.raise_for_status()
            return Student(**response.json())
    
    async def delete_student(self, student_id: str) -> Student:
        """Delete a student and return the removed record."""
        async with self._client() as client:
            response = await client.delete(f"/students/{quote(student_id, safe='')}")
            response.raise_for_status()
            return Student(**response.json())
