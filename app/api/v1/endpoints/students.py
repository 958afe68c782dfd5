from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List
from app.models.student import Student, StudentCreate, StudentUpdate
from app.services.student_store import StudentStore, DuplicateStudentError, get_student_store
from app.utils.logger import AuditLogger, get_audit_logger

router = APIRouter()


@router.get("/", response_model=List[Student])
async def get_students(store: StudentStore = Depends(get_student_store)):
    """Get all students"""
    return store.list_all()


@router.get(
    "/{student_id}",
    response_model=Student,
    responses={404: {"description": "Student not found (empty body)"}}
)
async def get_student(student_id: str, store: StudentStore = Depends(get_student_store)):
    """Get a specific student by ID"""
    student = store.find_by_id(student_id)
    if student is None:
        return Response(status_code=404)
    return student


@router.post("/", response_model=Student)
async def create_student(
    student: StudentCreate,
    store: StudentStore = Depends(get_student_store),
    audit: AuditLogger = Depends(get_audit_logger)
):
    """Create a new student"""
    try:
        created = store.insert(student)
    except DuplicateStudentError as e:
        raise HTTPException(status_code=409, detail=str(e))
    audit.log_event("student.created", created.id, created.model_dump())
    return created


@router.put("/{student_id}", response_model=Student)
async def update_student(
    student_id: str,
    student: StudentUpdate,
    store: StudentStore = Depends(get_student_store),
    audit: AuditLogger = Depends(get_audit_logger)
):
    """Replace an existing student"""
    updated = store.replace(student_id, student)
    # Missing ids are a bad request here, not a 404
    if updated is None:
        raise HTTPException(
            status_code=400,
            detail=f"Cannot update student {student_id}: no such student"
        )
    audit.log_event("student.updated", student_id, updated.model_dump())
    return updated


@router.delete("/{student_id}", response_model=Student)
async def delete_student(
    student_id: str,
    store: StudentStore = Depends(get_student_store),
    audit: AuditLogger = Depends(get_audit_logger)
):
    """Delete a student and return the removed record"""
    deleted = store.remove_by_id(student_id)
    if deleted is None:
        raise HTTPException(status_code=404, detail=f"Student {student_id} not found")
    audit.log_event("student.deleted", student_id, deleted.model_dump())
    return deleted
