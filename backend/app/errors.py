"""Domain error taxonomy shared by the service layer."""

from enum import Enum

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    INVALID_COACH = "INVALID_COACH"
    BATCH_NOT_FOUND = "BATCH_NOT_FOUND"
    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    ASSIGNMENT_NOT_FOUND = "ASSIGNMENT_NOT_FOUND"
    DUPLICATE_ASSIGNMENT = "DUPLICATE_ASSIGNMENT"
    INVALID_ADJUSTMENT = "INVALID_ADJUSTMENT"
    ATTENDANCE_CONFLICT = "ATTENDANCE_CONFLICT"


class DomainError(HTTPException):
    """HTTPException that also carries a machine-readable error code."""

    code: ErrorCode
    status_code_default: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request could not be processed."

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code_default, detail=detail or self.message)


class InvalidCoach(DomainError):
    code = ErrorCode.INVALID_COACH
    message = "Invalid coach ID or user is not a coach."


class BatchNotFound(DomainError):
    code = ErrorCode.BATCH_NOT_FOUND
    status_code_default = status.HTTP_404_NOT_FOUND
    message = "Batch not found."


class EnrollmentNotFound(DomainError):
    code = ErrorCode.ENROLLMENT_NOT_FOUND
    status_code_default = status.HTTP_404_NOT_FOUND
    message = "Enrollment not found."


class AssignmentNotFound(DomainError):
    code = ErrorCode.ASSIGNMENT_NOT_FOUND
    status_code_default = status.HTTP_404_NOT_FOUND
    message = "Assignment not found."


class DuplicateAssignment(DomainError):
    code = ErrorCode.DUPLICATE_ASSIGNMENT
    status_code_default = status.HTTP_409_CONFLICT
    message = "Coach is already assigned to this batch."


class InvalidAdjustment(DomainError):
    code = ErrorCode.INVALID_ADJUSTMENT
    message = "Session adjustment must be a positive number of sessions."


class AttendanceConflict(DomainError):
    code = ErrorCode.ATTENDANCE_CONFLICT
    status_code_default = status.HTTP_409_CONFLICT
    message = "Attendance for this session is being marked concurrently; retry."


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code.value},
    )
