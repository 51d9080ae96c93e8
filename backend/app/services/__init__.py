"""Service layer package."""

from app.services import (
    auth_service,
    batch_service,
    user_service,
    assignment_service,
    attendance_service,
    progress_service,
    adjustment_service,
)
