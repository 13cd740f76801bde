from typing import Optional


class DeadlineError(Exception):
    """Base class for deadline scheduling failures"""


class NotFoundError(DeadlineError):
    """Raised when a referenced record does not exist"""

    def __init__(self, entity: str, entity_id) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConfigurationMissingError(DeadlineError, KeyError):
    """Raised when the default permission table has no entry for a pair"""

    def __init__(self, deadline_type: str, permission_type: str) -> None:
        super().__init__(
            f"No default permission for deadline type {deadline_type!r} "
            f"and permission {permission_type!r}"
        )
        self.deadline_type = deadline_type
        self.permission_type = permission_type

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DueDateCopyError(DeadlineError):
    """Raised when copying a schedule fails; nothing is written.

    Keeps both assignment ids so callers can tell which copy failed.
    """

    def __init__(
        self,
        old_assignment_id: int,
        new_assignment_id: int,
        due_date_id: Optional[int] = None,
    ) -> None:
        message = f"Failed to copy due dates from assignment {old_assignment_id} to {new_assignment_id}"
        if due_date_id is not None:
            message += f" (at due date {due_date_id})"
        super().__init__(message)
        self.old_assignment_id = old_assignment_id
        self.new_assignment_id = new_assignment_id
        self.due_date_id = due_date_id
