"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, rejected before anything is written."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they neither own nor moderate."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a report already carries a different disposition.

    Usually means another administrator processed it first.
    """

    def __init__(self, report_id: str, current_status: str, requested: str):
        self.report_id = report_id
        self.current_status = current_status
        self.requested = requested
        super().__init__(
            f"Report {report_id} is already {current_status}, cannot mark {requested}"
        )


class CascadeInconsistencyError(DomainError):
    """Target of a reviewed report was already removed by another path.

    Recovered inside the moderation flow; never reaches API callers.
    """

    def __init__(self, target_type: str, target_id: str):
        self.target_type = target_type
        self.target_id = target_id
        super().__init__(f"{target_type} {target_id} was already removed")
