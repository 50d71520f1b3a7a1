"""Domain errors raised by services and mapped to HTTP responses in main.py."""


class PortalError(Exception):
    """Base class for every error a service reports to the caller."""


class ValidationError(PortalError):
    """A field on create/update is missing or invalid."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class PermissionDeniedError(PortalError):
    """The caller's role does not allow the operation.

    The message never says which role would have been sufficient.
    """

    def __init__(self):
        super().__init__("Not permitted")


class NotFoundError(PortalError):
    """A referenced record does not exist (or is not visible to the caller)."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found")


class InvalidTransitionError(PortalError):
    """A workflow transition is not legal from the project's current status."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move project from '{current}' to '{target}'")


class PersistenceError(PortalError):
    """The store rejected a read or write. Nothing was committed."""

    def __init__(self, message: str = "The operation could not be completed"):
        super().__init__(message)
