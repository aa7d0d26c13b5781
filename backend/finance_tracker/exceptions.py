"""Errors raised by the services and mapped to HTTP responses in main.py."""


class FinanceTrackerError(Exception):
    """Base class for all application errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FinanceTrackerError):
    """A field failed validation before anything was written."""

    status_code = 422

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class NotFoundError(FinanceTrackerError):
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class AccessDeniedError(FinanceTrackerError):
    """The caller does not own the row it tried to read or write."""

    status_code = 403

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message)


class DuplicateBudgetError(FinanceTrackerError):
    status_code = 409

    def __init__(self):
        super().__init__("A budget for this category and month already exists")


class DuplicateEmailError(FinanceTrackerError):
    status_code = 409

    def __init__(self):
        super().__init__("An account with this email already exists")


class AuthenticationError(FinanceTrackerError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ConfirmationRequiredError(FinanceTrackerError):
    """A destructive call was made without explicit confirmation."""

    status_code = 409

    def __init__(self, prompt: str):
        super().__init__(prompt)
        self.prompt = prompt
