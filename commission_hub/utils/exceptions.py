from typing import List


class ServiceError(Exception):
    """Base class for failures the API reports to the caller"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(ServiceError):
    """One or more field level checks failed before reaching the database"""

    def __init__(self, errors: List[str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = list(errors)


class BusinessRuleViolation(ServiceError):
    pass


class EntityNotFound(ServiceError):
    pass
