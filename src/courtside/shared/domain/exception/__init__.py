from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    InvalidTransitionException,
    ResourceNotFoundException,
    SlotConflictException,
    StorageException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "SlotConflictException",
    "InvalidTransitionException",
    "StorageException",
]
