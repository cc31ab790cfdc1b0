from .entity import AggregateRoot, Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    InvalidTransitionException,
    ResourceNotFoundException,
    SlotConflictException,
    StorageException,
    ValidationException,
)
from .repository import Repository
from .value_object import Currency, Money

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "SlotConflictException",
    "InvalidTransitionException",
    "StorageException",
    "Currency",
    "Money",
]
