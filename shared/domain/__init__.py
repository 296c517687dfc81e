"""
Search Domain

Error kinds exposed by the search service at its boundary.
"""

from shared.domain.exceptions import (
    CollaboratorUnavailableError,
    DomainException,
    ErrorCode,
    InvalidRequestError,
    ResourceNotFoundError,
)

__all__ = [
    "CollaboratorUnavailableError",
    "DomainException",
    "ErrorCode",
    "InvalidRequestError",
    "ResourceNotFoundError",
]
