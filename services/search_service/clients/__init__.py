"""
Collaborator Clients

HTTP implementations of the lookup protocols, one per upstream service.
"""

from services.search_service.clients.base import CollaboratorClient
from services.search_service.clients.campus_client import CampusServiceClient
from services.search_service.clients.employee_client import EmployeeServiceClient
from services.search_service.clients.training_client import BatchServiceClient, WorkOrderServiceClient

__all__ = [
    "CollaboratorClient",
    "CampusServiceClient",
    "EmployeeServiceClient",
    "BatchServiceClient",
    "WorkOrderServiceClient",
]
