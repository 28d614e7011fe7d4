"""Services for nx-runner.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from nxrunner.services.boundary_resolver import BoundaryResolver, RevisionQuery
from nxrunner.services.git_operations import GitOperationsService
from nxrunner.services.nx_dispatcher import NxDispatcher

__all__ = [
    "BoundaryResolver",
    "GitOperationsService",
    "NxDispatcher",
    "RevisionQuery",
]
