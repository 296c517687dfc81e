"""
Batch Resolver

Resolves a training batch's trainer, optional co-trainer, associate roster
and metadata.
"""

import structlog

from services.search_service.lookups import BatchLookup
from services.search_service.models.raw import Batch
from services.search_service.models.views import BatchView
from services.search_service.resolvers.base import ResolutionOptions, Resolver
from services.search_service.resolvers.employee import EmployeeResolver

logger = structlog.get_logger(__name__)

# Co-trainer id meaning "not assigned"; never looked up.
NO_CO_TRAINER = 0


class BatchResolver(Resolver):
    """Resolves training batches with their trainers and associates."""

    def __init__(
        self,
        lookup: BatchLookup,
        employees: EmployeeResolver,
        options: ResolutionOptions,
    ):
        """
        Initialize batch resolver.

        Args:
            lookup: Batch collaborator
            employees: Employee resolver
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.lookup = lookup
        self.employees = employees

    async def fetch_batch(self, batch_id: int) -> Batch:
        """Fetch a raw batch by ID."""
        return await self.fetch(self.lookup.service_name, "Batch", batch_id, self.lookup.by_id(batch_id))

    async def resolve_by_id(self, batch_id: int) -> BatchView:
        """Fetch and resolve a batch."""
        return await self.resolve(await self.fetch_batch(batch_id))

    async def resolve(self, batch: Batch) -> BatchView:
        """
        Resolve a raw batch into its view.

        Args:
            batch: Raw batch from the batch collaborator

        Returns:
            BatchView: Trainer, co-trainer (None when unassigned) and associates
            resolved deep, in the order the employee service returned them
        """
        trainer = await self.employees.deep(batch.trainer_id)

        co_trainer = None
        if batch.co_trainer_id != NO_CO_TRAINER:
            co_trainer = await self.employees.deep(batch.co_trainer_id)
        else:
            logger.debug("Batch has no co-trainer", batch_id=batch.id)

        associates = await self.employees.deep_many(batch.associates)
        metadata = await self.employees.metadata.resolve(batch.resource_metadata, "Batch", batch.id)

        return BatchView(
            id=batch.id,
            name=batch.name,
            start_date=batch.start_date,
            end_date=batch.end_date,
            trainer=trainer,
            co_trainer=co_trainer,
            associates=associates,
            curriculum=batch.curriculum,
            resource_metadata=metadata,
        )
