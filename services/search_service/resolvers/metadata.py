"""
Metadata Resolver

Resolves the audit block (creator, owner, last modifier) attached to every
resource. The three employees are always resolved *shallow*: an employee's
own metadata references further employees, so resolving it here would never
bottom out. Metadata resolution is therefore exactly one level deep.
"""

from typing import TYPE_CHECKING

from shared.domain.exceptions import ResourceNotFoundError
from services.search_service.models.raw import ResourceMetadata
from services.search_service.models.views import ResourceMetadataView
from services.search_service.resolvers.base import ResolutionOptions, Resolver

if TYPE_CHECKING:
    from services.search_service.resolvers.employee import EmployeeResolver


class MetadataResolver(Resolver):
    """Resolves audit blocks with shallow employees."""

    def __init__(self, employees: "EmployeeResolver", options: ResolutionOptions):
        """
        Initialize metadata resolver.

        Args:
            employees: Resolver used for creator, modifier and owner
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.employees = employees

    async def resolve(
        self,
        metadata: ResourceMetadata | None,
        owner_type: str,
        owner_id: int,
    ) -> ResourceMetadataView:
        """
        Resolve a metadata block.

        Args:
            metadata: Raw block, possibly missing
            owner_type: Entity type the block belongs to (for error context)
            owner_id: Identifier of the owning entity

        Returns:
            ResourceMetadataView: Block with shallow employees

        Raises:
            ResourceNotFoundError: If the block is missing or an employee it
                references does not exist
        """
        if metadata is None:
            raise ResourceNotFoundError(
                "ResourceMetadata",
                owner_id,
                message=f"{owner_type} has no resource metadata",
                context={"owner_type": owner_type},
            )

        creator, modifier, owner = await self.each(
            [metadata.resource_creator, metadata.last_modifier, metadata.resource_owner],
            self.employees.shallow,
        )
        return ResourceMetadataView(
            resource_creator=creator,
            creation_date_time=metadata.creation_date_time,
            last_modifier=modifier,
            last_modified_date_time=metadata.last_modified_date_time,
            resource_owner=owner,
            is_active=metadata.is_active,
        )
