"""User active games service.

Takes plain mappings from a controller (HTTP routes or the CLI) and directs
them to a persistence gateway. The only business rule here is that a search
matching nothing is an error; updates and deletes matching nothing are not,
since deleting a resource that does not exist is still a successful delete.
Errors from the gateway are not caught here.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from loguru import logger

from sudoku_profiles.errors import ProfileNotFoundError
from sudoku_profiles.helpers.database_helpers import (
    USER_ACTIVE_GAMES,
    ModelKind,
    PersistenceGateway,
)
from sudoku_profiles.helpers.query_helpers import normalize_filter


class ProfileQueryService:
    """CRUD over user active games through an injected gateway."""

    def __init__(
        self, gateway: PersistenceGateway, model: ModelKind = USER_ACTIVE_GAMES
    ) -> None:
        self.gateway = gateway
        self.model = model

    async def create(
        self, record: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]
    ) -> Dict[str, Any]:
        """Store one or more active game records as given."""
        return await self.gateway.create(record, self.model)

    async def search(
        self, query: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Return the records matching ``query``.

        Raises:
            ProfileNotFoundError: If nothing matches.
        """
        filters = normalize_filter(query)
        res = await self.gateway.search_matching_any(filters, self.model)
        if len(res) == 0:
            logger.info(f"No {self.model.name} found for filters={filters}")
            raise ProfileNotFoundError()
        return res

    async def update(
        self, patch: Mapping[str, Any], query: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Apply ``patch`` to every record matching ``query``."""
        filters = normalize_filter(query)
        return await self.gateway.update_matching_any(filters, patch, self.model)

    async def remove(self, query: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Delete every record matching ``query``."""
        filters = normalize_filter(query)
        return await self.gateway.delete_matching_any(filters, self.model)
