"""Dependency utilities for route handlers.

Resolves the gateway and the service per request so tests (and other
deployments) can swap either through ``app.dependency_overrides``.
"""

from typing import Any, Dict

from fastapi import Depends, Request

from sudoku_profiles.helpers.database_helpers import (
    MongoGateway,
    PersistenceGateway,
    get_db,
)
from sudoku_profiles.helpers.query_helpers import expand_dot
from sudoku_profiles.services.profile_service import ProfileQueryService
from sudoku_profiles.utils.misc import parse_items


def get_gateway() -> PersistenceGateway:
    """Return a gateway over the configured MongoDB database."""
    return MongoGateway(get_db())


def get_profile_service(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> ProfileQueryService:
    """Build the service around the injected gateway."""
    return ProfileQueryService(gateway)


def get_filter_query(request: Request) -> Dict[str, Any]:
    """Turn the request's query string into a nested filter mapping.

    Values go through decode_value (``strategyA=2`` becomes an int, an
    81-digit board stays a string) and dotted keys are expanded, e.g.
    ``moves.puzzleCurrentState=...``.
    """
    return expand_dot(parse_items(request.query_params.multi_items()))
