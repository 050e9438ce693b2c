"""Routes for /api/v1/user/activeGames."""

from typing import Any, Dict, List, Union

from fastapi import APIRouter, Body, Depends, status

from sudoku_profiles.api.deps import get_filter_query, get_profile_service
from sudoku_profiles.api.models import (
    CreateResponse,
    DeleteResponse,
    ErrorResponse,
    UpdateResponse,
)
from sudoku_profiles.services.profile_service import ProfileQueryService

router = APIRouter(prefix="/api/v1/user/activeGames", tags=["activeGames"])


@router.post("", response_model=CreateResponse, status_code=status.HTTP_201_CREATED)
async def create_active_games(
    body: Union[Dict[str, Any], List[Dict[str, Any]]] = Body(...),
    service: ProfileQueryService = Depends(get_profile_service),
) -> Dict[str, Any]:
    """Store one active game or a list of them."""
    return await service.create(body)


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    responses={404: {"model": ErrorResponse}},
)
async def search_active_games(
    query: Dict[str, Any] = Depends(get_filter_query),
    service: ProfileQueryService = Depends(get_profile_service),
) -> List[Dict[str, Any]]:
    """Return the active games matching the query string."""
    return await service.search(query)


@router.patch("", response_model=UpdateResponse)
async def update_active_games(
    patch: Dict[str, Any] = Body(...),
    query: Dict[str, Any] = Depends(get_filter_query),
    service: ProfileQueryService = Depends(get_profile_service),
) -> Dict[str, Any]:
    """Set the body's fields on every active game matching the query string."""
    return await service.update(patch, query)


@router.delete("", response_model=DeleteResponse)
async def remove_active_games(
    query: Dict[str, Any] = Depends(get_filter_query),
    service: ProfileQueryService = Depends(get_profile_service),
) -> Dict[str, Any]:
    """Delete every active game matching the query string."""
    return await service.remove(query)
