"""
NSS Management Backend: Record Route Handlers
===============================================

What:  Router factory mapping GET/POST/PUT/DELETE /api/{resource}[/{id}]
       onto a RecordService.
Why:   The three record types expose identical endpoints; one factory builds
       a router per service instead of three copies of the same handlers.
How:   Routes stay thin: read path/body, call the service, return its result.
       Errors are raised by the service and rendered by the global handlers
       registered in main.py.

Status codes:
    GET    /api/{resource}        200
    GET    /api/{resource}/{id}   200 | 404 | 500
    POST   /api/{resource}        201 | 400
    PUT    /api/{resource}/{id}   200 | 400 | 404
    DELETE /api/{resource}/{id}   200 | 404 | 500
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nss_management.database import get_db_session
from nss_management.schemas.records import ErrorResponse, MessageResponse
from nss_management.services.record_service import RecordService, record_services


def build_router(service: RecordService) -> APIRouter:
    """Create the five CRUD endpoints for one record type."""
    resource = service.resource
    record_model = resource.response_schema
    singular = resource.name.lower()

    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.path.capitalize()])

    @router.get(
        "",
        name=f"list_{resource.path}",
        response_model=List[record_model],
        responses={500: {"model": ErrorResponse}},
        summary=f"List all {resource.path}",
    )
    async def list_records(db: AsyncSession = Depends(get_db_session)):
        return await service.list_records(db)

    @router.get(
        "/{record_id}",
        name=f"get_{singular}",
        response_model=record_model,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary=f"Get a {singular} by id",
    )
    async def get_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
        return await service.get_record(db, record_id)

    @router.post(
        "",
        name=f"create_{singular}",
        status_code=201,
        response_model=record_model,
        responses={400: {"model": ErrorResponse}},
        summary=f"Create a {singular}",
    )
    async def create_record(
        payload: Dict[str, Any] = Body(...),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.create_record(db, payload)

    @router.put(
        "/{record_id}",
        name=f"update_{singular}",
        response_model=record_model,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        summary=f"Update a {singular} (partial)",
    )
    async def update_record(
        record_id: str,
        payload: Dict[str, Any] = Body(...),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.update_record(db, record_id, payload)

    @router.delete(
        "/{record_id}",
        name=f"delete_{singular}",
        response_model=MessageResponse,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary=f"Delete a {singular}",
    )
    async def delete_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
        return await service.delete_record(db, record_id)

    return router


routers = [build_router(service) for service in record_services]
