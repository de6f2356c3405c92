"""Route preview endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...schemas.routing import RoutePreviewRequest, RoutePreviewResponse
from ...services.routing.service import build_route_preview, export_route_csv

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/sequence", response_model=RoutePreviewResponse, status_code=status.HTTP_200_OK)
def sequence(payload: RoutePreviewRequest) -> RoutePreviewResponse:
    """Order the vendor's subscribers into a delivery route with ETAs."""
    try:
        return build_route_preview(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error sequencing delivery route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to sequence delivery route: {str(exc)}",
        ) from exc


@router.post("/sequence/export", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_sequence(payload: RoutePreviewRequest) -> PlainTextResponse:
    """Download the sequenced route as CSV."""
    try:
        content = export_route_csv(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PlainTextResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="delivery_route.csv"'},
    )
