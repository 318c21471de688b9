"""POST /api/preview/rotate — animated rotation transition as Server-Sent Events."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from squircley.models.requests import RotationPreviewRequest

router = APIRouter(prefix="/preview")


@router.post("/rotate")
async def preview_rotate(req: RotationPreviewRequest) -> StreamingResponse:
    from squircley.preview.stream import stream_rotation_frames

    return StreamingResponse(
        stream_rotation_frames(
            curvature=req.curvature,
            from_rotation=req.from_rotation,
            to_rotation=req.to_rotation,
            duration_ms=req.duration_ms,
        ),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )
