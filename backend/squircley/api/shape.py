"""POST /api/shape/* — path data and SVG markup for one static squircle."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from squircley.config import settings
from squircley.engine.superellipse import exponent_to_curvature
from squircley.models.requests import ExportRequest, PathRequest, SvgRequest
from squircley.models.responses import PathResponse, SvgResponse
from squircley.svg.serializer import EXPORT_FILENAME, serialize_export_svg, serialize_squircle_svg
from squircley.svg.validation import inspect_path

router = APIRouter(prefix="/shape")


@router.post("/path", response_model=PathResponse)
async def shape_path(req: PathRequest) -> PathResponse:
    params = req.to_parameters()
    d = params.path()
    report = inspect_path(d)
    return PathResponse(
        path=d,
        p=params.p,
        curvature=exponent_to_curvature(params.p),
        rotation=params.rotation,
        bbox=report.bbox,
        valid=report.valid,
        issues=report.issues,
    )


@router.post("/svg", response_model=SvgResponse)
async def shape_svg(req: SvgRequest) -> SvgResponse:
    d = req.to_parameters().path()
    size = settings.canvas_size
    svg = serialize_squircle_svg(d, size, size, req.fill, req.stroke, req.stroke_width)
    return SvgResponse(svg=svg, path=d)


@router.post("/export")
async def shape_export(req: ExportRequest) -> Response:
    d = req.to_parameters().path()
    svg = serialize_export_svg(d, fill=req.fill, stroke=req.stroke, stroke_width=req.stroke_width)
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
