"""POST /chunks/import and /chunks/export: exchange finished chunk lists as JSON."""

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import Response

from rsvp_segmenter.controllers.routes._uploads import read_upload
from rsvp_segmenter.controllers.schema.chunks import ChunkExportRequest, ChunkListResponse
from rsvp_segmenter.services.chunk_lists.codec import (
    EXPORT_FILENAME,
    ChunkListError,
    dump_chunk_texts,
    parse_chunk_list,
)

router = APIRouter(prefix="/chunks", tags=["chunks"])


@router.post("/import", response_model=ChunkListResponse)
async def import_chunks(file: UploadFile = File(..., description="JSON chunk list")) -> ChunkListResponse:
    """
    Load a chunk list: a flat array of strings, or an array of {id, text} objects.
    Ids are always renumbered from zero. Structural defects are rejected with 400.
    """
    data = await read_upload(file)
    try:
        chunks = parse_chunk_list(data)
    except ChunkListError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ChunkListResponse(chunks=chunks, count=len(chunks))


@router.post("/export")
async def export_chunks(body: ChunkExportRequest) -> Response:
    """Download chunk texts as a flat JSON array (ids dropped, order kept)."""
    if not body.chunks:
        raise HTTPException(status_code=400, detail="No chunks to export.")
    return Response(
        content=dump_chunk_texts(body.chunks),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
