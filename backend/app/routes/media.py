"""
TourGuide Backend — Media Route Handlers
==========================================

What:  Upload, serve and delete photo/audio/video files for points of interest.
How:   Validates the upload at the HTTP boundary, then hands bytes to the
       MediaStore, which only knows about categories and filenames.

Request Flow (upload):
    1. Client sends multipart/form-data; the field is named after the kind
       ("photo", "audio" or "video")
    2. Empty body → 400
    3. Content-Type outside the kind's family (image/*, audio/*, video/*) → 400
    4. MediaStore.save() writes the bytes under a generated name
    5. 200 {"filename": ..., "path": "/api/media/<category>/<filename>"}

Serving:
    GET /api/media/{photos|audio|videos}/{filename} streams the file with an
    inline Content-Disposition so browsers play/display it instead of
    downloading it.
"""

import logging
import mimetypes

from fastapi import APIRouter, Depends, File, Response, UploadFile
from fastapi.responses import FileResponse

from app.exceptions import NotFoundError, ValidationError
from app.schemas.common import ErrorResponse
from app.schemas.media import UploadResponse
from app.services.media_store import CATEGORIES, MEDIA_KINDS, MediaStore, get_media_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["Media"])

_UPLOAD_RESPONSES = {
    200: {"description": "File stored", "model": UploadResponse},
    400: {"description": "Empty file or wrong content type", "model": ErrorResponse},
}


async def _handle_upload(kind_name: str, file: UploadFile, store: MediaStore) -> UploadResponse:
    """Shared validation + storage for the three upload endpoints."""
    kind = MEDIA_KINDS[kind_name]
    try:
        content = await file.read()

        logger.info(
            "Received %s upload: filename=%s, content_type=%s, size=%d bytes",
            kind.kind,
            file.filename or "unknown",
            file.content_type,
            len(content),
        )

        if not content:
            raise ValidationError(message="File must not be empty", field=kind.kind)

        content_type = (file.content_type or "").lower()
        if not content_type.startswith(kind.content_prefix):
            raise ValidationError(
                message=f"File must be of type {kind.content_prefix}*",
                field=kind.kind,
                context={"content_type": content_type or None},
            )

        filename = await store.save(kind.category, content, file.filename)
        return UploadResponse(filename=filename, path=f"/api/media/{kind.category}/{filename}")
    finally:
        await file.close()


@router.post(
    "/upload/photo",
    response_model=UploadResponse,
    responses=_UPLOAD_RESPONSES,
    summary="Upload a photo",
)
async def upload_photo(
    photo: UploadFile = File(..., description="Image file (image/*)"),
    store: MediaStore = Depends(get_media_store),
) -> UploadResponse:
    return await _handle_upload("photo", photo, store)


@router.post(
    "/upload/audio",
    response_model=UploadResponse,
    responses=_UPLOAD_RESPONSES,
    summary="Upload an audio clip",
)
async def upload_audio(
    audio: UploadFile = File(..., description="Audio file (audio/*)"),
    store: MediaStore = Depends(get_media_store),
) -> UploadResponse:
    return await _handle_upload("audio", audio, store)


@router.post(
    "/upload/video",
    response_model=UploadResponse,
    responses=_UPLOAD_RESPONSES,
    summary="Upload a video",
)
async def upload_video(
    video: UploadFile = File(..., description="Video file (video/*)"),
    store: MediaStore = Depends(get_media_store),
) -> UploadResponse:
    return await _handle_upload("video", video, store)


def _require_category(category: str) -> None:
    # Unknown categories are reported as missing resources, like any bad URL
    if category not in CATEGORIES:
        raise NotFoundError(resource="media category", resource_id=category)


@router.get(
    "/{category}/{filename}",
    responses={
        200: {"description": "The media file, served inline"},
        404: {"description": "File not found", "model": ErrorResponse},
    },
    summary="Serve an uploaded media file",
)
async def serve_media(
    category: str,
    filename: str,
    store: MediaStore = Depends(get_media_store),
) -> FileResponse:
    _require_category(category)
    path = store.resolve(category, filename)
    if not path.is_file():
        raise NotFoundError(resource="file", resource_id=filename)

    media_type = mimetypes.guess_type(filename)[0] or CATEGORIES[category].default_media
    return FileResponse(
        path=str(path),
        media_type=media_type,
        filename=filename,
        content_disposition_type="inline",
    )


@router.delete(
    "/{category}/{filename}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "File not found", "model": ErrorResponse}},
    summary="Delete an uploaded media file",
)
async def delete_media(
    category: str,
    filename: str,
    store: MediaStore = Depends(get_media_store),
) -> Response:
    _require_category(category)
    if not await store.delete(category, filename):
        raise NotFoundError(resource="file", resource_id=filename)
    return Response(status_code=204)
