"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from photo_gallery.api.pages import NOT_FOUND_HTML
from photo_gallery.api.pages import router as pages_router
from photo_gallery.api.schemas import LoginRequest
from photo_gallery.app_logging import configure_logging
from photo_gallery.containers import AppContainer
from photo_gallery.domain.photos import (
    BatchRecord,
    GalleryBatch,
    GalleryPhoto,
    PhotoRecord,
    PhotoUpload,
)
from photo_gallery.errors import (
    InvalidUploadError,
    PhotoNotFoundError,
    UploadFailedError,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(pages_router)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)
        if request.url.path.startswith("/api/"):
            return _failure(status.HTTP_404_NOT_FOUND, "Route not found.")
        return HTMLResponse(NOT_FOUND_HTML, status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _failure(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/login")
    async def login(payload: LoginRequest, request: Request) -> JSONResponse:
        """Check the operator credentials."""
        state_container: AppContainer = request.app.state.container
        if not state_container.login_service.authenticate(
            payload.email, payload.password
        ):
            return _failure(status.HTTP_401_UNAUTHORIZED, "Invalid credentials.")
        return JSONResponse({"success": True, "message": "Login successful."})

    @app.post("/api/upload")
    async def upload_photos(
        request: Request, photos: list[UploadFile] | None = File(default=None)
    ) -> JSONResponse:
        """Upload up to ten photos as a new batch."""
        state_container: AppContainer = request.app.state.container
        uploads = photos or []
        try:
            state_container.upload_service.check_file_count(len(uploads))
            files = [
                PhotoUpload(
                    filename=photo.filename or "upload",
                    content_type=photo.content_type,
                    content=await photo.read(),
                )
                for photo in uploads
            ]
            summary = await state_container.upload_service.upload(files)
        except InvalidUploadError as exc:
            return _failure(status.HTTP_400_BAD_REQUEST, str(exc))
        except UploadFailedError as exc:
            return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        except Exception as exc:
            logger.exception("Upload failed")
            return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        return JSONResponse(
            {
                "success": True,
                "message": f"{summary.uploaded_count} photo(s) uploaded.",
                "batchId": str(summary.batch_id),
                "uploaded": summary.uploaded_count,
            }
        )

    @app.get("/api/photos")
    async def list_photos(request: Request) -> JSONResponse:
        """Return all photos, newest first."""
        state_container: AppContainer = request.app.state.container
        try:
            photos = await asyncio.to_thread(
                state_container.gallery_service.list_photos
            )
        except Exception as exc:
            logger.exception("Failed to list photos")
            return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        return JSONResponse(
            {"success": True, "photos": [_serialize_gallery_photo(p) for p in photos]}
        )

    @app.get("/api/batches")
    async def list_batches(request: Request) -> JSONResponse:
        """Return all upload batches with their photos."""
        state_container: AppContainer = request.app.state.container
        try:
            batches = await asyncio.to_thread(
                state_container.gallery_service.list_batches
            )
        except Exception as exc:
            logger.exception("Failed to list batches")
            return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        return JSONResponse(
            {
                "success": True,
                "batches": [_serialize_gallery_batch(b) for b in batches],
            }
        )

    @app.delete("/api/photos/{public_id:path}")
    async def delete_photo(public_id: str, request: Request) -> JSONResponse:
        """Delete a photo record and its stored asset."""
        state_container: AppContainer = request.app.state.container
        try:
            outcome = await state_container.deletion_service.delete(public_id)
        except PhotoNotFoundError:
            return _failure(status.HTTP_404_NOT_FOUND, "Photo not found.")
        except Exception as exc:
            logger.exception("Failed to delete photo %s", public_id)
            return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        return JSONResponse(
            {
                "success": True,
                "message": "Photo deleted.",
                "deletedPhoto": _serialize_photo(outcome.photo),
                "cloudinaryResult": outcome.asset_result,
            }
        )

    @app.get("/api/download/{public_id:path}", response_model=None)
    async def download_photo(
        public_id: str, request: Request, quality: str | None = None
    ) -> RedirectResponse | JSONResponse:
        """Redirect to a downloadable rendition of a photo."""
        state_container: AppContainer = request.app.state.container
        try:
            url = await asyncio.to_thread(
                state_container.download_service.download_url, public_id, quality
            )
        except PhotoNotFoundError:
            return JSONResponse(
                {"message": "Photo not found."},
                status_code=status.HTTP_404_NOT_FOUND,
            )
        except Exception as exc:
            logger.exception("Failed to build download URL for %s", public_id)
            return JSONResponse(
                {"message": str(exc)},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return RedirectResponse(url, status_code=status.HTTP_302_FOUND)

    return app


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        {"success": False, "message": message}, status_code=status_code
    )


def _validation_message(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "invalid value")
        details.append(f"{field}: {message}" if field else message)
    return "Invalid request: " + "; ".join(details)


def _serialize_photo(photo: PhotoRecord) -> dict[str, object]:
    return {
        "public_id": photo.public_id,
        "filename": photo.filename,
        "url": photo.url,
        "batchId": str(photo.batch_id) if photo.batch_id else None,
        "createdAt": photo.created_at.isoformat(),
    }


def _serialize_batch(batch: BatchRecord) -> dict[str, object]:
    return {
        "id": str(batch.id),
        "name": batch.name,
        "description": batch.description,
        "photoIds": list(batch.photo_ids),
        "createdAt": batch.created_at.isoformat(),
    }


def _serialize_gallery_photo(entry: GalleryPhoto) -> dict[str, object]:
    payload = _serialize_photo(entry.photo)
    payload["batch"] = (
        {"name": entry.batch.name, "description": entry.batch.description}
        if entry.batch
        else None
    )
    return payload


def _serialize_gallery_batch(entry: GalleryBatch) -> dict[str, object]:
    payload = _serialize_batch(entry.batch)
    payload["photos"] = [_serialize_photo(photo) for photo in entry.photos]
    return payload
