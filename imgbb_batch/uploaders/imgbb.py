"""ImgBB API uploader implementation."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, Protocol

import requests
from requests.exceptions import (
    ConnectionError,
    HTTPError,
    RequestException,
    Timeout,
)
from requests_toolbelt.multipart.encoder import MultipartEncoder

from imgbb_batch.config import DEFAULT_TIMEOUT, UploaderConfig
from imgbb_batch.exceptions import UploadError
from imgbb_batch.models.upload import UploadFailure, UploadOutcome, UploadSuccess

# ImgBB error code for an upload request that carries no image
EMPTY_SOURCE_ERROR_CODE = 130


class ImageUploader(Protocol):
    """Anything that can upload one image and report how it went."""

    def upload_image(self, image_path: Path) -> UploadOutcome: ...


class ImgBBUploader:
    """Handles ImgBB API integration for single-image uploads."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        expiration: int | None = None,
    ) -> None:
        """Initialize the ImgBB uploader.

        Args:
            api_key: ImgBB API key
            timeout: Seconds to wait for each upload before giving up
            expiration: Optional auto-delete delay in seconds
        """
        self.api_key: str = api_key
        self.base_url: str = "https://api.imgbb.com/1"
        self.timeout: float = timeout
        self.expiration: int | None = expiration

    @classmethod
    def from_config(cls, config: UploaderConfig) -> ImgBBUploader:
        return cls(config.api_key, timeout=config.timeout, expiration=config.expiration)

    def _make_request(self, endpoint: str, encoder: MultipartEncoder) -> dict[str, Any]:
        """POST a multipart body and return the decoded JSON payload.

        Args:
            endpoint: API endpoint
            encoder: Multipart body to send

        Returns:
            Decoded JSON response

        Raises:
            UploadError: If the request fails or the response is not usable
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = requests.request(
                "POST",
                url,
                params={"key": self.api_key},
                data=encoder,
                headers={"Content-Type": encoder.content_type},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except Timeout as e:
            raise UploadError(f"Upload timed out after {self.timeout:g} seconds") from e
        except ConnectionError as e:
            raise UploadError(f"Connection failed: {e}") from e
        except HTTPError as e:
            raise self._http_upload_error(e) from e
        except RequestException as e:
            raise UploadError(f"Request failed: {e}") from e
        except ValueError as e:
            raise UploadError(f"Invalid JSON response from ImgBB: {e}") from e

        if not isinstance(payload, dict):
            raise UploadError("Unexpected response from ImgBB")
        return payload

    @staticmethod
    def _http_upload_error(error: HTTPError) -> UploadError:
        """Build an UploadError carrying the API's own message and error code."""
        response = error.response
        if response is None:
            return UploadError(str(error))

        try:
            body = response.json()
        except ValueError:
            return UploadError(
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        message = None
        error_code = None
        if isinstance(body, dict):
            err = body.get("error")
            if isinstance(err, dict):
                message = err.get("message")
                code = err.get("code")
                error_code = code if isinstance(code, int) else None
            message = message or body.get("status_txt")
        return UploadError(
            f"HTTP {response.status_code}: {message or response.reason}",
            status_code=response.status_code,
            error_code=error_code,
        )

    def test_connection(self) -> bool:
        """Check that the API key is accepted.

        Sends an upload request without an image. ImgBB answers a valid key
        with HTTP 400 and error code 130 (empty upload source); any other
        answer, including timeouts and server errors, counts as a failure.

        Returns:
            True if the API key looks valid
        """
        encoder = MultipartEncoder(fields=[("name", "connection-test")])
        try:
            self._make_request("/upload", encoder)
        except UploadError as e:
            return e.status_code == 400 and e.error_code == EMPTY_SOURCE_ERROR_CODE
        return False

    def upload_image(self, image_path: Path) -> UploadOutcome:
        """Upload one image file.

        Every failure, including timeouts and unreadable files, is returned
        as an UploadFailure instead of being raised.

        Args:
            image_path: Path of the image to upload

        Returns:
            UploadSuccess with the hosted URLs, or UploadFailure with a reason
        """
        filename = image_path.name
        try:
            data = self._upload(image_path)
        except (UploadError, OSError) as e:
            return UploadFailure(filename=filename, error_message=str(e))

        url = data.get("url")
        if not url:
            return UploadFailure(
                filename=filename,
                error_message="ImgBB response did not include an image URL",
            )

        return UploadSuccess(
            filename=filename,
            url=url,
            delete_url=data.get("delete_url") or "",
            display_url=data.get("display_url") or "",
        )

    def _upload(self, image_path: Path) -> dict[str, Any]:
        """Send the image and return the ``data`` object of the response."""
        mime_type = mimetypes.guess_type(image_path.name)[0] or "application/octet-stream"

        with image_path.open("rb") as image_file:
            fields: list[tuple[str, Any]] = [
                ("image", (image_path.name, image_file, mime_type)),
                ("name", image_path.stem),
            ]
            if self.expiration is not None:
                fields.append(("expiration", str(self.expiration)))

            payload = self._make_request("/upload", MultipartEncoder(fields=fields))

        if payload.get("success") is False:
            error = payload.get("error")
            message = error.get("message") if isinstance(error, dict) else None
            raise UploadError(message or "ImgBB reported a failed upload")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise UploadError("ImgBB response did not include upload data")
        return data
