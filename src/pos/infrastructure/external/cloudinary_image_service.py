"""Cloudinary implementation of the ImageService port.

Uploads go through an *unsigned* upload preset, so only the cloud name and
preset are needed for them.  Deleting an image requires a signed request
and therefore the API key and secret as well.
"""

from __future__ import annotations

import hashlib
import logging
import mimetypes
import time
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from pos.domain.exceptions import UploadError
from pos.domain.service.image_service import (
    ImageService,
    UploadImageOptions,
    UploadImageResult,
)

log = logging.getLogger(__name__)

API_BASE_URL = "https://api.cloudinary.com/v1_1"
DELIVERY_BASE_URL = "https://res.cloudinary.com"
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB


class CloudinaryImageService(ImageService):

    def __init__(
        self,
        cloud_name: str,
        upload_preset: str,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        timeout: int = 10,
    ) -> None:
        """
        Args:
            cloud_name: Cloudinary cloud name.
            upload_preset: Name of an unsigned upload preset.
            api_key: API key, needed only for delete().
            api_secret: API secret, needed only for delete().
            timeout: HTTP timeout in seconds.

        Raises:
            ValueError: If cloud name or upload preset is missing.
        """
        if not cloud_name:
            raise ValueError("CLOUDINARY_CLOUD_NAME is not configured")
        if not upload_preset:
            raise ValueError("CLOUDINARY_UPLOAD_PRESET is not configured")
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.api_key = api_key or ""
        self.api_secret = api_secret or ""
        self.timeout = timeout

    # --- ImageService interface -----------------------------------------------

    def upload(
        self, file_path: Path, options: UploadImageOptions | None = None
    ) -> UploadImageResult:
        options = options or UploadImageOptions()
        content_type = self._validate_file(file_path)

        data: Dict[str, Any] = {"upload_preset": self.upload_preset}
        if options.folder:
            data["folder"] = options.folder
        if options.public_id:
            data["public_id"] = options.public_id

        log.info("Uploading %s to Cloudinary", file_path.name)
        try:
            with file_path.open("rb") as fh:
                resp = requests.post(
                    f"{API_BASE_URL}/{self.cloud_name}/image/upload",
                    data=data,
                    files={"file": (file_path.name, fh, content_type)},
                    timeout=self.timeout,
                )
        except requests.exceptions.Timeout as exc:
            log.error("Cloudinary upload timeout after %d seconds", self.timeout)
            raise UploadError(f"Cloudinary timeout after {self.timeout}s") from exc
        except requests.exceptions.RequestException as exc:
            log.error("Cloudinary upload request failed: %s", exc)
            raise UploadError(f"Cloudinary request failed: {exc}") from exc
        except OSError as exc:
            raise UploadError(f"Cannot read {file_path}: {exc}") from exc

        payload = self._parse_response(resp, "upload")
        try:
            return UploadImageResult(
                url=payload["url"],
                secure_url=payload["secure_url"],
                public_id=payload["public_id"],
                width=int(payload["width"]),
                height=int(payload["height"]),
                format=payload["format"],
                bytes=int(payload["bytes"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UploadError(f"Unexpected Cloudinary upload response: {exc}") from exc

    def delete(self, public_id: str) -> None:
        if not self.api_key or not self.api_secret:
            raise UploadError(
                "Deleting images requires CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET"
            )

        params = {"public_id": public_id, "timestamp": str(int(time.time()))}
        data = dict(params, api_key=self.api_key, signature=self._sign(params))

        try:
            resp = requests.post(
                f"{API_BASE_URL}/{self.cloud_name}/image/destroy",
                data=data,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            log.error("Cloudinary destroy request failed: %s", exc)
            raise UploadError(f"Cloudinary request failed: {exc}") from exc

        payload = self._parse_response(resp, "delete")
        if payload.get("result") != "ok":
            raise UploadError(
                f"Cloudinary could not delete '{public_id}': {payload.get('result')}"
            )
        log.info("Deleted Cloudinary image %s", public_id)

    def get_url(self, public_id: str, options: UploadImageOptions | None = None) -> str:
        options = options or UploadImageOptions()
        transformations = []
        if options.max_width:
            transformations.append(f"w_{options.max_width}")
        if options.max_height:
            transformations.append(f"h_{options.max_height}")
        if options.max_width or options.max_height:
            transformations.append("c_limit")
        transformations.append(f"q_{options.quality or 'auto'}")
        transformations.append("f_auto")

        return (
            f"{DELIVERY_BASE_URL}/{self.cloud_name}/image/upload/"
            f"{','.join(transformations)}/{public_id}"
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_file(file_path: Path) -> str:
        content_type, _ = mimetypes.guess_type(file_path.name)
        if not content_type or not content_type.startswith("image/"):
            raise UploadError(f"{file_path.name} is not an image file")
        try:
            size = file_path.stat().st_size
        except OSError as exc:
            raise UploadError(f"Cannot read {file_path}: {exc}") from exc
        if size > MAX_UPLOAD_BYTES:
            raise UploadError("Image must not exceed 10MB")
        return content_type

    def _sign(self, params: Dict[str, str]) -> str:
        to_sign = "&".join(f"{k}={params[k]}" for k in sorted(params))
        return hashlib.sha1((to_sign + self.api_secret).encode("utf-8")).hexdigest()

    @staticmethod
    def _parse_response(resp: requests.Response, action: str) -> Dict[str, Any]:
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if not resp.ok:
            message = ""
            if isinstance(payload, dict):
                message = (payload.get("error") or {}).get("message", "")
            message = message or resp.reason or f"HTTP {resp.status_code}"
            log.error("Cloudinary %s failed: %s", action, message)
            raise UploadError(f"Cloudinary {action} failed: {message}")
        if not isinstance(payload, dict):
            raise UploadError(f"Cloudinary {action} returned invalid JSON")
        return payload
