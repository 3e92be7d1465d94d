"""Domain port: image hosting.

The application layer uploads product pictures through this interface;
the concrete CDN client lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadImageOptions:
    folder: str | None = None
    public_id: str | None = None
    max_width: int | None = None
    max_height: int | None = None
    quality: int | str = "auto"  # 1-100 or "auto"


@dataclass(frozen=True)
class UploadImageResult:
    url: str
    secure_url: str
    public_id: str
    width: int
    height: int
    format: str
    bytes: int


class ImageService(ABC):

    @abstractmethod
    def upload(
        self, file_path: Path, options: UploadImageOptions | None = None
    ) -> UploadImageResult:
        """Upload an image file. Raises UploadError on failure."""

    @abstractmethod
    def delete(self, public_id: str) -> None:
        """Delete a stored image. Raises UploadError on failure."""

    @abstractmethod
    def get_url(self, public_id: str, options: UploadImageOptions | None = None) -> str:
        """Build the delivery URL for an image. No network access."""

    def get_responsive_urls(self, public_id: str) -> dict[str, str]:
        """URLs for the standard display sizes of a product picture."""
        return {
            "thumbnail": self.get_url(public_id, UploadImageOptions(max_width=150, max_height=150)),
            "small": self.get_url(public_id, UploadImageOptions(max_width=400, max_height=400)),
            "medium": self.get_url(public_id, UploadImageOptions(max_width=800, max_height=800)),
            "large": self.get_url(public_id, UploadImageOptions(max_width=1200, max_height=1200)),
            "original": self.get_url(public_id),
        }
