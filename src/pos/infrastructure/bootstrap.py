"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from pos.config.settings import get_settings
from pos.domain.service.image_service import ImageService
from pos.infrastructure.external.cloudinary_image_service import (
    CloudinaryImageService,
)
from pos.infrastructure.persistence.json_dashboard_repository import (
    JsonDashboardRepository,
)
from pos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pos.infrastructure.persistence.json_sale_repository import JsonSaleRepository
from pos.infrastructure.persistence.json_stock_movement_repository import (
    JsonStockMovementRepository,
)


def _data_dir() -> Path:
    return get_settings().data_dir


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(_data_dir() / "products.json")


def sale_repository() -> JsonSaleRepository:
    return JsonSaleRepository(_data_dir() / "sales.json")


def stock_movement_repository() -> JsonStockMovementRepository:
    return JsonStockMovementRepository(_data_dir() / "stock_movements.json")


def dashboard_repository() -> JsonDashboardRepository:
    return JsonDashboardRepository(product_repository(), sale_repository())


def image_service() -> ImageService | None:
    """Cloudinary client, or None when no cloud name / upload preset is set."""
    settings = get_settings()
    if not settings.cloudinary_enabled:
        return None
    return CloudinaryImageService(
        cloud_name=settings.cloudinary_cloud_name,
        upload_preset=settings.cloudinary_upload_preset,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
        timeout=settings.http_timeout_seconds,
    )
