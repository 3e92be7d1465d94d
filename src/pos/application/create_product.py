"""Application service: Create Product use case.

Optionally uploads the product picture first, then lets the Product
aggregate validate everything and stores it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pos.application.dto import CreateProductRequest, ProductDTO
from pos.application.mappers import to_product_dto
from pos.domain.exceptions import UploadError, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.image_service import ImageService, UploadImageOptions

log = logging.getLogger(__name__)

PRODUCT_IMAGE_FOLDER = "products"
PRODUCT_IMAGE_MAX_SIZE = 1200


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        image_service: ImageService | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._image_service = image_service

    def handle(self, request: CreateProductRequest) -> ProductDTO:
        """Add a new product to the catalog."""
        if request.id and self._product_repo.exists(request.id.strip()):
            raise ValidationError(f"A product with ID '{request.id}' already exists")

        product = Product.create(
            id=request.id,
            name=request.name,
            price=Money.create(request.price, request.currency),
            stock=request.stock,
            description=request.description,
            category=request.category,
        )

        # Upload only once the product data is known to be valid
        if request.image_path:
            product.update_image_url(
                self._upload_image(product.id, Path(request.image_path))
            )

        self._product_repo.save(product)

        log.info("Product %s '%s' created", product.id, product.name)
        return to_product_dto(product)

    def _upload_image(self, product_id: str, path: Path) -> str:
        if self._image_service is None:
            raise ValidationError("Image upload is not configured")
        try:
            result = self._image_service.upload(
                path,
                UploadImageOptions(
                    folder=PRODUCT_IMAGE_FOLDER,
                    public_id=f"product-{product_id}",
                    max_width=PRODUCT_IMAGE_MAX_SIZE,
                    max_height=PRODUCT_IMAGE_MAX_SIZE,
                    quality="auto",
                ),
            )
        except UploadError as exc:
            raise UploadError(f"Image upload failed: {exc}") from exc
        return result.secure_url
