"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
prices change, stock goes up and down, products are added and removed
from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import InsufficientStockError, ValidationError
from pos.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_NAME_LENGTH = 3
LOW_STOCK_THRESHOLD = 10


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _strip(value: str | None) -> str | None:
    return value.strip() if value is not None else None


@dataclass
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products; it enforces
    all business rules.  The plain ``__init__`` lets the
    repository reconstitute persisted products without re-validating.
    """

    id: str
    name: str
    price: Money
    stock: int
    description: str | None = None
    category: str | None = None
    image_url: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        stock: int,
        description: str | None = None,
        category: str | None = None,
        image_url: str | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        if not id or not id.strip():
            raise ValidationError("Product ID is required")
        _validate_name(name)
        _validate_price(price)
        if not isinstance(stock, int) or isinstance(stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError("Stock cannot be negative")

        return Product(
            id=id.strip(),
            name=name.strip(),
            price=price,
            stock=stock,
            description=_strip(description),
            category=_strip(category),
            image_url=_strip(image_url),
        )

    # --- Catalog mutators -----------------------------------------------------

    def update_name(self, name: str) -> None:
        _validate_name(name)
        self.name = name.strip()
        self._touch()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing sales because sale items
        capture a price snapshot at sale time.
        """
        _validate_price(new_price)
        self.price = new_price
        self._touch()

    def update_description(self, description: str) -> None:
        self.description = description.strip()
        self._touch()

    def update_category(self, category: str) -> None:
        self.category = category.strip()
        self._touch()

    def update_image_url(self, image_url: str) -> None:
        self.image_url = image_url.strip()
        self._touch()

    # --- Stock mutators -------------------------------------------------------

    def increase_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to increase must be positive")
        self.stock += quantity
        self._touch()

    def decrease_stock(self, quantity: int) -> None:
        """Remove *quantity* units from stock.

        Raises InsufficientStockError (and leaves stock untouched) if
        the product does not hold that many units.
        """
        if quantity <= 0:
            raise ValidationError("Quantity to decrease must be positive")
        if quantity > self.stock:
            raise InsufficientStockError(
                product_name=self.name, available=self.stock, requested=quantity
            )
        self.stock -= quantity
        self._touch()

    # --- Computed properties --------------------------------------------------

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock == 0

    @property
    def has_low_stock(self) -> bool:
        return 0 < self.stock < LOW_STOCK_THRESHOLD

    def has_enough_stock(self, quantity: int) -> bool:
        return self.stock >= quantity

    def calculate_inventory_value(self) -> Money:
        return self.price.multiply(self.stock)

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = _now()


def _validate_name(name: str) -> None:
    if not name or len(name.strip()) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Product name must be at least {MIN_NAME_LENGTH} characters"
        )


def _validate_price(price: Money) -> None:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
