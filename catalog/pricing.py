"""Price helpers shared by the query engine and the cart."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple

from catalog.errors import ValidationError
from catalog.models import CartTotals, Product


def effective_price(product: Product) -> Decimal:
    """Return the price actually charged: the discounted price when set, else the list price."""
    return product.discounted_price or product.price


def discount_percentage(product: Product) -> Optional[int]:
    """Return the whole-number discount percentage, or None when the product is not on sale.

    A zero or missing discounted price means no sale, as in effective_price.

    Halves round up, so 12.5% becomes 13%.
    """
    if not product.discounted_price:
        return None
    percent = (product.price - product.discounted_price) / product.price * 100
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def cart_totals(lines: Iterable[Tuple[Product, int]]) -> CartTotals:
    """Compute subtotal, savings and unit count for cart lines.

    Args:
        lines: (product, quantity) pairs

    Returns:
        CartTotals

    Raises:
        ValidationError: if a quantity is not a positive integer
    """
    subtotal = Decimal("0")
    savings = Decimal("0")
    item_count = 0

    for product, quantity in lines:
        if quantity <= 0:
            raise ValidationError(f"Quantity must be positive for product {product.id}: {quantity}")
        subtotal += effective_price(product) * quantity
        if product.discounted_price:
            savings += (product.price - product.discounted_price) * quantity
        item_count += quantity

    return CartTotals(subtotal=subtotal, savings=savings, item_count=item_count)
