"""Cart objects posted to a Cordial contact."""

from dataclasses import dataclass, field


def _drop_none(values: dict) -> dict:
    return {key: value for key, value in values.items() if value is not None}


@dataclass
class CartItem:
    """A product line of a contact cart."""

    product_id: str
    sku: str
    name: str
    qty: int = 1
    item_price: float | None = None
    category: str | None = None
    url: str | None = None
    description: str | None = None
    images: list[str] | None = None
    attr: dict | None = None

    def to_dict(self) -> dict:
        """Return the item as sent to the API."""
        return _drop_none(
            {
                "productID": self.product_id,
                "sku": self.sku,
                "name": self.name,
                "qty": self.qty,
                "itemPrice": self.item_price,
                "category": self.category,
                "url": self.url,
                "description": self.description,
                "images": self.images,
                "attr": self.attr,
            }
        )


@dataclass
class Cart:
    """Contact cart."""

    cart_items: list[CartItem] = field(default_factory=list)
    link_id: str | None = None
    customer_id: str | None = None
    url: str | None = None
    total_amount: float | None = None

    def __post_init__(self):
        """Accept items given as plain mappings."""
        self.cart_items = [item if isinstance(item, CartItem) else CartItem(**item) for item in self.cart_items]

    def to_dict(self) -> dict:
        """Return the cart as sent to the API."""
        return _drop_none(
            {
                "linkID": self.link_id,
                "customerID": self.customer_id,
                "url": self.url,
                "totalAmount": self.total_amount,
                "cartitems": [item.to_dict() for item in self.cart_items],
            }
        )
