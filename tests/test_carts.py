"""Test the Cordial cart objects."""

from cordial.carts import Cart, CartItem


def test_cart_item_to_dict_drops_unset_fields():
    """Test unset item fields are not sent."""
    item = CartItem(product_id="p1", sku="sku-1", name="Socks", item_price=9.5)

    assert item.to_dict() == {
        "productID": "p1",
        "sku": "sku-1",
        "name": "Socks",
        "qty": 1,
        "itemPrice": 9.5,
    }


def test_cart_to_dict():
    """Test the cart serialization keeps an empty attr mapping."""
    cart = Cart(
        cart_items=[CartItem(product_id="p1", sku="sku-1", name="Socks", qty=2, attr={})],
        customer_id="c-42",
    )

    assert cart.to_dict() == {
        "customerID": "c-42",
        "cartitems": [{"productID": "p1", "sku": "sku-1", "name": "Socks", "qty": 2, "attr": {}}],
    }


def test_cart_items_from_mappings():
    """Test cart items can be given as mappings."""
    cart = Cart(cart_items=[{"product_id": "p1", "sku": "sku-1", "name": "Socks"}], url="https://shop.example.com/cart")

    assert cart.cart_items == [CartItem(product_id="p1", sku="sku-1", name="Socks")]
    assert cart.to_dict()["url"] == "https://shop.example.com/cart"


def test_empty_cart_to_dict():
    """Test an empty cart still sends its items list."""
    assert Cart().to_dict() == {"cartitems": []}
