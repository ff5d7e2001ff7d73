# app/core/exceptions.py
# Domain errors raised by the crud and service layers. Routes translate them
# into HTTP responses.


class ShopError(Exception):
    """Base class for storefront errors"""


class ProductNotFoundError(ShopError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class EmptyCartError(ShopError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("Cart is empty")


class InsufficientStockError(ShopError):
    def __init__(self, product_id: int, requested: float, product_name: str = None):
        self.product_id = product_id
        self.requested = requested
        self.product_name = product_name
        label = product_name or f"product {product_id}"
        super().__init__(f"Insufficient stock for {label}")
