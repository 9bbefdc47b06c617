"""Data Transfer Objects — plain containers that cross layer boundaries.

Handlers return these instead of domain objects, so the HTTP and CLI layers
never reach into aggregates. Amounts are rendered as fixed two-decimal
strings to keep them exact on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.vendor_projection import VendorOrderView


def format_amount(money: Money) -> str:
    return f"{money.amount:.2f}"


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str
    vendor_id: str
    quantity: int
    price: str
    line_total: str

    def to_dict(self) -> dict:
        return {
            "product": self.product_id,
            "name": self.product_name,
            "vendor": self.vendor_id,
            "quantity": self.quantity,
            "price": self.price,
            "lineTotal": self.line_total,
        }


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as shown to a customer, vendor or admin."""

    id: int
    user_id: str
    status: str
    payment_method: str
    items: list[OrderItemDTO]
    total_amount: str
    shipping_address: dict[str, str]
    created_at: str
    updated_at: str
    vendor_subtotal: str | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "user": self.user_id,
            "items": [item.to_dict() for item in self.items],
            "totalAmount": self.total_amount,
            "shippingAddress": dict(self.shipping_address),
            "paymentMethod": self.payment_method,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.vendor_subtotal is not None:
            data["vendorSubtotal"] = self.vendor_subtotal
        return data


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    quantity: int
    # None when the product has since left the catalog
    product_name: str | None = None
    price: str | None = None
    stock: int | None = None

    def to_dict(self) -> dict:
        return {
            "product": self.product_id,
            "name": self.product_name,
            "price": self.price,
            "stock": self.stock,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]

    @property
    def count(self) -> int:
        return len(self.items)


# --- Mapping -----------------------------------------------------------------


def _item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        product_id=item.product_id,
        product_name=item.product_name,
        vendor_id=item.vendor_id,
        quantity=item.quantity.value,
        price=format_amount(item.price),
        line_total=format_amount(item.line_total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    address = order.shipping_address
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        payment_method=order.payment_method.value,
        items=[_item_to_dto(item) for item in order.items],
        total_amount=format_amount(order.total_amount),
        shipping_address={
            "fullName": address.full_name,
            "address": address.address,
            "city": address.city,
            "state": address.state,
            "zip": address.zip,
            "country": address.country,
        },
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def vendor_view_to_dto(view: VendorOrderView) -> OrderDTO:
    return replace(
        order_to_dto(view.order),
        items=[_item_to_dto(item) for item in view.items],
        vendor_subtotal=format_amount(view.vendor_subtotal),
    )


def cart_to_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    lines: list[CartLineDTO] = []
    for entry in cart.entries:
        product = product_repo.get_by_id(entry.product_id)
        if product is None:
            lines.append(CartLineDTO(product_id=entry.product_id, quantity=entry.quantity))
            continue
        lines.append(
            CartLineDTO(
                product_id=entry.product_id,
                quantity=entry.quantity,
                product_name=product.name,
                price=format_amount(product.price),
                stock=product.stock,
            )
        )
    return CartDTO(user_id=cart.user_id, items=lines)
