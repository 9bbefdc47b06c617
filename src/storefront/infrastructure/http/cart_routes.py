"""HTTP routes for the caller's cart."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.infrastructure.http.auth import current_caller
from storefront.infrastructure.http.context import repositories

cart = Blueprint("cart", __name__, url_prefix="/api/cart")


def _cart_response(dto: CartDTO, message: str | None = None):
    body = {
        "success": True,
        "data": [line.to_dict() for line in dto.items],
        "count": dto.count,
    }
    if message:
        body["message"] = message
    return jsonify(body)


@cart.get("")
def show_cart():
    repos = repositories()
    caller = current_caller(repos.users)
    return _cart_response(ShowCartHandler(repos.carts, repos.products).handle(caller))


@cart.post("")
def add_to_cart():
    repos = repositories()
    caller = current_caller(repos.users)
    body = request.get_json(silent=True) or {}
    dto = AddToCartHandler(repos.carts, repos.products).handle(
        caller, body.get("productId"), body.get("quantity", 1)
    )
    return _cart_response(dto, "Added to cart")


@cart.delete("")
def clear_cart():
    repos = repositories()
    caller = current_caller(repos.users)
    return _cart_response(ClearCartHandler(repos.carts).handle(caller), "Cart cleared")


@cart.put("/<product_id>")
def update_cart_item(product_id: str):
    repos = repositories()
    caller = current_caller(repos.users)
    body = request.get_json(silent=True) or {}
    dto = UpdateCartItemHandler(repos.carts, repos.products).handle(
        caller, product_id, body.get("quantity")
    )
    return _cart_response(dto, "Cart updated")


@cart.delete("/<product_id>")
def remove_from_cart(product_id: str):
    repos = repositories()
    caller = current_caller(repos.users)
    dto = RemoveFromCartHandler(repos.carts, repos.products).handle(caller, product_id)
    return _cart_response(dto, "Item removed from cart")
