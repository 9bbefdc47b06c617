"""HTTP routes for the Order aggregate."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_vendor_orders import ListVendorOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.infrastructure.http.auth import current_caller
from storefront.infrastructure.http.context import repositories

orders = Blueprint("orders", __name__, url_prefix="/api/orders")


def _listing(dtos):
    return jsonify(
        {"success": True, "count": len(dtos), "data": [dto.to_dict() for dto in dtos]}
    )


@orders.get("/vendor/mine")
def vendor_orders():
    repos = repositories()
    caller = current_caller(repos.users)
    handler = ListVendorOrdersHandler(order_repo=repos.orders, product_repo=repos.products)
    return _listing(handler.handle(caller))


@orders.post("")
def create_order():
    repos = repositories()
    caller = current_caller(repos.users)
    body = request.get_json(silent=True) or {}
    address = body.get("shippingAddress")

    handler = CreateOrderHandler(
        order_repo=repos.orders,
        product_repo=repos.products,
        cart_repo=repos.carts,
        ledger=repos.ledger,
    )
    dto = handler.handle(
        caller,
        shipping_address=address if isinstance(address, dict) else None,
        payment_method=body.get("paymentMethod"),
    )
    return (
        jsonify({"success": True, "message": "Order placed successfully", "data": dto.to_dict()}),
        201,
    )


@orders.get("")
def list_orders():
    repos = repositories()
    caller = current_caller(repos.users)
    return _listing(ListOrdersHandler(order_repo=repos.orders).handle(caller))


@orders.get("/<int:order_id>")
def show_order(order_id: int):
    repos = repositories()
    caller = current_caller(repos.users)
    dto = ShowOrderHandler(order_repo=repos.orders).handle(order_id, caller)
    return jsonify({"success": True, "data": dto.to_dict()})


@orders.patch("/<int:order_id>/cancel")
def cancel_order(order_id: int):
    repos = repositories()
    caller = current_caller(repos.users)
    handler = CancelOrderHandler(order_repo=repos.orders, ledger=repos.ledger)
    dto = handler.handle(order_id, caller)
    return jsonify({"success": True, "message": "Order cancelled", "data": dto.to_dict()})


@orders.patch("/<int:order_id>/status")
def update_status(order_id: int):
    repos = repositories()
    caller = current_caller(repos.users)
    body = request.get_json(silent=True) or {}
    dto = UpdateOrderStatusHandler(order_repo=repos.orders).handle(
        order_id, caller, body.get("status")
    )
    return jsonify({"success": True, "data": dto.to_dict()})
