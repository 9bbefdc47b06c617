"""Application service: List Vendor Orders use case (query).

Finds every order holding at least one of the caller's products and
projects each down to the caller's own items and subtotal. Admins are
served the same way, against the products they own themselves.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, vendor_view_to_dto
from storefront.domain.exceptions import NotAuthorizedError
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.vendor_projection import project_all_for_vendor


class ListVendorOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, caller: User) -> list[OrderDTO]:
        if not (caller.is_vendor or caller.is_admin):
            raise NotAuthorizedError(
                f"Role '{caller.role.value}' is not authorized to access vendor orders"
            )

        product_ids = [p.id for p in self._product_repo.list_by_vendor(caller.id)]
        if not product_ids:
            return []

        orders = self._order_repo.list_containing_products(product_ids)
        return [vendor_view_to_dto(view) for view in project_all_for_vendor(orders, caller.id)]
