"""
Adapter: process-local product store.

Implements the ProductService port with a dict guarded by an asyncio lock.
Nothing is persisted; the store lives as long as the process. It backs the
default wiring so the API can run without a database.
"""

import asyncio
import copy
import logging
from dataclasses import fields, replace
from typing import Optional

from app.domain.products.entities import Product, RequestContext
from app.domain.products.errors import ConflictError, ResourceNotFoundError
from app.domain.products.ports import ProductService

logger = logging.getLogger(__name__)


def merge_patch(stored: Product, patch: Product) -> Product:
    """Return ``stored`` with every supplied field of ``patch`` applied.

    Empty strings and ``None`` sequences count as not supplied.
    The product id of ``stored`` is always kept.
    """
    changes = {}
    for field in fields(Product):
        if field.name == "product_id":
            continue
        value = getattr(patch, field.name)
        if value is None or value == "":
            continue
        changes[field.name] = copy.copy(value)
    return replace(stored, **changes)


class InMemoryProductService(ProductService):
    """Concrete adapter keeping products in a dict keyed by product id.

    Safe for concurrent use from a single event loop.
    """

    def __init__(self, products: Optional[list[Product]] = None) -> None:
        self._products: dict[str, Product] = {}
        self._lock = asyncio.Lock()
        for product in products or []:
            self._products[product.product_id] = copy.deepcopy(product)

    async def get(self, ctx: RequestContext, product_id: str) -> Product:
        """Return a copy of the stored product.

        Raises:
            ResourceNotFoundError: If the id is unknown.
        """
        async with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise ResourceNotFoundError(product_id)
            return copy.deepcopy(product)

    async def create(self, ctx: RequestContext, product: Product) -> None:
        """Store a new product.

        Raises:
            ConflictError: If the id is already taken.
        """
        async with self._lock:
            if product.product_id in self._products:
                raise ConflictError(product.product_id)
            self._products[product.product_id] = copy.deepcopy(product)
        logger.debug(
            "Stored product id=%s request_id=%s", product.product_id, ctx.request_id
        )

    async def update(
        self, ctx: RequestContext, product_id: str, product: Product
    ) -> None:
        """Merge a patch into an existing product.

        Raises:
            ResourceNotFoundError: If the id is unknown.
        """
        async with self._lock:
            stored = self._products.get(product_id)
            if stored is None:
                raise ResourceNotFoundError(product_id)
            self._products[product_id] = merge_patch(stored, product)
        logger.debug("Patched product id=%s request_id=%s", product_id, ctx.request_id)

    async def delete(self, ctx: RequestContext, product_id: str) -> None:
        """Remove a product.

        Raises:
            ResourceNotFoundError: If the id is unknown.
        """
        async with self._lock:
            if self._products.pop(product_id, None) is None:
                raise ResourceNotFoundError(product_id)
        logger.debug("Deleted product id=%s request_id=%s", product_id, ctx.request_id)
