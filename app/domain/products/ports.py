"""
Port interfaces (ABCs) for the products bounded context.

The product service owns persistence, caching, and patch merging.
Infrastructure adapters implement this interface; the HTTP layer
only ever depends on the abstraction.
"""

from abc import ABC, abstractmethod

from app.domain.products.entities import Product, RequestContext


class ProductService(ABC):
    """Port for product CRUD operations.

    Implementations must be safe for concurrent invocation and report
    failures by raising ProductDomainError subclasses.
    """

    @abstractmethod
    async def get(self, ctx: RequestContext, product_id: str) -> Product:
        """Return the product with the given id.

        Raises:
            ResourceNotFoundError: If no such product exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, ctx: RequestContext, product: Product) -> None:
        """Persist a new product under its client-assigned id.

        Raises:
            ConflictError: If the id is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, ctx: RequestContext, product_id: str, product: Product
    ) -> None:
        """Apply a partial update to an existing product.

        Empty strings and ``None`` sequences in ``product`` leave the
        stored values untouched.

        Raises:
            ResourceNotFoundError: If no such product exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, ctx: RequestContext, product_id: str) -> None:
        """Remove a product."""
        raise NotImplementedError
