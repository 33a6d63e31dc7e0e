"""Product repository interface.

Extends ``IRepository[Product]`` with the row-locking look-up used by the
read-modify-write use cases (full update and availability toggle).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    ``list`` returns products ordered by ``id`` descending.
    """

    @abstractmethod
    def get_for_update(self, id: int) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if the
        product does not exist.
        """
