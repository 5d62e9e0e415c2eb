# ==============================================================================
# REPOSITORIO DE VENTAS
# ==============================================================================
# Las ventas se almacenan como lista inmutable: [venta1, venta2, ...]
# ==============================================================================

from typing import List, Optional

from tienda_pos.models import Sale
from tienda_pos.repositories.base import ListRepository


class SalesRepository(ListRepository[Sale]):
    """Repositorio de ventas (solo agregar)."""

    def load(self) -> List[Sale]:
        return self.get_all()

    def create_sale(self, sale: Sale) -> str:
        """
        Registra una venta.

        Returns:
            ID de la venta
        """
        self.append(sale)
        return sale.id

    def get_sale(self, sale_id: str) -> Optional[Sale]:
        return self.get_by_id(sale_id)

    def get_recent(self, limit: int) -> List[Sale]:
        """Últimas ventas, la más reciente primero."""
        if limit <= 0:
            return []
        return list(reversed(self.get_all()[-limit:]))
