# ==============================================================================
# REPOSITORIO DE INVENTARIO
# ==============================================================================
# Encapsula el acceso a la lista de productos.
# Los productos nunca se eliminan; solo cambia su cantidad en stock.
# ==============================================================================

from typing import List, Optional

from tienda_pos.models import Product
from tienda_pos.repositories.base import ListRepository


class InventoryRepository(ListRepository[Product]):
    """Repositorio de productos en orden de alta."""

    def load(self) -> List[Product]:
        """Carga todos los productos."""
        return self.get_all()

    def create_product(self, product: Product) -> Product:
        """
        Agrega un producto nuevo.

        Args:
            product: Producto con ID ya asignado
        """
        return self.append(product)

    def get_product(self, pid: str) -> Optional[Product]:
        return self.get_by_id(pid)

    def adjust_quantity(self, pid: str, delta: int) -> Optional[Product]:
        """
        Suma (o resta) unidades al stock. Sin piso en cero.

        Returns:
            Producto actualizado o None si no existe
        """
        with self._lock:
            product = self._find_live(pid)
            if product is None:
                return None
            return self.update(pid, quantity=product.quantity + delta)

    def find_by_term(self, term: str) -> Optional[Product]:
        """Primer producto cuyo código o nombre coincide con el término."""
        return self.find_first(lambda p: p.matches(term))
