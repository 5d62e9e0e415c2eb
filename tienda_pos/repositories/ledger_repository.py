# ==============================================================================
# REPOSITORIOS DE CAJA - Fondos y pérdidas manuales
# ==============================================================================
# Libros de solo-agregado. Los registros no tienen identidad propia más allá
# de su posición en la lista.
# ==============================================================================

from typing import List

from tienda_pos.models import ManualFund, Loss
from tienda_pos.repositories.base import ListRepository


class FundsRepository(ListRepository[ManualFund]):
    """Inyecciones manuales de capital."""

    id_field = None

    def load(self) -> List[ManualFund]:
        return self.get_all()


class LossRepository(ListRepository[Loss]):
    """Pérdidas manuales."""

    id_field = None

    def load(self) -> List[Loss]:
        return self.get_all()
