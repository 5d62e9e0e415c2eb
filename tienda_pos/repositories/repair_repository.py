# ==============================================================================
# REPOSITORIO DE REPARACIONES
# ==============================================================================
# Las reparaciones solo cambian de estado (y fecha de completado).
# ==============================================================================

from typing import List

from tienda_pos.models import Repair, RepairStatus
from tienda_pos.repositories.base import ListRepository


class RepairRepository(ListRepository[Repair]):
    """Repositorio de trabajos de reparación."""

    def load(self) -> List[Repair]:
        return self.get_all()

    def create_repair(self, repair: Repair) -> Repair:
        return self.append(repair)

    def find_by_status(self, status: RepairStatus) -> List[Repair]:
        return [r for r in self.get_all() if r.status == status]
