# ==============================================================================
# REPOSITORIO DE TRABAJOS DE IMPRESIÓN
# ==============================================================================

from typing import List

from tienda_pos.models import PrintJob
from tienda_pos.repositories.base import ListRepository


class PrintJobRepository(ListRepository[PrintJob]):
    """Repositorio de trabajos de impresión (solo agregar)."""

    def load(self) -> List[PrintJob]:
        return self.get_all()

    def create_print_job(self, job: PrintJob) -> PrintJob:
        return self.append(job)
