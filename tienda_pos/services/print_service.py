# ==============================================================================
# SERVICIO DE IMPRESIÓN
# ==============================================================================
# Trabajos de impresión / copias: cada uno registra precio cobrado y costo.
# ==============================================================================

from datetime import datetime
from typing import Any, Callable, Dict, List

from tienda_pos.models import DomainEvent, EventType, PrintJob
from tienda_pos.repositories.base import IdGenerator
from tienda_pos.repositories.print_job_repository import PrintJobRepository
from tienda_pos.services.audit_service import AuditService
from tienda_pos.services.validators import parse_number


class PrintService:
    """Servicio para registrar trabajos de impresión (profit = price - cost)."""

    def __init__(
        self,
        print_job_repo: PrintJobRepository,
        id_generator: IdGenerator,
        audit_service: AuditService = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.print_job_repo = print_job_repo
        self.id_generator = id_generator
        self.audit_service = audit_service
        self._clock = clock

    def get_all_print_jobs(self) -> List[PrintJob]:
        return self.print_job_repo.load()

    def add_print_job(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Registra un trabajo de impresión.

        Args:
            data: price, cost, description (opcional)

        Returns:
            {'ok', 'print_job', 'events'}; events lleva PRINT_JOB_ADDED con la ganancia
        """
        try:
            price = parse_number(data.get('price'), 'price')
            cost = parse_number(data.get('cost'), 'cost')
        except (TypeError, ValueError) as e:
            return {'ok': False, 'error': f"Datos de impresión inválidos: {e}", 'events': []}

        now = self._clock()
        job = PrintJob(
            id=self.id_generator.next_id(),
            price=price,
            cost=cost,
            profit=price - cost,
            date=now,
            description=data.get('description') or '',
        )
        self.print_job_repo.create_print_job(job)

        if self.audit_service:
            self.audit_service.log_print_job(job.id, job.price, job.profit)

        event = DomainEvent(
            EventType.PRINT_JOB_ADDED,
            f"Impresión registrada. Ganancia: ${job.profit:.2f}",
            {'print_job_id': job.id, 'profit': job.profit},
            now,
        )
        return {'ok': True, 'print_job': job, 'events': [event]}
