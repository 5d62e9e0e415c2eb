# ==============================================================================
# SERVICIO DE REPARACIONES
# ==============================================================================
# Registro de equipos recibidos y su ciclo de estados.
# La reparación cuenta como ingreso cuando pasa a "Completed".
# ==============================================================================

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from tienda_pos.models import DomainEvent, EventType, Repair, RepairStatus
from tienda_pos.repositories.base import IdGenerator
from tienda_pos.repositories.repair_repository import RepairRepository
from tienda_pos.services.audit_service import AuditService
from tienda_pos.services.validators import parse_number


class RepairService:
    """
    Servicio para gestión de reparaciones.

    Reglas de estado:
    - Al pasar a Completed (desde otro estado) se fija completion_date
      y se emite REPAIR_COMPLETED con el costo.
    - Si ya estaba Completed no se emite nada.
    - Salir de Completed NO borra completion_date.
    """

    def __init__(
        self,
        repair_repo: RepairRepository,
        id_generator: IdGenerator,
        audit_service: AuditService = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.repair_repo = repair_repo
        self.id_generator = id_generator
        self.audit_service = audit_service
        self._clock = clock

    def get_all_repairs(self) -> List[Repair]:
        return self.repair_repo.load()

    def get_repair(self, repair_id: str) -> Optional[Repair]:
        return self.repair_repo.get_by_id(repair_id)

    def repairs_by_status(self, status: Any) -> List[Repair]:
        return self.repair_repo.find_by_status(RepairStatus(status))

    def add_repair(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Registra una reparación.

        Args:
            data: customer_name, customer_phone, device, issue_description,
                  cost, status (por defecto Pending)

        Returns:
            {'ok', 'repair', 'events'} o {'ok': False, 'error', 'events'}
        """
        try:
            cost = parse_number(data.get('cost'), 'cost')
            status = RepairStatus(data.get('status') or RepairStatus.PENDING)
        except (TypeError, ValueError) as e:
            return {'ok': False, 'error': f"Datos de reparación inválidos: {e}", 'events': []}

        if cost < 0:
            return {'ok': False, 'error': 'El costo no puede ser negativo', 'events': []}

        now = self._clock()
        repair = Repair(
            id=self.id_generator.next_id(),
            customer_name=data.get('customer_name') or '',
            customer_phone=data.get('customer_phone') or '',
            device=data.get('device') or '',
            issue_description=data.get('issue_description') or '',
            cost=cost,
            status=status,
            creation_date=now,
        )

        events = []
        # Alta directa como Completed = transición a Completed
        if status == RepairStatus.COMPLETED:
            repair.completion_date = now
            events.append(self._completed_event(repair, now))

        self.repair_repo.create_repair(repair)

        if self.audit_service:
            self.audit_service.log_repair_created(
                repair.id, repair.device, repair.customer_name, status.value
            )

        return {'ok': True, 'repair': repair.copy(), 'events': events}

    def update_repair_status(self, repair_id: str, new_status: Any) -> Dict[str, Any]:
        """
        Cambia el estado de una reparación.

        ID inexistente o estado desconocido: no hace nada (ok=False).

        Returns:
            {'ok', 'repair', 'events'}
        """
        try:
            new_status = RepairStatus(new_status)
        except ValueError:
            return {'ok': False, 'error': f"Estado inválido: {new_status}", 'events': []}

        repair = self.repair_repo.get_by_id(repair_id)
        if repair is None:
            return {'ok': False, 'error': 'Reparación no encontrada', 'events': []}

        old_status = repair.status
        changes = {'status': new_status}
        events = []

        if old_status != RepairStatus.COMPLETED and new_status == RepairStatus.COMPLETED:
            now = self._clock()
            changes['completion_date'] = now
            repair.completion_date = now
            events.append(self._completed_event(repair, now))

        updated = self.repair_repo.update(repair_id, **changes)

        if self.audit_service and old_status != new_status:
            self.audit_service.log_repair_status_change(
                updated.id, old_status.value, new_status.value
            )

        return {'ok': True, 'repair': updated, 'events': events}

    def _completed_event(self, repair: Repair, now: datetime) -> DomainEvent:
        return DomainEvent(
            EventType.REPAIR_COMPLETED,
            f"Reparación de {repair.device} completada. Ingreso: ${repair.cost:.2f}",
            {'repair_id': repair.id, 'cost': repair.cost},
            now,
        )
