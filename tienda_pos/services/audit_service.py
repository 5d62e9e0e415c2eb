# ==============================================================================
# SERVICIO DE AUDITORÍA
# ==============================================================================
# Centraliza el registro de auditoría.
# Formatea mensajes humanizados y categoriza eventos.
# ==============================================================================

from datetime import datetime
from typing import Any, Callable, Dict, List

from tienda_pos.repositories.audit_repository import AuditRepository


class AuditService:
    """
    Servicio para registro y consulta de auditoría.

    La regla de oro: si entra o sale dinero → siempre queda un log.
    """

    # Tipos de eventos de auditoría
    TYPE_VENTA = 'VENTA'
    TYPE_STOCK = 'STOCK'
    TYPE_PRODUCTO = 'PRODUCTO'
    TYPE_REPARACION = 'REPARACION'
    TYPE_IMPRESION = 'IMPRESION'
    TYPE_CAJA = 'CAJA'

    def __init__(self, audit_repo: AuditRepository, clock: Callable[[], datetime] = datetime.now):
        """
        Args:
            audit_repo: Repositorio de auditoría
            clock: Función que retorna la hora local actual
        """
        self.audit_repo = audit_repo
        self._clock = clock

    # =========================================================================
    # REGISTRO DE EVENTOS
    # =========================================================================

    def log(
        self,
        log_type: str,
        message: str,
        related_id: str = '',
        details: Dict[str, Any] = None
    ) -> None:
        """Registra un evento de auditoría genérico."""
        self.audit_repo.log(log_type, message, related_id, details, timestamp=self._clock())

    def log_product_created(self, pid: str, name: str, quantity: int) -> None:
        message = f"Producto '{name}' creado con {quantity} unidades"
        self.log(self.TYPE_PRODUCTO, message, pid, {'quantity': quantity})

    def log_sale_created(self, sale_id: str, total: float, profit: float, items_count: int) -> None:
        message = f"Venta {sale_id} registrada - Total: ${total:.2f} - {items_count} unidades"
        self.log(
            self.TYPE_VENTA,
            message,
            sale_id,
            {'total': total, 'profit': profit, 'items_count': items_count}
        )

    def log_negative_stock(self, pid: str, name: str, quantity: int) -> None:
        """Una venta dejó el stock en negativo (carrito por encima del stock)."""
        message = f"Stock negativo en '{name}': {quantity}"
        self.log(self.TYPE_STOCK, message, pid, {'quantity': quantity})

    def log_repair_created(self, repair_id: str, device: str, customer: str, status: str) -> None:
        message = f"Reparación {repair_id} ({device}) de {customer} - Estado: {status}"
        self.log(self.TYPE_REPARACION, message, repair_id, {'status': status})

    def log_repair_status_change(
        self,
        repair_id: str,
        old_status: str,
        new_status: str
    ) -> None:
        message = f"Reparación {repair_id}: {old_status} → {new_status}"
        self.log(
            self.TYPE_REPARACION,
            message,
            repair_id,
            {'from': old_status, 'to': new_status}
        )

    def log_print_job(self, job_id: str, price: float, profit: float) -> None:
        message = f"Impresión {job_id} - Precio: ${price:.2f} - Ganancia: ${profit:.2f}"
        self.log(self.TYPE_IMPRESION, message, job_id, {'price': price, 'profit': profit})

    def log_funds_added(self, amount: float) -> None:
        self.log(self.TYPE_CAJA, f"Fondos agregados: ${amount:.2f}", details={'amount': amount})

    def log_loss_recorded(self, amount: float) -> None:
        self.log(self.TYPE_CAJA, f"Pérdida registrada: ${amount:.2f}", details={'amount': amount})

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def search(self, query: str = '', log_type: str = None) -> List[Dict[str, Any]]:
        return self.audit_repo.search_logs(query, log_type)

    def get_recent(self, limit: int = 100) -> List[Dict[str, Any]]:
        return self.audit_repo.get_recent_logs(limit)
