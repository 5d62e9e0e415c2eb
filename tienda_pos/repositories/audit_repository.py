# ==============================================================================
# REPOSITORIO DE AUDITORÍA
# ==============================================================================
# Registro en memoria de todo lo que pasa en la tienda.
# Cada entrada: {type, message, timestamp, related_id, details}
# ==============================================================================

from datetime import datetime
from typing import Any, Dict, List, Optional

from tienda_pos.repositories.base import ListRepository


class AuditRepository(ListRepository[Dict[str, Any]]):
    """
    Repositorio para el log de auditoría.

    Formato de cada entrada:
        {
            "type": "VENTA",
            "message": "Venta 11700000000000 registrada - Total: $30.00",
            "timestamp": "2024-01-01 10:00:00",
            "related_id": "11700000000000",
            "details": {...}
        }
    """

    # Límite de registros para no crecer sin control
    MAX_LOGS = 10000

    id_field = None

    def load(self) -> List[Dict[str, Any]]:
        """
        Carga todos los logs.

        Returns:
            Lista de logs (más recientes primero)
        """
        return list(reversed(self.get_all()))

    def log(
        self,
        log_type: str,
        message: str,
        related_id: str = '',
        details: Dict[str, Any] = None,
        timestamp: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Registra un nuevo evento de auditoría.

        Args:
            log_type: Tipo de evento (VENTA, STOCK, PRODUCTO, ...)
            message: Mensaje descriptivo humanizado
            related_id: ID relacionado (venta, producto, reparación)
            details: Detalles adicionales
            timestamp: Momento del evento (por defecto ahora)
        """
        log_entry = {
            'type': log_type,
            'message': message,
            'timestamp': (timestamp or datetime.now()).strftime("%Y-%m-%d %H:%M:%S"),
            'related_id': related_id,
            'details': details or {}
        }
        with self._lock:
            self.append(log_entry)
            overflow = len(self._records) - self.MAX_LOGS
            if overflow > 0:
                del self._records[:overflow]
        return log_entry

    def get_logs_by_type(self, log_type: str) -> List[Dict[str, Any]]:
        """Filtra logs por tipo."""
        return [log for log in self.load() if log.get('type') == log_type]

    def search_logs(self, query: str = '', log_type: str = None) -> List[Dict[str, Any]]:
        """
        Búsqueda de logs por texto y tipo.

        Args:
            query: Texto de búsqueda (tipo, mensaje o ID relacionado)
            log_type: Filtrar por tipo

        Returns:
            Lista de logs que coinciden (más recientes primero)
        """
        logs = self.get_logs_by_type(log_type) if log_type else self.load()

        if query:
            query_lower = query.lower()
            logs = [
                log for log in logs
                if any(
                    query_lower in str(s).lower()
                    for s in (log.get('type'), log.get('message'), log.get('related_id'))
                    if s
                )
            ]

        return logs

    def get_recent_logs(self, limit: int = 100) -> List[Dict[str, Any]]:
        return self.load()[:limit]
