# ==============================================================================
# SERVICIO DE CAJA - Fondos y pérdidas manuales
# ==============================================================================
# Montos no positivos o no finitos se ignoran en silencio: el libro nunca guarda
# movimientos inválidos.
# ==============================================================================

from datetime import datetime
from typing import Any, Callable, Dict, List

from tienda_pos.models import Loss, ManualFund
from tienda_pos.repositories.ledger_repository import FundsRepository, LossRepository
from tienda_pos.services.audit_service import AuditService
from tienda_pos.services.validators import positive_amount


class LedgerService:
    """Inyecciones de capital y pérdidas manuales."""

    def __init__(
        self,
        funds_repo: FundsRepository,
        loss_repo: LossRepository,
        audit_service: AuditService = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.funds_repo = funds_repo
        self.loss_repo = loss_repo
        self.audit_service = audit_service
        self._clock = clock

    def add_funds(self, amount: Any) -> Dict[str, Any]:
        """Agrega fondos. amount <= 0 → no hace nada (ok=False)."""
        value = positive_amount(amount)
        if value is None:
            return {'ok': False, 'events': []}

        fund = self.funds_repo.append(ManualFund(amount=value, date=self._clock()))
        if self.audit_service:
            self.audit_service.log_funds_added(value)
        return {'ok': True, 'fund': fund, 'events': []}

    def add_loss(self, amount: Any) -> Dict[str, Any]:
        """Registra una pérdida. amount <= 0 → no hace nada (ok=False)."""
        value = positive_amount(amount)
        if value is None:
            return {'ok': False, 'events': []}

        loss = self.loss_repo.append(Loss(amount=value, date=self._clock()))
        if self.audit_service:
            self.audit_service.log_loss_recorded(value)
        return {'ok': True, 'loss': loss, 'events': []}

    def get_all_funds(self) -> List[ManualFund]:
        return self.funds_repo.load()

    def get_all_losses(self) -> List[Loss]:
        return self.loss_repo.load()
