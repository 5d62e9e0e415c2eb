# ==============================================================================
# CAPA DE REPOSITORIOS - Almacén de entidades
# ==============================================================================
# Esta capa encapsula todo el acceso a los datos (en memoria).
# Operaciones: crear, agregar, leer todo y leer por ID. No hay borrado.
#
# ESTRUCTURA:
# ├── base.py                  → ListRepository + IdGenerator
# ├── inventory_repository.py  → Productos
# ├── sales_repository.py      → Ventas
# ├── repair_repository.py     → Reparaciones
# ├── print_job_repository.py  → Trabajos de impresión
# ├── ledger_repository.py     → Fondos y pérdidas manuales
# └── audit_repository.py      → Log de auditoría
# ==============================================================================

from tienda_pos.repositories.base import IdGenerator, ListRepository
from tienda_pos.repositories.inventory_repository import InventoryRepository
from tienda_pos.repositories.sales_repository import SalesRepository
from tienda_pos.repositories.repair_repository import RepairRepository
from tienda_pos.repositories.print_job_repository import PrintJobRepository
from tienda_pos.repositories.ledger_repository import FundsRepository, LossRepository
from tienda_pos.repositories.audit_repository import AuditRepository

__all__ = [
    # Clases base
    'IdGenerator',
    'ListRepository',

    # Implementaciones
    'InventoryRepository',
    'SalesRepository',
    'RepairRepository',
    'PrintJobRepository',
    'FundsRepository',
    'LossRepository',
    'AuditRepository',
]
