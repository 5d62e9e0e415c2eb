# ==============================================================================
# CAPA DE SERVICIOS - Lógica de negocio
# ==============================================================================
# Los servicios reciben repositorios por constructor y devuelven dicts
# {'ok': ..., 'events': [...]}. Las estadísticas financieras son funciones
# puras sobre un snapshot (stats_service).
# ==============================================================================

from tienda_pos.services.audit_service import AuditService
from tienda_pos.services.inventory_service import InventoryService, generate_barcode
from tienda_pos.services.sales_service import SalesService
from tienda_pos.services.cart_service import CartService
from tienda_pos.services.repair_service import RepairService
from tienda_pos.services.print_service import PrintService
from tienda_pos.services.ledger_service import LedgerService
from tienda_pos.services.stats_service import StatsService
from tienda_pos.services.receipt_service import ReceiptService
from tienda_pos.services.image_service import ProductImageService

__all__ = [
    'AuditService',
    'InventoryService',
    'generate_barcode',
    'SalesService',
    'CartService',
    'RepairService',
    'PrintService',
    'LedgerService',
    'StatsService',
    'ReceiptService',
    'ProductImageService',
]
