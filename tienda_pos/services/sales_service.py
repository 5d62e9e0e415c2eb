# ==============================================================================
# SERVICIO DE VENTAS
# ==============================================================================
# Centraliza toda la lógica de negocio relacionada con ventas.
# Convierte un carrito en una venta inmutable y descuenta el stock.
# ==============================================================================

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from tienda_pos import config
from tienda_pos.models import CartItem, DomainEvent, EventType, Sale, SaleItem
from tienda_pos.performance_logger import profile_function
from tienda_pos.repositories.base import IdGenerator
from tienda_pos.repositories.inventory_repository import InventoryRepository
from tienda_pos.repositories.sales_repository import SalesRepository
from tienda_pos.services.audit_service import AuditService


class SalesService:
    """
    Servicio para gestión de ventas.

    Responsabilidades:
    - Crear ventas desde el carrito (única función que crea ventas)
    - Descontar inventario
    - Calcular total, costo y ganancia de cada venta
    - Avisar de stock bajo
    """

    def __init__(
        self,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
        id_generator: IdGenerator,
        audit_service: AuditService = None,
        clock: Callable[[], datetime] = datetime.now,
        low_stock_threshold: int = config.LOW_STOCK_THRESHOLD
    ):
        """
        Inicializa el servicio de ventas.

        Args:
            sales_repo: Repositorio de ventas
            inventory_repo: Repositorio de inventario
            id_generator: Generador de IDs compartido
            audit_service: Servicio de auditoría (opcional)
            clock: Función que retorna la hora local actual
            low_stock_threshold: Cantidad por debajo de la cual se avisa
        """
        self.sales_repo = sales_repo
        self.inventory_repo = inventory_repo
        self.id_generator = id_generator
        self.audit_service = audit_service
        self._clock = clock
        self.low_stock_threshold = low_stock_threshold

    # =========================================================================
    # CREACIÓN DE VENTAS
    # =========================================================================

    @profile_function(name="Procesar venta")
    def process_sale(self, cart: Iterable[Union[CartItem, Dict[str, Any]]]) -> Dict[str, Any]:
        """
        Registra una venta desde los items del carrito.

        No valida el stock: el carrito ya lo limita al seleccionar. Si aun así
        se vende de más, la cantidad queda negativa (sin piso en cero).

        Args:
            cart: Líneas CartItem (o dicts con product_id/id y cart_quantity)

        Returns:
            Dict con resultado:
            - ok: True/False
            - error: mensaje si no había líneas válidas
            - sale: venta registrada
            - low_stock: nombres de productos con stock bajo
            - events: SALE_COMPLETED y, si aplica, LOW_STOCK
        """
        lines = [c if isinstance(c, CartItem) else CartItem.from_dict(c) for c in cart]
        now = self._clock()

        sale_items: List[SaleItem] = []
        touched: List[str] = []

        for line in lines:
            if line.cart_quantity <= 0:
                continue
            product = self.inventory_repo.get_product(line.product_id)
            if product is None:
                continue
            sale_items.append(SaleItem.from_product(product, line.cart_quantity))
            self.inventory_repo.adjust_quantity(product.id, -line.cart_quantity)
            if product.id not in touched:
                touched.append(product.id)

        if not sale_items:
            return {'ok': False, 'error': 'No hay items válidos en el carrito', 'events': []}

        sale = Sale(
            id=self.id_generator.next_id(),
            items=tuple(sale_items),
            total=sum(item.line_total for item in sale_items),
            profit=sum(item.line_profit for item in sale_items),
            cost=sum(item.line_cost for item in sale_items),
            date=now,
        )
        self.sales_repo.create_sale(sale)

        # Stock bajo según la cantidad NUEVA de cada producto tocado
        low_stock = []
        for pid in touched:
            product = self.inventory_repo.get_product(pid)
            if product.quantity < self.low_stock_threshold:
                low_stock.append(product.name)
            if product.quantity < 0 and self.audit_service:
                self.audit_service.log_negative_stock(product.id, product.name, product.quantity)

        if self.audit_service:
            self.audit_service.log_sale_created(sale.id, sale.total, sale.profit, sale.items_count)

        events = [
            DomainEvent(
                EventType.SALE_COMPLETED,
                "Venta completada. El inventario se actualizó correctamente.",
                {'sale_id': sale.id, 'total': sale.total},
                now,
            )
        ]
        if low_stock:
            events.append(DomainEvent(
                EventType.LOW_STOCK,
                f"Stock bajo en: {', '.join(low_stock)}.",
                {'products': list(low_stock)},
                now,
            ))

        return {'ok': True, 'sale': sale, 'low_stock': low_stock, 'events': events}

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def get_all_sales(self) -> List[Sale]:
        return self.sales_repo.load()

    def get_sale(self, sale_id: str) -> Optional[Sale]:
        return self.sales_repo.get_sale(sale_id)

    def recent_sales(self, limit: int = config.RECENT_SALES_LIMIT) -> List[Sale]:
        """Últimas ventas para el panel, la más reciente primero."""
        return self.sales_repo.get_recent(limit)
