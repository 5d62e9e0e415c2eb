# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Coordinador único del almacén
# ==============================================================================
# Este módulo es el ÚNICO dueño del estado de la tienda. Proporciona:
#   - Instancias compartidas de repositorios y servicios
#   - Un reloj común (inyectable en tests)
#   - Snapshots inmutables para las estadísticas financieras
#
# Todas las mutaciones pasan por los servicios; las estadísticas se calculan
# siempre desde snapshot() sin caché.
# ==============================================================================

from datetime import datetime
from typing import Callable, Optional

from tienda_pos import config
from tienda_pos.demo_data import demo_products
from tienda_pos.models import StoreSnapshot

from tienda_pos.repositories import (
    IdGenerator,
    InventoryRepository,
    SalesRepository,
    RepairRepository,
    PrintJobRepository,
    FundsRepository,
    LossRepository,
    AuditRepository,
)

from tienda_pos.services import (
    AuditService,
    InventoryService,
    SalesService,
    CartService,
    RepairService,
    PrintService,
    LedgerService,
    StatsService,
    ReceiptService,
    ProductImageService,
)


class AppContainer:
    """
    Contenedor de dependencias de la aplicación.

    Implementa el patrón Singleton para la app Flask; los tests crean
    instancias propias con su propio reloj.

    Uso:
        container = get_container()
        container.sales_service.process_sale(cart)
        container.stats_service.get_financial_summary()
    """

    _instance: Optional['AppContainer'] = None

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        seed_demo_data: Optional[bool] = None,
        image_service: Optional[ProductImageService] = None
    ):
        """
        Inicializa el contenedor.

        Args:
            clock: Función que retorna la hora local actual
            seed_demo_data: Cargar catálogo demo (por defecto: no en producción)
            image_service: Cliente de imágenes (por defecto el configurado)
        """
        self.clock = clock
        self.id_generator = IdGenerator()

        # Repositorios
        self.inventory_repo = InventoryRepository()
        self.sales_repo = SalesRepository()
        self.repair_repo = RepairRepository()
        self.print_job_repo = PrintJobRepository()
        self.funds_repo = FundsRepository()
        self.loss_repo = LossRepository()
        self.audit_repo = AuditRepository()

        # Servicios
        self.audit_service = AuditService(self.audit_repo, clock)
        self.inventory_service = InventoryService(
            self.inventory_repo, self.id_generator, self.audit_service
        )
        self.sales_service = SalesService(
            self.sales_repo,
            self.inventory_repo,
            self.id_generator,
            self.audit_service,
            clock,
            config.LOW_STOCK_THRESHOLD
        )
        self.cart_service = CartService(self.inventory_service)
        self.repair_service = RepairService(
            self.repair_repo, self.id_generator, self.audit_service, clock
        )
        self.print_service = PrintService(
            self.print_job_repo, self.id_generator, self.audit_service, clock
        )
        self.ledger_service = LedgerService(
            self.funds_repo, self.loss_repo, self.audit_service, clock
        )
        self.stats_service = StatsService(self.snapshot, clock)
        self.receipt_service = ReceiptService()
        self.image_service = image_service or ProductImageService()

        if seed_demo_data is None:
            seed_demo_data = not config.PRODUCTION_MODE
        if seed_demo_data:
            self.seed_demo_data()

    # =========================================================================
    # ESTADO
    # =========================================================================

    def snapshot(self) -> StoreSnapshot:
        """Copia inmutable de todo el almacén en este instante."""
        return StoreSnapshot(
            products=tuple(self.inventory_repo.get_all()),
            sales=tuple(self.sales_repo.get_all()),
            repairs=tuple(self.repair_repo.get_all()),
            print_jobs=tuple(self.print_job_repo.get_all()),
            funds=tuple(self.funds_repo.get_all()),
            losses=tuple(self.loss_repo.get_all()),
        )

    def seed_demo_data(self) -> None:
        """Carga el catálogo de demostración si el inventario está vacío."""
        if len(self.inventory_repo) == 0:
            for product in demo_products():
                self.inventory_repo.create_product(product)

    # =========================================================================
    # SINGLETON
    # =========================================================================

    @classmethod
    def get_instance(cls) -> 'AppContainer':
        """
        Obtiene la instancia singleton del contenedor.

        Returns:
            Instancia del contenedor
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_instance(cls, container: 'AppContainer') -> None:
        """Reemplaza el singleton (útil para tests)."""
        cls._instance = container

    @classmethod
    def reset_instance(cls) -> None:
        """Elimina la instancia singleton (útil para tests)."""
        cls._instance = None


def get_container() -> AppContainer:
    """
    Obtiene el contenedor de dependencias global.

    Returns:
        Instancia del contenedor
    """
    return AppContainer.get_instance()
