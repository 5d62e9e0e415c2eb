# ==============================================================================
# SERVICIO DE INVENTARIO
# ==============================================================================
# Centraliza toda la lógica de negocio relacionada con productos y stock:
# alta de productos, búsqueda por código/nombre y alertas de stock bajo.
# ==============================================================================

import random
import time
from typing import Any, Dict, List, Optional

from tienda_pos import config
from tienda_pos.models import Product, ProductCategory
from tienda_pos.repositories.base import IdGenerator
from tienda_pos.repositories.inventory_repository import InventoryRepository
from tienda_pos.services.audit_service import AuditService
from tienda_pos.services.validators import parse_number


def generate_barcode() -> str:
    """
    Genera un código de barras de 13 dígitos.

    Timestamp en ms + 6 dígitos aleatorios, recortado/completado a 13.
    """
    combined = str(int(time.time() * 1000)) + f"{random.randint(0, 999999):06d}"
    return combined[:13].ljust(13, '0')


class InventoryService:
    """
    Servicio para gestión de inventario.

    Responsabilidades:
    - Alta de productos (con ID y código de barras generados)
    - Búsqueda por código de barras o nombre
    - Consultas para el panel (stock bajo, por categoría)
    """

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        id_generator: IdGenerator,
        audit_service: AuditService = None
    ):
        """
        Inicializa el servicio de inventario.

        Args:
            inventory_repo: Repositorio de inventario
            id_generator: Generador de IDs compartido
            audit_service: Servicio de auditoría (opcional)
        """
        self.inventory_repo = inventory_repo
        self.id_generator = id_generator
        self.audit_service = audit_service

    # =========================================================================
    # OPERACIONES DE PRODUCTOS
    # =========================================================================

    def get_all_products(self) -> List[Product]:
        """Todos los productos en orden de alta."""
        return self.inventory_repo.load()

    def get_product(self, pid: str) -> Optional[Product]:
        return self.inventory_repo.get_product(pid)

    def add_product(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Da de alta un producto nuevo.

        Args:
            data: name, barcode, description, quantity, price,
                  purchase_price, category, image

        Returns:
            Dict con resultado:
            - ok: True/False
            - error: mensaje si falló (no se modifica nada)
            - product: producto creado
            - events: notificaciones emitidas (ninguna)
        """
        name = (data.get('name') or '').strip()
        if not name:
            return {'ok': False, 'error': 'El nombre es obligatorio', 'events': []}

        try:
            quantity = parse_number(data.get('quantity'), 'quantity', integral=True)
            price = parse_number(data.get('price'), 'price')
            purchase_price = parse_number(data.get('purchase_price'), 'purchase_price')
            category = ProductCategory(data.get('category') or ProductCategory.GENERAL)
        except ValueError as e:
            return {'ok': False, 'error': str(e), 'events': []}

        if quantity < 0 or price < 0 or purchase_price < 0:
            return {'ok': False, 'error': 'Cantidad y precios no pueden ser negativos', 'events': []}

        product = Product(
            id=self.id_generator.next_id(),
            name=name,
            barcode=(data.get('barcode') or '').strip() or generate_barcode(),
            description=data.get('description') or '',
            quantity=quantity,
            price=price,
            purchase_price=purchase_price,
            category=category,
            image=data.get('image') or None,
        )
        self.inventory_repo.create_product(product)

        if self.audit_service:
            self.audit_service.log_product_created(product.id, product.name, product.quantity)

        return {'ok': True, 'product': product.copy(), 'events': []}

    def find_product(self, term: str) -> Optional[Product]:
        """
        Busca un producto por código de barras o nombre.

        Coincide si el término es igual al código de barras o si el nombre
        lo contiene (sin distinguir mayúsculas). Devuelve el primero en orden
        de alta.
        """
        if not term:
            return None
        return self.inventory_repo.find_by_term(term)

    # =========================================================================
    # CONSULTAS PARA EL PANEL
    # =========================================================================

    def low_stock_products(self, threshold: int = config.LOW_STOCK_THRESHOLD) -> List[Product]:
        return [p for p in self.get_all_products() if p.quantity < threshold]

    def products_by_category(self, category: ProductCategory) -> List[Product]:
        category = ProductCategory(category)
        return [p for p in self.get_all_products() if p.category == category]
