# ==============================================================================
# ENTIDADES DEL DOMINIO - Definiciones de dataclasses
# ==============================================================================
# Cada entidad representa un concepto del negocio: productos, ventas,
# reparaciones, trabajos de impresión y movimientos manuales de caja.
# Las ventas, impresiones, fondos y pérdidas son registros inmutables una vez
# creados; de ellos se derivan todos los totales financieros.
# ==============================================================================

from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any, Tuple
from enum import Enum
from datetime import datetime


# ==============================================================================
# ENUMERACIONES - Estados y tipos válidos
# ==============================================================================

class ProductCategory(str, Enum):
    """Categorías de producto disponibles en la tienda."""
    GENERAL = "General"
    PHONE_ACCESSORIES = "Phone Accessories & Parts"


class RepairStatus(str, Enum):
    """Estados posibles de una reparación."""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class EventType(str, Enum):
    """Tipos de notificación emitidos por las operaciones."""
    SALE_COMPLETED = "sale_completed"
    LOW_STOCK = "low_stock"
    REPAIR_COMPLETED = "repair_completed"
    PRINT_JOB_ADDED = "print_job_added"


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


# ==============================================================================
# NOTIFICACIONES
# ==============================================================================

@dataclass(frozen=True)
class DomainEvent:
    """
    Notificación emitida por una operación del núcleo.

    La capa de presentación decide cómo mostrarla (toast, flash, JSON).

    Attributes:
        type: Tipo de evento
        message: Mensaje humanizado
        payload: Datos asociados (ids, montos, nombres)
        date: Momento de emisión
    """
    type: EventType
    message: str
    payload: Dict[str, Any] = field(default_factory=dict)
    date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'message': self.message,
            'payload': dict(self.payload),
            'date': _iso(self.date),
        }


# ==============================================================================
# ENTIDADES DE INVENTARIO
# ==============================================================================

@dataclass
class Product:
    """
    Producto del inventario.

    Attributes:
        id: Identificador único
        name: Nombre del producto
        barcode: Código de barras (EAN-13 o libre)
        description: Descripción
        quantity: Unidades en stock
        price: Precio de venta
        purchase_price: Precio de compra (costo unitario)
        category: Categoría
        image: Referencia de imagen (URL o data URI), opcional
    """
    id: str
    name: str
    barcode: str = ''
    description: str = ''
    quantity: int = 0
    price: float = 0.0
    purchase_price: float = 0.0
    category: ProductCategory = ProductCategory.GENERAL
    image: Optional[str] = None

    @property
    def stock_value(self) -> float:
        """Valor del stock a precio de compra."""
        return self.purchase_price * self.quantity

    def matches(self, term: str) -> bool:
        """Coincide por código de barras exacto o nombre (sin mayúsculas)."""
        lowered = term.lower()
        return self.barcode.lower() == lowered or lowered in self.name.lower()

    def copy(self) -> 'Product':
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para la API."""
        return {
            'id': self.id,
            'name': self.name,
            'barcode': self.barcode,
            'description': self.description,
            'quantity': self.quantity,
            'price': self.price,
            'purchase_price': self.purchase_price,
            'category': self.category.value,
            'image': self.image,
        }


@dataclass
class CartItem:
    """
    Línea del carrito de venta.

    Attributes:
        product_id: ID del producto seleccionado
        cart_quantity: Unidades a vender
    """
    product_id: str
    cart_quantity: int

    def to_dict(self) -> Dict[str, Any]:
        return {'product_id': self.product_id, 'cart_quantity': self.cart_quantity}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CartItem':
        return cls(
            product_id=str(data.get('product_id', data.get('id', ''))),
            cart_quantity=int(data.get('cart_quantity', data.get('cartQuantity', 0)) or 0),
        )


# ==============================================================================
# ENTIDADES DE VENTA
# ==============================================================================

@dataclass(frozen=True)
class SaleItem:
    """
    Ítem vendido: copia del producto al momento de la venta + cantidad.
    """
    product_id: str
    name: str
    barcode: str
    price: float
    purchase_price: float
    cart_quantity: int
    category: ProductCategory = ProductCategory.GENERAL

    @property
    def line_total(self) -> float:
        return self.price * self.cart_quantity

    @property
    def line_cost(self) -> float:
        return self.purchase_price * self.cart_quantity

    @property
    def line_profit(self) -> float:
        return (self.price - self.purchase_price) * self.cart_quantity

    @classmethod
    def from_product(cls, product: Product, cart_quantity: int) -> 'SaleItem':
        return cls(
            product_id=product.id,
            name=product.name,
            barcode=product.barcode,
            price=product.price,
            purchase_price=product.purchase_price,
            cart_quantity=cart_quantity,
            category=product.category,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'product_id': self.product_id,
            'name': self.name,
            'barcode': self.barcode,
            'price': self.price,
            'purchase_price': self.purchase_price,
            'cart_quantity': self.cart_quantity,
            'category': self.category.value,
            'line_total': round(self.line_total, 2),
        }


@dataclass(frozen=True)
class Sale:
    """
    Venta registrada.

    Attributes:
        id: Identificador único
        items: Ítems vendidos
        total: Σ precio × cantidad
        profit: Σ (precio - precio de compra) × cantidad
        cost: Σ precio de compra × cantidad (None en ventas legacy)
        date: Momento de la venta
    """
    id: str
    items: Tuple[SaleItem, ...]
    total: float
    profit: float
    date: datetime
    cost: Optional[float] = None

    @property
    def items_count(self) -> int:
        """Unidades vendidas en total."""
        return sum(item.cart_quantity for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'items': [item.to_dict() for item in self.items],
            'items_count': self.items_count,
            'total': self.total,
            'profit': self.profit,
            'cost': self.cost,
            'date': _iso(self.date),
        }


# ==============================================================================
# ENTIDADES DE SERVICIO TÉCNICO
# ==============================================================================

@dataclass
class Repair:
    """
    Trabajo de reparación de un equipo.

    Solo status y completion_date cambian tras la creación.
    completion_date se fija al pasar a Completed y no se borra si el
    estado vuelve a cambiar.
    """
    id: str
    customer_name: str
    customer_phone: str
    device: str
    issue_description: str
    cost: float
    status: RepairStatus
    creation_date: datetime
    completion_date: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == RepairStatus.COMPLETED

    def copy(self) -> 'Repair':
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'customer_name': self.customer_name,
            'customer_phone': self.customer_phone,
            'device': self.device,
            'issue_description': self.issue_description,
            'cost': self.cost,
            'status': self.status.value,
            'creation_date': _iso(self.creation_date),
            'completion_date': _iso(self.completion_date),
        }


@dataclass(frozen=True)
class PrintJob:
    """Trabajo de impresión: profit = price - cost."""
    id: str
    price: float
    cost: float
    profit: float
    date: datetime
    description: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'description': self.description,
            'price': self.price,
            'cost': self.cost,
            'profit': self.profit,
            'date': _iso(self.date),
        }


# ==============================================================================
# MOVIMIENTOS MANUALES DE CAJA
# ==============================================================================

@dataclass(frozen=True)
class ManualFund:
    """Inyección manual de capital (monto > 0)."""
    amount: float
    date: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {'amount': self.amount, 'date': _iso(self.date)}


@dataclass(frozen=True)
class Loss:
    """Pérdida manual (monto > 0)."""
    amount: float
    date: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {'amount': self.amount, 'date': _iso(self.date)}


# ==============================================================================
# SNAPSHOT DEL ALMACÉN
# ==============================================================================

@dataclass(frozen=True)
class StoreSnapshot:
    """
    Copia inmutable de todas las listas del almacén.
    Las agregaciones financieras se calculan solo sobre snapshots.
    """
    products: Tuple[Product, ...] = ()
    sales: Tuple[Sale, ...] = ()
    repairs: Tuple[Repair, ...] = ()
    print_jobs: Tuple[PrintJob, ...] = ()
    funds: Tuple[ManualFund, ...] = ()
    losses: Tuple[Loss, ...] = ()

