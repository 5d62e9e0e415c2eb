# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Este módulo define todas las entidades del dominio usando dataclasses.
# Independientes de la capa de presentación: el núcleo devuelve entidades y
# eventos, la API Flask los serializa.
# ==============================================================================

from .entities import (
    # Inventario
    Product,
    ProductCategory,
    CartItem,

    # Ventas
    Sale,
    SaleItem,

    # Servicio técnico e impresión
    Repair,
    RepairStatus,
    PrintJob,

    # Caja
    ManualFund,
    Loss,

    # Notificaciones
    DomainEvent,
    EventType,

    # Snapshot
    StoreSnapshot,
)

__all__ = [
    # Inventario
    'Product',
    'ProductCategory',
    'CartItem',

    # Ventas
    'Sale',
    'SaleItem',

    # Servicio técnico e impresión
    'Repair',
    'RepairStatus',
    'PrintJob',

    # Caja
    'ManualFund',
    'Loss',

    # Notificaciones
    'DomainEvent',
    'EventType',

    # Snapshot
    'StoreSnapshot',
]
