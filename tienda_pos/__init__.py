# ==============================================================================
# TIENDA POS - Punto de venta e inventario para tienda con servicio técnico
# ==============================================================================

__version__ = '1.0.0'
