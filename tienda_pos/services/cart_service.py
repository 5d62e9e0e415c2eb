# ==============================================================================
# SERVICIO DE CARRITO
# ==============================================================================
# Lógica del carrito del punto de venta. El carrito no se guarda aquí: la API
# lo mantiene en la sesión de Flask y este servicio solo lo transforma.
#
# Aquí se cumple la regla de selección: nunca se agregan más unidades que
# las que hay en stock. process_sale confía en esto.
# ==============================================================================

from typing import Any, Dict, List

from tienda_pos.models import CartItem
from tienda_pos.services.inventory_service import InventoryService


class CartService:
    """
    Servicio para gestión del carrito de compras.

    Responsabilidades:
    - Agregar productos (de a una unidad, como el escáner)
    - Cambiar cantidades respetando el stock
    - Calcular totales
    """

    def __init__(self, inventory_service: InventoryService):
        self.inventory_service = inventory_service

    def add_item(self, cart: List[CartItem], product_id: str) -> Dict[str, Any]:
        """
        Agrega una unidad de un producto al carrito.

        Returns:
            Dict con ok, error (si falló) y cart (nuevo carrito)
        """
        product = self.inventory_service.get_product(product_id)
        if product is None:
            return {'ok': False, 'error': 'Producto no encontrado', 'cart': cart}

        cart = [CartItem(c.product_id, c.cart_quantity) for c in cart]
        for line in cart:
            if line.product_id == product.id:
                if line.cart_quantity >= product.quantity:
                    return {'ok': False, 'error': f"No hay más stock de {product.name}", 'cart': cart}
                line.cart_quantity += 1
                return {'ok': True, 'cart': cart}

        if product.quantity <= 0:
            return {'ok': False, 'error': f"{product.name} está agotado", 'cart': cart}

        cart.append(CartItem(product.id, 1))
        return {'ok': True, 'cart': cart}

    def update_quantity(self, cart: List[CartItem], product_id: str, quantity: int) -> Dict[str, Any]:
        """
        Cambia la cantidad de una línea. quantity <= 0 elimina la línea.
        """
        product_id = str(product_id)
        if quantity <= 0:
            return {'ok': True, 'cart': [CartItem(c.product_id, c.cart_quantity)
                                         for c in cart if c.product_id != product_id]}

        product = self.inventory_service.get_product(product_id)
        if product is None:
            return {'ok': False, 'error': 'Producto no encontrado', 'cart': cart}
        if quantity > product.quantity:
            return {
                'ok': False,
                'error': f"Stock insuficiente para {product.name}. Disponible: {product.quantity}",
                'cart': cart
            }

        cart = [CartItem(c.product_id, c.cart_quantity) for c in cart]
        for line in cart:
            if line.product_id == product_id:
                line.cart_quantity = quantity
                break
        else:
            cart.append(CartItem(product_id, quantity))
        return {'ok': True, 'cart': cart}

    def cart_total(self, cart: List[CartItem]) -> float:
        """Σ precio × cantidad con los precios actuales."""
        total = 0.0
        for line in cart:
            product = self.inventory_service.get_product(line.product_id)
            if product is not None:
                total += product.price * line.cart_quantity
        return total

    def get_cart(self, cart: List[CartItem]) -> Dict[str, Any]:
        """
        Carrito con detalle y totales.

        Returns:
            Dict con items, total_items, total_monto
        """
        items = []
        for line in cart:
            product = self.inventory_service.get_product(line.product_id)
            if product is None:
                continue
            items.append({
                'product_id': product.id,
                'name': product.name,
                'price': product.price,
                'cart_quantity': line.cart_quantity,
                'available': product.quantity,
                'line_total': round(product.price * line.cart_quantity, 2),
            })
        return {
            'items': items,
            'total_items': sum(i['cart_quantity'] for i in items),
            'total_monto': round(self.cart_total(cart), 2),
        }
