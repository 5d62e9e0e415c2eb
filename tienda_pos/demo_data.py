# ==============================================================================
# CATÁLOGO DE DEMOSTRACIÓN
# ==============================================================================
# Se carga solo fuera de PRODUCTION_MODE.
# ==============================================================================

from tienda_pos.models import Product, ProductCategory

_PLACEHOLDER = 'https://placehold.co/400x400.png'
_PHONE = ProductCategory.PHONE_ACCESSORIES


def demo_products():
    """Productos demo (IDs fijos '1'..'7')."""
    return [
        Product('1', 'iPhone 13 Screen Replacement', '1111111111111',
                'High-quality OLED screen replacement for iPhone 13.',
                10, 129.99, 85.00, _PHONE, _PLACEHOLDER),
        Product('2', 'Samsung Galaxy S21 Battery', '2222222222222',
                'Original replacement battery for Samsung Galaxy S21.',
                15, 49.99, 28.00, _PHONE, _PLACEHOLDER),
        Product('3', 'USB-C Charging Cable', '3333333333333',
                '3ft braided USB-C to USB-A charging cable.',
                50, 12.50, 4.00, _PHONE, _PLACEHOLDER),
        Product('4', 'Generic Smartphone Case', '4444444444444',
                'Clear TPU protective case for various smartphone models.',
                1, 9.99, 3.50, _PHONE, _PLACEHOLDER),
        Product('5', 'Premium Soda Can', '5555555555555',
                'A refreshing can of premium soda.',
                100, 1.99, 0.80, ProductCategory.GENERAL, _PLACEHOLDER),
        Product('6', 'Gourmet Coffee Beans', '6666666666666',
                '1lb bag of whole bean, dark roast coffee.',
                30, 18.00, 11.00, ProductCategory.GENERAL, _PLACEHOLDER),
        Product('7', 'Artisanal Bread Loaf', '7777777777777',
                'Freshly baked sourdough bread.',
                1, 7.50, 3.00, ProductCategory.GENERAL, _PLACEHOLDER),
    ]
