# ==============================================================================
# SERVICIO DE BOLETAS
# ==============================================================================
# Genera la boleta en texto plano para imprimir. El núcleo solo entrega la
# venta; la impresión física queda fuera.
# ==============================================================================

from tienda_pos.models import Sale


class ReceiptService:
    """Render de boletas de venta."""

    WIDTH = 40
    TITLE = 'BOLETA DE VENTA'
    FOOTER = '¡Gracias por su visita!'

    def render(self, sale: Sale) -> str:
        """
        Boleta legible:

            BOLETA DE VENTA
            2024-01-01 10:00
            ----------------
            Producto (2)           $30.00
            ----------------
            TOTAL                  $30.00
        """
        sep = '-' * self.WIDTH
        lines = [
            self.TITLE.center(self.WIDTH),
            sale.date.strftime('%Y-%m-%d %H:%M').center(self.WIDTH),
            f"N° {sale.id}".center(self.WIDTH),
            sep,
        ]
        for item in sale.items:
            lines.append(self._row(f"{item.name} ({item.cart_quantity})", item.line_total))
        lines.append(sep)
        lines.append(self._row('TOTAL', sale.total))
        lines.append('')
        lines.append(self.FOOTER.center(self.WIDTH))
        return '\n'.join(lines) + '\n'

    def _row(self, label: str, amount: float) -> str:
        price = f"${amount:.2f}"
        room = self.WIDTH - len(price) - 1
        if len(label) > room:
            label = label[:room - 1] + '…'
        return f"{label.ljust(room)} {price}"
