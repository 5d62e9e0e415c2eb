# ==============================================================================
# VALIDADORES DE ENTRADA NUMÉRICA
# ==============================================================================
# Los montos y cantidades llegan como texto o JSON desde la API.
# NaN e infinito nunca entran al almacén: romperían todos los agregados.
# ==============================================================================

import math
from typing import Any, Optional, Union


def parse_number(value: Any, field_name: str, integral: bool = False) -> Union[int, float]:
    """
    Convierte un campo numérico finito.

    Vacío o None cuenta como 0.

    Args:
        value: Valor recibido
        field_name: Nombre del campo (para el mensaje de error)
        integral: Exigir un entero (cantidades de stock)

    Raises:
        ValueError: No es un número, no es finito o no es entero cuando se exige
    """
    if value is None or value == '':
        return 0 if integral else 0.0
    if isinstance(value, bool):
        raise ValueError(f"Valor inválido para {field_name}: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Valor inválido para {field_name}: {value!r}")
    if not math.isfinite(number):
        raise ValueError(f"Valor no finito para {field_name}: {value!r}")
    if integral:
        if not number.is_integer():
            raise ValueError(f"{field_name} debe ser un número entero: {value!r}")
        return int(number)
    return number


def positive_amount(value: Any) -> Optional[float]:
    """Monto como float si es finito y > 0, si no None."""
    try:
        amount = parse_number(value, 'amount')
    except ValueError:
        return None
    return amount if amount > 0 else None
