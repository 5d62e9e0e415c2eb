# ==============================================================================
# EXCEPCIONES DEL SISTEMA
# ==============================================================================
# Las validaciones de negocio NO lanzan excepciones: las operaciones ignoran
# montos no positivos o IDs inexistentes y devuelven {'ok': False}.
# Solo los fallos de servicios externos se propagan como excepción.
# ==============================================================================


class TiendaError(Exception):
    """Error base de la aplicación."""


class ImageGenerationError(TiendaError):
    """El servicio externo de generación de imágenes falló."""
