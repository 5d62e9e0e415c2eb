# ==============================================================================
# SERVICIO DE IMÁGENES DE PRODUCTO
# ==============================================================================
# Cliente del servicio externo que genera imágenes a partir del nombre y la
# descripción del producto. La referencia devuelta (URL o data URI) se guarda
# tal cual en el producto.
#
# Los fallos se propagan como ImageGenerationError. Sin reintentos.
# ==============================================================================

from typing import Optional

import requests

from tienda_pos import config
from tienda_pos.errors import ImageGenerationError


class ProductImageService:
    """
    Genera imágenes de producto vía HTTP.

    Contrato del endpoint:
        POST {url}  {"product_name": ..., "product_description": ...}
        → 200 {"image_url": "..."}
    """

    PROMPT = (
        "Generate a realistic image of {name}, described as {description}. "
        "The image should be suitable for an online inventory system."
    )

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.api_url = api_url if api_url is not None else config.IMAGE_API_URL
        self.api_key = api_key if api_key is not None else config.IMAGE_API_KEY
        self.timeout = timeout if timeout is not None else config.IMAGE_API_TIMEOUT

    def generate(self, product_name: str, product_description: str) -> str:
        """
        Pide una imagen para el producto.

        Returns:
            Referencia de la imagen

        Raises:
            ImageGenerationError: Servicio no configurado, error de red,
                                  respuesta no 2xx o sin imagen
        """
        if not self.api_url:
            raise ImageGenerationError("TIENDA_IMAGE_API_URL no está configurada")

        headers = {}
        if self.api_key:
            headers['Authorization'] = f"Bearer {self.api_key}"

        payload = {
            'product_name': product_name,
            'product_description': product_description,
            'prompt': self.PROMPT.format(name=product_name, description=product_description),
        }

        try:
            response = requests.post(self.api_url, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise ImageGenerationError(f"No se pudo generar la imagen: {e}") from e
        except ValueError as e:
            raise ImageGenerationError(f"Respuesta inválida del servicio de imágenes: {e}") from e

        image_url = data.get('image_url') if isinstance(data, dict) else None
        if not image_url:
            raise ImageGenerationError("El servicio no devolvió ninguna imagen")
        return image_url
