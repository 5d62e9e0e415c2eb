# ==============================================================================
# CONFIGURACIÓN DE LA APLICACIÓN
# ==============================================================================
# Valores leídos de variables de entorno con defaults seguros para desarrollo.
# Comando: export TIENDA_SECRET_KEY="tu_clave_secreta_muy_larga_y_aleatoria"
# ==============================================================================

import os


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


BASE = os.path.dirname(os.path.abspath(__file__))

# ═══════════════════════════════════════════════════════════════════════════════
# MODO PRODUCCIÓN
# ═══════════════════════════════════════════════════════════════════════════════
# True = Sistema limpio, sin catálogo de demostración
# False = Modo desarrollo, se cargan los productos demo al iniciar
PRODUCTION_MODE = _env_flag('TIENDA_PRODUCTION_MODE')

# ═══════════════════════════════════════════════════════════════════════════════
# SESIONES
# ═══════════════════════════════════════════════════════════════════════════════
_DEFAULT_SECRET = "tienda_pos_dev_secret_key_change_in_production"
SECRET_KEY = os.environ.get('TIENDA_SECRET_KEY') or _DEFAULT_SECRET

if PRODUCTION_MODE and SECRET_KEY == _DEFAULT_SECRET:
    print("[ADVERTENCIA] PRODUCTION_MODE activo sin TIENDA_SECRET_KEY definida")
    print("[ADVERTENCIA] Define la variable de entorno para mayor seguridad")

# ═══════════════════════════════════════════════════════════════════════════════
# REGLAS DE NEGOCIO
# ═══════════════════════════════════════════════════════════════════════════════
# Alerta de stock bajo cuando la cantidad queda por debajo de este valor
LOW_STOCK_THRESHOLD = 2

# Ventas mostradas en el panel principal
RECENT_SALES_LIMIT = 5

# ═══════════════════════════════════════════════════════════════════════════════
# GENERACIÓN DE IMÁGENES (servicio externo)
# ═══════════════════════════════════════════════════════════════════════════════
IMAGE_API_URL = os.environ.get('TIENDA_IMAGE_API_URL', '')
IMAGE_API_KEY = os.environ.get('TIENDA_IMAGE_API_KEY', '')
IMAGE_API_TIMEOUT = float(os.environ.get('TIENDA_IMAGE_API_TIMEOUT', '30'))

# ═══════════════════════════════════════════════════════════════════════════════
# PROFILING
# ═══════════════════════════════════════════════════════════════════════════════
ENABLE_PROFILING = _env_flag('TIENDA_ENABLE_PROFILING', default=True)
LOGS_DIR = os.environ.get('TIENDA_LOGS_DIR') or os.path.join(BASE, 'logs')
