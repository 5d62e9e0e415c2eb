# ==============================================================================
# REPOSITORIO BASE - Almacén en memoria de listas de solo-agregado
# ==============================================================================
# Los datos viven en memoria durante la sesión del proceso (no se persisten).
# No hay borrado: solo crear, agregar, leer todo y leer por ID.
# ==============================================================================

import copy
import itertools
import threading
import time
from typing import Any, Callable, Generic, List, Optional, TypeVar


T = TypeVar('T')


class IdGenerator:
    """
    Genera IDs únicos combinando un contador creciente y la hora en ms.

    No es criptográficamente único, pero no colisiona en una sesión normal:
    el contador nunca se repite dentro del proceso.
    """

    def __init__(self, start: int = 1, time_source: Callable[[], float] = time.time):
        self._counter = itertools.count(start)
        self._time_source = time_source
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            seq = next(self._counter)
        millis = int(self._time_source() * 1000)
        return f"{seq}{millis}"


class ListRepository(Generic[T]):
    """
    Repositorio base para entidades almacenadas como lista ordenada.

    El orden de inserción se conserva (las búsquedas devuelven el primero).
    Las lecturas devuelven copias para que nadie modifique el almacén
    sin pasar por el repositorio.
    """

    # Lock global para las escrituras (un solo escritor lógico)
    _lock = threading.RLock()

    # Campo usado como identidad (None = registros sin identidad)
    id_field: Optional[str] = 'id'

    def __init__(self, records: Optional[List[T]] = None):
        self._records: List[T] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def get_all(self) -> List[T]:
        """
        Obtiene todos los registros en orden de inserción.

        Returns:
            Copias de los registros
        """
        with self._lock:
            return [copy.copy(r) for r in self._records]

    def append(self, record: T) -> T:
        """
        Agrega un registro al final.

        Args:
            record: Entidad a guardar

        Returns:
            El mismo registro
        """
        with self._lock:
            self._records.append(record)
        return record

    def get_by_id(self, record_id: Any) -> Optional[T]:
        """
        Obtiene un registro por su ID.

        Returns:
            Copia del registro o None si no existe
        """
        record = self._find_live(record_id)
        return copy.copy(record) if record is not None else None

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Primer registro (en orden de inserción) que cumple el predicado."""
        with self._lock:
            for record in self._records:
                if predicate(record):
                    return copy.copy(record)
        return None

    def update(self, record_id: Any, **changes: Any) -> Optional[T]:
        """
        Modifica campos de un registro existente.

        Args:
            record_id: ID del registro
            **changes: Campos a actualizar

        Returns:
            Copia del registro actualizado, o None si no existe
        """
        with self._lock:
            record = self._find_live(record_id)
            if record is None:
                return None
            for name, value in changes.items():
                setattr(record, name, value)
            return copy.copy(record)

    def _find_live(self, record_id: Any) -> Optional[T]:
        if self.id_field is None:
            return None
        key = str(record_id)
        with self._lock:
            for record in self._records:
                if str(getattr(record, self.id_field)) == key:
                    return record
        return None
