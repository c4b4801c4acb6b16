"""kvs: almacén clave -> valor en memoria y un CLI para ejecutar órdenes sobre él."""

__version__ = "0.1.0"

from kvs.store import KvStore

__all__ = ["KvStore", "__version__"]
