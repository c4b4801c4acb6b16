"""Almacén clave -> valor en memoria."""


class KvStore:
    """Almacén en memoria clave -> valor (texto), para uso secuencial."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        # str es inmutable: guardar la referencia equivale a una copia
        if not isinstance(key, str):
            raise TypeError(f"key debe ser str, no {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(f"value debe ser str, no {type(value).__name__}")
        self._data[key] = value

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"KvStore(entries={len(self._data)})"
