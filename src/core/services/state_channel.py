"""Canal de un solo valor con semántica replay-latest.

Por qué no una cola:
- Solo importa el último estado: un suscriptor nuevo recibe de inmediato el
  valor actual y nunca se queda esperando.
- Un único escritor (el presenter) publica desde el hilo del event loop, así
  que no hace falta ningún lock.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]


class StateChannel(Generic[T]):
    """Valor actual observable."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def publish(self, value: T) -> None:
        """Guarda `value` y notifica a los suscriptores en orden de alta."""

        self._value = value
        # Copia: un suscriptor puede darse de baja mientras se le notifica.
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """Registra `callback` y le reenvía el valor actual.

        Devuelve una función que elimina la suscripción; llamarla más de una
        vez no hace nada.
        """

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        callback(self._value)
        return unsubscribe
