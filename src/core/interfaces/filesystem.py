"""Contrato de creación de directorios.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el sistema de ficheros real por un doble en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import MkdirOutcome


@runtime_checkable
class DirectoryCreator(Protocol):
    """Contrato mínimo para crear un directorio.

    Reglas de diseño:
    - Un solo nivel: no crea componentes intermedios.
    - Nunca lanza por un fallo de creación; lo devuelve en `MkdirOutcome`.
    """

    def create(self, path: str) -> MkdirOutcome:
        """Intenta crear `path` y devuelve el resultado normalizado."""

        ...
