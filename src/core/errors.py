"""Errores del Core.

Solo existe un fallo fatal: no poder leer la línea de stdin. El fallo al crear
el directorio no es un error a este nivel (se descarta en el adaptador).
"""

from __future__ import annotations


class ReadFailure(RuntimeError):
    """Standard input was closed, unreadable or empty."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to read line: {detail}")
        self.detail = detail
