"""Adaptador de sistema de ficheros.

Por qué `os.mkdir` y no `Path.mkdir`:
- `Path` normaliza la ruta (barras repetidas, `.`); aquí la ruta va tal cual.
"""

from __future__ import annotations

import logging
import os

from core.domain.models import MkdirOutcome

logger = logging.getLogger(__name__)


class OsDirectoryCreator:
    """Crea un único nivel de directorio y descarta cualquier fallo."""

    def create(self, path: str) -> MkdirOutcome:
        try:
            os.mkdir(path)
        except (OSError, ValueError) as exc:
            # ValueError: NUL embebido en la ruta.
            return MkdirOutcome(path=path, created=False, error=str(exc))
        logger.debug("mkdir %r created", path)
        return MkdirOutcome(path=path, created=True)
