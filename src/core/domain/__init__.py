"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce stdin, CLI ni el sistema de ficheros: solo conceptos.
"""

from core.domain.models import InputLine, MkdirOutcome

__all__ = ["InputLine", "MkdirOutcome"]
