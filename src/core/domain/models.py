"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación y documentación autocontenida (Field) sin acoplar el Core a I/O.
- Los dos valores son transitorios: viven lo que dura una invocación.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

LINE_TERMINATORS = ("\r\n", "\n")


class InputLine(BaseModel):
    """La línea capturada de stdin, sin recortar.

    El texto se usa tal cual como ruta: el terminador de línea forma parte del
    nombre del directorio.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        min_length=1,
        description="Texto leído, incluyendo el terminador de línea si lo hay.",
    )

    @property
    def has_line_terminator(self) -> bool:
        return self.text.endswith(LINE_TERMINATORS)


class MkdirOutcome(BaseModel):
    """Resultado de la llamada de creación de directorio.

    No afecta al código de salida; solo sirve para logging y tests.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Ruta pasada a la llamada, sin modificar.")
    created: bool = Field(default=False, description="True si el directorio se creó.")
    error: str | None = Field(
        default=None,
        description="Descripción del fallo descartado (errno/mensaje).",
    )
