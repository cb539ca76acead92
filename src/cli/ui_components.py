"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Todo va a stderr: el comando no escribe nunca en stdout.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from core.errors import ReadFailure


def build_stderr_console() -> Console:
    """Console Rich ligada a stderr (errores y logging)."""

    return Console(stderr=True)


def print_read_failure(console: Console, error: ReadFailure) -> None:
    """Imprime el mensaje fatal de lectura, sin cortes de línea."""

    console.print(Text(str(error), style="bold red"), soft_wrap=True)


def print_settings_warning(console: Console, error: ValidationError) -> None:
    """Avisa de configuración inválida; se siguen usando los valores por defecto."""

    fields = ", ".join(str(e["loc"][0]) for e in error.errors() if e.get("loc")) or "unknown"
    console.print(
        Text(f"Invalid configuration ({fields}); using defaults.", style="yellow"),
        soft_wrap=True,
    )
