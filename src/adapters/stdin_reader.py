"""Lectura de la línea de entrada.

Se lee del stream binario para conservar el texto exacto: el modo texto de
Python traduciría `\\r\\n` a `\\n` (universal newlines).
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from core.domain.models import InputLine
from core.errors import ReadFailure

logger = logging.getLogger(__name__)


def read_line(stream: BinaryIO | None, *, encoding: str = "utf-8") -> InputLine:
    """Lee una línea (terminador incluido) y la decodifica de forma estricta.

    Lanza `ReadFailure` si el stream no existe, está cerrado, falla al leer,
    contiene bytes no decodificables o llega a fin de stream sin datos.
    """

    if stream is None:
        raise ReadFailure("standard input is not available")

    try:
        raw = stream.readline()
    except (OSError, ValueError) as exc:
        raise ReadFailure(str(exc)) from exc

    if not raw:
        raise ReadFailure("end of stream reached before any data")

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ReadFailure(f"stream did not contain valid {encoding}") from exc

    logger.debug("Read %d bytes from stdin", len(raw))
    return InputLine(text=text)
