"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Separa el contrato del wire (`RemoteQuote`) del modelo interno (`Quote`):
  si el servidor cambia su esquema, solo cambian `RemoteQuote` y el mapper.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RemoteQuote(BaseModel):
    """Quote tal como llega del servidor (`GET /quotes/{id}`).

    El wire usa la key `quote` para el texto; aquí se expone como `text`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: int = Field(
        ...,
        description="Identificador del quote en el servidor.",
    )
    text: str = Field(
        ...,
        alias="quote",
        description="Texto del quote (key `quote` en el JSON).",
    )
    author: str = Field(
        ...,
        description="Autor del quote.",
    )


class Quote(BaseModel):
    """Quote tal como lo usa la aplicación."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Identificador del quote.",
    )
    text: str = Field(
        ...,
        description="Texto del quote.",
    )
    author: str = Field(
        ...,
        description="Autor del quote.",
    )
