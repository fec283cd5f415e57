"""Estados de vista de un ciclo de fetch.

Por qué una unión etiquetada:
- Un ciclo empieza en `Loading` y termina en `Success` o `Error`; con `kind`
  como discriminador nunca puede haber dos estados activos a la vez.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import Quote


class Loading(BaseModel):
    """Hay un request en curso."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Success(BaseModel):
    """El request terminó con un quote."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    quote: Quote


class Error(BaseModel):
    """El request falló; `message` se muestra tal cual al usuario."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str = Field(..., min_length=1)


ViewState = Annotated[Union[Loading, Success, Error], Field(discriminator="kind")]
