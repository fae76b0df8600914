"""
Modelo Pydantic de um carro do catálogo de ordinais.

Cada linha do catálogo traz o ordinal do jogo seguido dos dados descritivos
do carro, usados para montar a linha do leaderboard.
"""

from pydantic import BaseModel, ConfigDict, Field


class CarInfo(BaseModel):
    """Dados descritivos de um carro, indexados pelo ordinal do jogo."""

    model_config = ConfigDict(extra="forbid")

    ordinal: str = Field(..., min_length=1, description="Ordinal do carro no jogo.")
    manufacturer: str = ""
    model: str = ""
    year: str = ""
    country: str = ""
    designation: str = ""
    car_type: str = Field("", description="Categoria do carro.")
    drivetrain: str = Field("", description="Tração de fábrica.")
    setup: str = Field("", description="Disposição do motor.")
    engine: str = ""
    aspiration: str = ""
    litreage: str = ""
    value: str = Field("", description="Preço do carro.")

    @property
    def full_name(self) -> str:
        return f"{self.manufacturer} {self.model}"
