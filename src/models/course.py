"""
Modelo Pydantic do traçado de um circuito para a divisão de setores.

Os limites de setor são distâncias fixas dentro da volta, específicas de cada
circuito; a janela de detecção reflete a granularidade de amostragem do jogo.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CourseLayout(BaseModel):
    """Geometria de um circuito: comprimento e limites dos setores 1–3."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field("La Selva Circuit", description="Nome do circuito.")
    track_length: float = Field(5951.0, gt=0, description="Comprimento da volta em metros.")
    sector_boundaries: tuple[float, float, float] = Field(
        (1878.0, 3184.0, 4311.0),
        description="Distâncias (m) na volta onde terminam os setores 1, 2 e 3.",
    )
    window_width: float = Field(
        1.0,
        gt=0,
        description="Largura (m) da janela de detecção após cada limite.",
    )
    finish_offset: float = Field(
        0.0125,
        ge=0,
        description="Tempo (s) que o jogo adiciona ao cruzar a linha de chegada.",
    )
    interpolate_missed_boundaries: bool = Field(
        True,
        description="Interpolar o cruzamento quando nenhuma amostra cai na janela.",
    )

    @model_validator(mode="after")
    def check_boundaries(self) -> "CourseLayout":
        """Limites devem ser crescentes e dentro da volta."""
        boundaries = self.sector_boundaries
        if any(later <= earlier for earlier, later in zip(boundaries, boundaries[1:])):
            raise ValueError(f"Limites de setor devem ser crescentes: {boundaries}")
        if boundaries[0] <= 0 or boundaries[-1] + self.window_width >= self.track_length:
            raise ValueError(
                f"Limites de setor {boundaries} fora da volta de {self.track_length} m"
            )
        return self

    def window(self, sector: int) -> tuple[float, float]:
        """Janela (aberta) de detecção do fim do setor 1, 2 ou 3."""
        boundary = self.sector_boundaries[sector - 1]
        return boundary, boundary + self.window_width
