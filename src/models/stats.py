"""
Modelos Pydantic das estatísticas calculadas a partir do log de telemetria.

StatLine  → linha de estatísticas do carro (potência, torque, intervalos, velocidade)
RaceStats → melhor volta, velocidade máxima na pista e tempos de setor

Cada modelo sabe se converter no vetor de strings gravado na planilha
(`to_row`), com a precisão fixa de cada campo.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.utils.formatting import format_lap_time, format_number, format_sector_time


class IntervalResult(BaseModel):
    """Resultado de um intervalo de velocidade (ex: 0-60 mph)."""

    model_config = ConfigDict(extra="forbid")

    start_speed: float = Field(..., ge=0, description="Velocidade inicial em mph.")
    end_speed: float = Field(..., ge=0, description="Velocidade final em mph.")
    seconds: float | None = Field(None, ge=0, description="Duração em segundos (None se falhou).")
    error: str | None = Field(None, description="Motivo da falha, quando houver.")

    @property
    def label(self) -> str:
        return f"{self.start_speed:g}-{self.end_speed:g}"

    @property
    def failed(self) -> bool:
        return self.seconds is None

    def render(self, placeholder: str = "Failed!") -> str:
        """Duração com 3 casas, ou o placeholder se o intervalo falhou."""
        if self.seconds is None:
            return placeholder
        return format_number(self.seconds, 3)


class StatLine(BaseModel):
    """
    Estatísticas gerais do carro extraídas de um teste de aceleração e frenagem.

    A ordem do vetor de saída é fixa:
    [PI, tração, hp, torque, 0-60, 0-100, intervalo da classe 1,
     intervalo da classe 2, 60-0, 100-0, velocidade máxima, boost máximo]
    """

    model_config = ConfigDict(extra="forbid")

    performance_index: str = Field(..., description="Índice de performance (PI) do carro.")
    car_class: str = Field(..., description="Código da classe de performance (0=D ... 7=X).")
    drivetrain: str = Field(..., description="Tração: 'FWD', 'RWD', 'AWD' ou vazio se desconhecida.")
    peak_hp: float = Field(..., description="Potência máxima em hp.")
    peak_torque: float = Field(..., description="Torque máximo em ft·lb.")
    peak_boost: float = Field(..., description="Pressão máxima do turbo.")
    top_speed: float = Field(..., description="Velocidade máxima em mph.")
    average_speed: float = Field(..., description="Velocidade média em mph.")
    acceleration: list[IntervalResult] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="0-60, 0-100 e os dois intervalos da classe do carro.",
    )
    braking: list[IntervalResult] = Field(
        ...,
        min_length=2,
        max_length=2,
        description="60-0 e 100-0.",
    )

    def to_row(self, placeholder: str = "Failed!") -> list[str]:
        """Vetor de strings na ordem fixa da planilha."""
        return [
            self.performance_index,
            self.drivetrain,
            format_number(self.peak_hp, 0),
            format_number(self.peak_torque, 0),
            *(interval.render(placeholder) for interval in self.acceleration),
            *(interval.render(placeholder) for interval in self.braking),
            format_number(self.top_speed, 2),
            format_number(self.peak_boost, 1),
        ]


class SectorSplits(BaseModel):
    """Tempos dos quatro setores da melhor volta (None = cruzamento desconhecido)."""

    model_config = ConfigDict(extra="forbid")

    lap_number: int | None = Field(None, description="Volta de onde os tempos foram tirados.")
    times: list[float | None] = Field(
        default_factory=lambda: [None, None, None, None],
        min_length=4,
        max_length=4,
        description="Duração dos setores 1-4 em segundos.",
    )

    @property
    def total(self) -> float | None:
        """Soma dos setores, se todos forem conhecidos."""
        if any(t is None for t in self.times):
            return None
        return sum(self.times)

    def render(self, placeholder: str = "--:--:--.---") -> list[str]:
        return [
            placeholder if t is None else format_sector_time(t)
            for t in self.times
        ]


class RaceStats(BaseModel):
    """Estatísticas de corrida: melhor volta, velocidade máxima e setores."""

    model_config = ConfigDict(extra="forbid")

    best_lap: float = Field(..., description="Melhor volta em segundos.")
    top_speed: float = Field(..., description="Velocidade máxima na pista em mph.")
    sectors: SectorSplits

    def to_row(self, placeholder: str = "--:--:--.---") -> list:
        """Tripla [melhor volta, velocidade máxima, [setor 1..4]]."""
        return [
            format_lap_time(self.best_lap),
            format_number(self.top_speed, 2),
            self.sectors.render(placeholder),
        ]
