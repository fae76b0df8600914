"""
Módulo de configuração centralizada.

Carrega configurações do arquivo config.yaml na raiz do projeto.
"""

import yaml
from pathlib import Path
from typing import Any, Dict

from src.models.course import CourseLayout


class Config:
    """Classe para carregar e acessar configurações do projeto."""

    _instance = None
    _config = None

    def __new__(cls):
        """Singleton para garantir uma única instância de configuração."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Inicializa e carrega as configurações."""
        if self._config is None:
            self._load_config()

    def _load_config(self):
        """Carrega o arquivo config.yaml."""
        # Caminho para config.yaml (3 níveis acima: utils -> src -> raiz)
        config_path = Path(__file__).parent.parent.parent / "config.yaml"

        if not config_path.exists():
            raise FileNotFoundError(
                f"Arquivo de configuração não encontrado: {config_path}"
            )

        with open(config_path, "r", encoding="utf-8") as f:
            self._config = yaml.safe_load(f) or {}

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Obtém um valor de configuração usando notação de pontos.

        Args:
            key_path: Caminho da chave usando pontos (ex: 'course.track_length')
            default: Valor padrão se a chave não existir

        Returns:
            Valor da configuração ou default

        Exemplo:
            >>> config = Config()
            >>> config.get('course.track_length')
            5951
        """
        keys = key_path.split(".")
        value = self._config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    @property
    def course_config(self) -> Dict[str, Any]:
        """Retorna configurações do circuito."""
        return self._config.get("course", {})

    def get_log_file(self) -> str:
        """Retorna caminho padrão do log CSV."""
        return self.get("telemetry.log_file", "log.csv")

    # Getters específicos para intervalos de velocidade
    def get_threshold_margin(self) -> float:
        """Retorna margem (mph) aplicada aos limiares de velocidade."""
        return self.get("analysis.intervals.threshold_margin", 0.1)

    def get_failure_placeholder(self) -> str:
        """Retorna texto usado quando um intervalo não pôde ser calculado."""
        return self.get("analysis.intervals.failure_placeholder", "Failed!")

    # Getters específicos para setores
    def get_unknown_sector_placeholder(self) -> str:
        """Retorna texto usado quando um setor não tem cruzamento conhecido."""
        return self.get("analysis.sectors.unknown_placeholder", "--:--:--.---")

    def get_course_layout(self) -> CourseLayout:
        """
        Retorna o layout do circuito configurado, validado pelo Pydantic.

        Returns:
            CourseLayout construído a partir da seção 'course' do config.yaml
        """
        return CourseLayout.model_validate(self.course_config)

    def __getitem__(self, key: str) -> Any:
        """Permite acesso via colchetes."""
        return self.get(key)

    def __repr__(self) -> str:
        """Representação em string da configuração."""
        return f"Config(loaded_keys={list(self._config.keys())})"


# Instância global de configuração
config = Config()


def get_config() -> Config:
    """
    Função auxiliar para obter a instância de configuração.

    Returns:
        Instância singleton de Config

    Exemplo:
        >>> from src.utils.config import get_config
        >>> cfg = get_config()
        >>> print(cfg.get('course.name'))
        La Selva Circuit
    """
    return config
