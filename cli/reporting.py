"""
Módulo de reporting para formatação das saídas da CLI.

Fornece a classe Reporter para impressão formatada e consistente dos
resultados da análise.
"""

import sys


class Reporter:
    """Classe para formatação consistente de mensagens da CLI."""

    def __init__(self, title: str):
        """
        Inicializa o reporter.

        Args:
            title: Título da análise (ex: "FORZA STAT BUILDER")
        """
        self.title = title

    def header(self, subtitle: str | None = None):
        """Imprime cabeçalho da análise."""
        print("\n" + "=" * 80)
        print(f"🏎️  {self.title}")
        if subtitle:
            print(f"📂 {subtitle}")
        print("=" * 80)

    def info(self, message: str, indent: int = 1):
        """
        Imprime mensagem informativa.

        Args:
            message: Mensagem a ser impressa
            indent: Nível de indentação (número de espaços triplos)
        """
        prefix = "   " * indent
        print(f"{prefix}📊 {message}")

    def success(self, message: str, indent: int = 1):
        """Imprime mensagem de sucesso."""
        prefix = "   " * indent
        print(f"{prefix}✅ {message}")

    def failure(self, message: str):
        """Imprime diagnóstico de erro na saída de erro."""
        print(f"❌ {message}", file=sys.stderr)

    def metric(self, label: str, value, indent: int = 2):
        """
        Imprime métrica (label: valor).

        Args:
            label: Nome da métrica
            value: Valor da métrica
            indent: Nível de indentação
        """
        prefix = "   " * indent
        print(f"{prefix}• {label}: {value}")

    def divider(self):
        """Imprime linha divisória."""
        print("-" * 80)
