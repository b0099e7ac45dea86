# src/cli/catalogue_view.py

"""
Catalogue View CLI

패턴 카탈로그를 Rich 테이블 / 패널로 표시
"""

from typing import List, Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from src.core.models import PatternInfo

console = Console()


class CatalogueView:
    """Pattern Catalogue CLI Interface"""

    def __init__(self, target_console: Optional[Console] = None):
        self.console = target_console or console

    def display_catalogue(self, patterns: List[PatternInfo]) -> Table:
        """
        전체 패턴 목록을 테이블로 표시

        Args:
            patterns: 표시할 PatternInfo 목록

        Returns:
            출력한 Table
        """
        table = Table(
            title=f"📚 Design Pattern Catalogue ({len(patterns)} total)",
            box=box.ROUNDED,
            border_style="cyan"
        )
        table.add_column("Key", style="bold green", no_wrap=True)
        table.add_column("Pattern", style="bold")
        table.add_column("분류", justify="center")
        table.add_column("요약", style="dim")

        for info in patterns:
            table.add_row(
                info.key,
                f"{info.name} ({info.korean_name})",
                str(info.category),
                info.summary
            )

        self.console.print(table)
        return table

    def display_pattern(self, info: PatternInfo) -> Panel:
        """
        패턴 하나의 장점 / 단점 / 구성 요소를 패널로 표시

        Args:
            info: 표시할 패턴

        Returns:
            출력한 Panel
        """
        sections = [f"[bold]{info.summary}[/bold]"]

        if info.pros:
            sections.append(
                "[bold green]장점[/bold green]\n"
                + "\n".join(f"  • {item}" for item in info.pros)
            )
        if info.cons:
            sections.append(
                "[bold red]단점[/bold red]\n"
                + "\n".join(f"  • {item}" for item in info.cons)
            )
        if info.participants:
            sections.append(
                "[bold yellow]구성 요소[/bold yellow]\n"
                + "\n".join(f"  • {item}" for item in info.participants)
            )

        panel = Panel(
            "\n\n".join(sections),
            title=f"[bold cyan]{info.korean_name} ({info.name})[/bold cyan]",
            subtitle=str(info.category),
            border_style="blue",
            padding=(1, 2)
        )
        self.console.print(panel)
        return panel

    def display_banner(self, info: PatternInfo) -> None:
        """데모 실행 전 구분선"""
        self.console.rule(f"[bold magenta]{info.name}[/bold magenta] · {info.korean_name}")
