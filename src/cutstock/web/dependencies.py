"""FastAPI dependency injection for optimization commands."""

from typing import Annotated

from fastapi import Depends

from cutstock.application.commands import OptimizeBarsCommand, OptimizePanelsCommand


def get_bars_command() -> OptimizeBarsCommand:
    """Dependency for OptimizeBarsCommand."""
    return OptimizeBarsCommand()


def get_panels_command() -> OptimizePanelsCommand:
    """Dependency for OptimizePanelsCommand."""
    return OptimizePanelsCommand()


# Type aliases for cleaner endpoint signatures
BarsCommandDep = Annotated[OptimizeBarsCommand, Depends(get_bars_command)]
PanelsCommandDep = Annotated[OptimizePanelsCommand, Depends(get_panels_command)]
