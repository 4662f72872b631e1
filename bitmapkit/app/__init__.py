from .cli import main
from .menu import ImageMenu

__all__ = ["ImageMenu", "main"]
