from .components import ComponentType, PortfolioDocument, build_component, parse_components
from .controller import BuilderController
from .store import BuilderError, ComponentStore

__all__ = [
    "ComponentType",
    "PortfolioDocument",
    "build_component",
    "parse_components",
    "BuilderController",
    "BuilderError",
    "ComponentStore",
]
