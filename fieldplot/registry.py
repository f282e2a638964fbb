"""
Element factory registry.

Maps element type names to factory functions with the signature
``factory(board, parents, attributes) -> element``. Each Board owns its
own registry; there is no process-wide table to mutate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .core.errors import UnknownElementTypeError

if TYPE_CHECKING:
    from .board import Board

ElementFactory = Callable[['Board', Sequence[Any], Optional[Mapping[str, Any]]], Any]


class ElementRegistry(BaseModel):
    """
    Registry for element factories.

    Provides name-based dispatch for Board.create(). Names are
    case-insensitive.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _factories: Dict[str, ElementFactory] = PrivateAttr(default_factory=dict)

    def register(self, element_type: str, factory: ElementFactory) -> None:
        """
        Register a factory for an element type.

        Args:
            element_type: Type name (e.g. "vectorfield")
            factory: Callable building the element

        Raises:
            TypeError: If factory is not callable
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {factory!r}")
        self._factories[element_type.lower()] = factory

    def get(self, element_type: str) -> ElementFactory:
        """
        Look up the factory for an element type.

        Raises:
            UnknownElementTypeError: If the type is not registered
        """
        try:
            return self._factories[element_type.lower()]
        except KeyError:
            raise UnknownElementTypeError(element_type) from None

    def names(self) -> List[str]:
        """Registered element types in registration order."""
        return list(self._factories.keys())

    def __contains__(self, element_type: object) -> bool:
        return isinstance(element_type, str) and element_type.lower() in self._factories


def default_registry() -> ElementRegistry:
    """Create a registry holding the built-in element types."""
    from .elements.curve import create_curve
    from .elements.vectorfield import create_vector_field

    registry = ElementRegistry()
    registry.register('curve', create_curve)
    registry.register('vectorfield', create_vector_field)
    return registry
