"""Board - host canvas for plot elements.

A Board maps user coordinates to a pixel canvas, keeps the attribute
defaults for each element type, builds elements through its registry
and recomputes them on update().

Usage:
    board = Board(bounding_box=(-8, 8, 8, -8), width=500, height=500)
    field = board.create('vectorfield', [
        [lambda x, y: math.sin(y), lambda x, y: math.cos(x)],
        [-6, 25, 6],
        [-5, 20, 5],
    ], {'arrowhead': {'enabled': True, 'size': 8}})
    board.update()
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .core.config import get_settings
from .core.errors import InvalidBoardError
from .core.logging import get_logger
from .options import CurveOptions, default_options
from .registry import ElementRegistry, default_registry

logger = get_logger(__name__)

BoundingBox = Tuple[float, float, float, float]


class Board:
    """
    Canvas holding plot elements.

    Attributes:
        width, height: Canvas size in pixels
        bounding_box: Visible area as (x_min, y_max, x_max, y_min)
        options: Per-element-type attribute defaults
        registry: Element factories used by create()
        objects: Elements in creation order
    """

    def __init__(
        self,
        bounding_box: Sequence[float] = (-5, 5, 5, -5),
        width: Optional[int] = None,
        height: Optional[int] = None,
        registry: Optional[ElementRegistry] = None,
        options: Optional[Dict[str, CurveOptions]] = None,
    ):
        settings = get_settings()
        self.width = settings.BOARD_WIDTH if width is None else width
        self.height = settings.BOARD_HEIGHT if height is None else height
        if self.width <= 0 or self.height <= 0:
            raise InvalidBoardError(
                f"Board size must be positive, got {self.width}x{self.height}", field="size"
            )

        self.registry = registry if registry is not None else default_registry()
        self.options = options if options is not None else default_options()
        self.objects: List[Any] = []

        self.bounding_box: BoundingBox = (-5.0, 5.0, 5.0, -5.0)
        self.unit_x = 1.0
        self.unit_y = 1.0
        self.set_bounding_box(bounding_box)

    def set_bounding_box(self, bounding_box: Sequence[float]) -> 'Board':
        """
        Set the visible area and recompute the pixel units.

        Args:
            bounding_box: (x_min, y_max, x_max, y_min) in user coordinates

        Returns:
            The board, for chaining (call update() to recompute elements)
        """
        if len(bounding_box) != 4:
            raise InvalidBoardError(
                f"Bounding box needs 4 values, got {len(bounding_box)}", field="bounding_box"
            )
        x_min, y_max, x_max, y_min = (float(v) for v in bounding_box)
        if not (x_max > x_min and y_max > y_min):
            raise InvalidBoardError(
                f"Degenerate bounding box {tuple(bounding_box)}", field="bounding_box"
            )

        self.bounding_box = (x_min, y_max, x_max, y_min)
        # Pixels per user unit
        self.unit_x = self.width / (x_max - x_min)
        self.unit_y = self.height / (y_max - y_min)
        return self

    def create(
        self,
        element_type: str,
        parents: Sequence[Any],
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Build an element, compute it once and add it to the board.

        Args:
            element_type: Registered type name (e.g. 'vectorfield')
            parents: Positional element parameters
            attributes: Visual attributes merged over the type's defaults

        Returns:
            The new element

        Raises:
            UnknownElementTypeError: If element_type is not registered
            Exception: Whatever the factory or the first update raises; the
                board is left unchanged
        """
        factory = self.registry.get(element_type)
        element = factory(self, list(parents), attributes)
        # Only elements that computed once are kept
        element.update()
        self.add_object(element)
        logger.debug("Created %s element (%d on board)", element.elem_type, len(self.objects))
        return element

    def add_object(self, element: Any) -> Any:
        if element not in self.objects:
            self.objects.append(element)
        return element

    def remove_object(self, element: Any) -> 'Board':
        """Remove an element; unknown elements are ignored."""
        if element in self.objects:
            self.objects.remove(element)
        return self

    def update(self) -> 'Board':
        """Recompute every element in creation order."""
        for element in self.objects:
            element.update()
        return self

    def __repr__(self) -> str:
        x_min, y_max, x_max, y_min = self.bounding_box
        return (f"Board({self.width}x{self.height}, bounds=[{x_min},{y_max},{x_max},{y_min}], "
                f"objects={len(self.objects)})")


__all__ = ['Board', 'BoundingBox']
