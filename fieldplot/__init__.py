"""fieldplot - grid-sampled vector field plots for interactive boards.

Subpackages and modules:
- fieldplot.board: Board host (units, attribute defaults, create/update)
- fieldplot.elements: Curve and VectorField elements
- fieldplot.options: Attribute models and copy_attributes()
- fieldplot.registry: Element factory registry
- fieldplot.formula: Field component expressions (SymPy)
- fieldplot.core: Settings, logging and exceptions
"""

__version__ = "0.1.0"

from .board import Board
from .core.errors import (
    FieldPlotError,
    InvalidAttributeError,
    InvalidBoardError,
    InvalidExpressionError,
    InvalidMeshError,
    InvalidParametersError,
    UnknownElementTypeError,
)
from .elements import Curve, VectorField, create_curve, create_vector_field
from .options import ArrowHeadOptions, CurveOptions, VectorFieldOptions, copy_attributes
from .registry import ElementRegistry, default_registry
from .utils.type import evaluate

__all__ = [
    'Board',
    'Curve',
    'VectorField',
    'create_curve',
    'create_vector_field',
    'ArrowHeadOptions',
    'CurveOptions',
    'VectorFieldOptions',
    'copy_attributes',
    'ElementRegistry',
    'default_registry',
    'evaluate',
    'FieldPlotError',
    'InvalidAttributeError',
    'InvalidBoardError',
    'InvalidExpressionError',
    'InvalidMeshError',
    'InvalidParametersError',
    'UnknownElementTypeError',
]
