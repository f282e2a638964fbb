"""Built-in board elements."""

from .curve import Curve, create_curve
from .vectorfield import VectorField, create_vector_field

__all__ = ['Curve', 'create_curve', 'VectorField', 'create_vector_field']
