"""springplot — coil ("spring") layers for styled matplotlib charts."""

from .charts import figure, save, spring
from .errors import InvalidParameter, MissingAesthetic, SpringplotError
from .layer import HandlerSpring, SpringLayer
from .paths import stroke_paths
from .scale import rescale_tension
from .spring import generate_spring, spring_point_count
from .stat import spring_paths, split_groups
from .theme import COLORS, COLOR_CYCLE, LAYOUT, SPRING

__all__ = [
    "figure",
    "save",
    "spring",
    "generate_spring",
    "spring_point_count",
    "spring_paths",
    "split_groups",
    "rescale_tension",
    "stroke_paths",
    "SpringLayer",
    "HandlerSpring",
    "InvalidParameter",
    "MissingAesthetic",
    "SpringplotError",
    "COLORS",
    "COLOR_CYCLE",
    "LAYOUT",
    "SPRING",
]
