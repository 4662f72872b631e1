from .geometry import enlarge, rotate, rotate_90
from .palette import high_contrast, posterize
from .registry import DEFAULT_FILTERS, FilterDefinition, FilterRegistry, ParameterSpec
from .tone import clarendon, darken, grayscale, lighten, vignette

__all__ = [
    "DEFAULT_FILTERS",
    "FilterDefinition",
    "FilterRegistry",
    "ParameterSpec",
    "clarendon",
    "darken",
    "enlarge",
    "grayscale",
    "high_contrast",
    "lighten",
    "posterize",
    "rotate",
    "rotate_90",
    "vignette",
]
