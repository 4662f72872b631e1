from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from ..errors import InvalidParameter
from ..raster import Raster
from .geometry import enlarge, rotate, rotate_90
from .palette import high_contrast, posterize
from .tone import clarendon, darken, grayscale, lighten, vignette

Number = Union[int, float]

# Keeps 255 * factor finite for the filters that do not clamp
MAX_FACTOR = 1e6


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    kind: type
    prompt: str
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    hint: str = ""

    def parse(self, text: str) -> Number:
        """Convert user input to a value, raising ``InvalidParameter`` if it is rejected."""
        try:
            value = self.kind(text.strip())
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(f"{self.name} must be {self._kind_name()}, got {text!r}") from exc
        return self.check(value)

    def check(self, value: Number) -> Number:
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidParameter(f"{self.name} must be a finite number, got {value!r}")
        if self.minimum is not None and value < self.minimum:
            raise InvalidParameter(self.hint or f"{self.name} must be at least {self.minimum}")
        if self.maximum is not None and value > self.maximum:
            raise InvalidParameter(self.hint or f"{self.name} must be at most {self.maximum}")
        return value

    def _kind_name(self) -> str:
        return "an integer" if self.kind is int else "a number"


@dataclass(frozen=True)
class FilterDefinition:
    number: int
    name: str
    label: str
    apply: Callable[..., Raster]
    params: Tuple[ParameterSpec, ...] = field(default_factory=tuple)

    def run(self, raster: Raster, values: Optional[Mapping[str, Number]] = None) -> Raster:
        """Validate ``values`` against the parameter specs and apply the filter."""
        values = values or {}
        args = []
        for spec in self.params:
            if spec.name not in values:
                raise InvalidParameter(f"{self.label} requires --{spec.name.replace('_', '-')}")
            args.append(spec.check(values[spec.name]))
        return self.apply(raster, *args)


def _factor(
    hint: str = "", minimum: Optional[float] = -MAX_FACTOR, maximum: Optional[float] = MAX_FACTOR
) -> ParameterSpec:
    return ParameterSpec(
        "factor", float, "Please enter a scaling factor value: ", minimum=minimum, maximum=maximum, hint=hint
    )


DEFAULT_FILTERS: Tuple[FilterDefinition, ...] = (
    FilterDefinition(1, "vignette", "Vignette", vignette),
    FilterDefinition(2, "clarendon", "Clarendon", clarendon, (_factor(),)),
    FilterDefinition(3, "grayscale", "Grayscale", grayscale),
    FilterDefinition(4, "rotate-90", "Rotate 90 degrees", rotate_90),
    FilterDefinition(
        5,
        "rotate",
        "Rotate multiple 90 degrees",
        rotate,
        (
            ParameterSpec(
                "turns",
                int,
                "Please enter the number of 90 degree rotations you'd like applied: ",
                minimum=0,
                hint="Please enter positive number",
            ),
        ),
    ),
    FilterDefinition(
        6,
        "enlarge",
        "Enlarge",
        enlarge,
        (
            ParameterSpec("x_scale", int, "Please enter an X scale value: ", minimum=1,
                          hint="Please enter a positive number."),
            ParameterSpec("y_scale", int, "Please enter a Y scale value: ", minimum=1,
                          hint="Please enter a positive number."),
        ),
    ),
    FilterDefinition(7, "high-contrast", "High contrast", high_contrast),
    FilterDefinition(8, "lighten", "Lighten", lighten, (_factor(),)),
    FilterDefinition(
        9,
        "darken",
        "Darken",
        darken,
        (_factor("Please enter a value of at most 1.", minimum=None, maximum=1.0),),
    ),
    FilterDefinition(10, "posterize", "Black, white, red, green, blue", posterize),
)


class FilterRegistry:
    def __init__(self, filters: Tuple[FilterDefinition, ...] = DEFAULT_FILTERS) -> None:
        self._filters = list(filters)
        self._by_name: Dict[str, FilterDefinition] = {f.name: f for f in self._filters}

    @property
    def filters(self) -> List[FilterDefinition]:
        return list(self._filters)

    @property
    def names(self) -> List[str]:
        return [f.name for f in self._filters]

    def get(self, key: str) -> Optional[FilterDefinition]:
        """Look a filter up by name or by menu number."""
        key = key.strip().lower()
        if key.isdigit():
            number = int(key)
            for definition in self._filters:
                if definition.number == number:
                    return definition
            return None
        return self._by_name.get(key)
