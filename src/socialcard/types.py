"""Type aliases used across the socialcard package."""

from typing import Literal, Tuple

# Box edges in pixels: top, right, bottom, left
Edges = Tuple[float, float, float, float]

# Font face options
FontStyle = Literal["normal", "italic"]

# Flexbox options
FlexDirection = Literal["row", "column"]
AlignItems = Literal["stretch", "flex-start", "center", "flex-end"]
JustifyContent = Literal["flex-start", "center", "flex-end", "space-between", "space-around"]
TextAlign = Literal["left", "center", "right"]
