#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Styling System
==============
Style context and scaling rules shared by the renderers.

Contains:
- StyleContext: immutable inline formatting state
- Size limits and heading multipliers (half-points)
- Heading/body spacing baselines (twips) and their rescaling
- List indentation geometry (twips)

Units: Word measures font size in half-points (22 = 11pt) and spacing/indent
in twips (1440 twips = 1 inch).
"""

import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple


# ============================================================================
# SIZE LIMITS
# ============================================================================

MIN_FONT_SIZE = 2            # half-points
MAX_FONT_SIZE = 400          # half-points (~200pt)
REFERENCE_BODY_PT = 11.0     # body size the spacing baselines were tuned for
MIN_SPACING = 20             # twips (1pt)

HEADING_MULTIPLIERS = {
    1: 1.60,
    2: 1.45,
    3: 1.30,
    4: 1.15,
    5: 1.05,
}
DEFAULT_HEADING_MULTIPLIER = 1.00

# ============================================================================
# SPACING BASELINES (twips, before/after) at an 11pt body
# ============================================================================

HEADING_SPACING = {
    1: (360, 180),
    2: (320, 160),
    3: (300, 140),
}
DEFAULT_HEADING_SPACING = (240, 120)

BODY_SPACING = (0, 160)      # ~8pt after

# Depth used when a bold-led paragraph is promoted to a heading
PROMOTED_HEADING_DEPTH = 2

# ============================================================================
# LIST GEOMETRY (twips)
# ============================================================================

LIST_BASE_LEFT = 720         # 0.5"
LIST_LEVEL_INCREMENT = 360   # 0.25"
LIST_HANGING = 360           # room for the bullet/number

BULLET_MARKER = "•"


# ============================================================================
# STYLE CONTEXT
# ============================================================================

@dataclass(frozen=True)
class StyleContext:
    """
    Formatting state passed by value down the inline recursion.

    Forcing is monotone: once an ancestor forces bold or italic, no
    descendant can clear it. `size` of None means "exporter's body size".
    """
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    size: Optional[int] = None

    def force_bold(self) -> "StyleContext":
        return replace(self, bold=True)

    def force_italic(self) -> "StyleContext":
        return replace(self, italic=True)

    def with_monospace(self) -> "StyleContext":
        return replace(self, monospace=True)

    def with_size(self, size: Optional[int]) -> "StyleContext":
        return replace(self, size=size)


# ============================================================================
# SCALING FUNCTIONS
# ============================================================================

def round_half_up(value: float) -> int:
    """Round half away from zero (Python's round() is banker's rounding)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp_font_size(size: int) -> int:
    """Keep a half-point size within [MIN_FONT_SIZE, MAX_FONT_SIZE]."""
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))


def heading_font_size(body_size: int, depth: int) -> int:
    """
    Heading size in half-points for a body size in half-points.

    Depth 1 is largest; depth 6 and beyond equal the body size.
    """
    multiplier = HEADING_MULTIPLIERS.get(depth, DEFAULT_HEADING_MULTIPLIER)
    return clamp_font_size(round_half_up(body_size * multiplier))


def _spacing_ratio(body_size: int) -> float:
    return (body_size / 2.0) / REFERENCE_BODY_PT


def scale_spacing(value: int, body_size: int) -> int:
    """
    Rescale a baseline spacing value (twips) to the configured body size.

    Zero stays zero; anything else never drops below MIN_SPACING.
    """
    if value == 0:
        return 0
    return max(MIN_SPACING, round_half_up(value * _spacing_ratio(body_size)))


def heading_spacing(body_size: int, depth: int) -> Tuple[int, int]:
    """(before, after) spacing in twips for a heading depth."""
    before, after = HEADING_SPACING.get(depth, DEFAULT_HEADING_SPACING)
    return scale_spacing(before, body_size), scale_spacing(after, body_size)


def body_spacing(body_size: int) -> Tuple[int, int]:
    """(before, after) spacing in twips for body paragraphs."""
    before, after = BODY_SPACING
    return scale_spacing(before, body_size), scale_spacing(after, body_size)


def heading_metrics(body_size: int, depth: int) -> Tuple[int, int, int]:
    """(size, spacing_before, spacing_after) for a heading depth."""
    before, after = heading_spacing(body_size, depth)
    return heading_font_size(body_size, depth), before, after


def list_left_indent(depth: int) -> int:
    """Left indent in twips for a list nested `depth` levels deep (0 = top)."""
    return LIST_BASE_LEFT + depth * LIST_LEVEL_INCREMENT
