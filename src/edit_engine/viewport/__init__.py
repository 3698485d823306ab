"""Viewport reconciliation and render frames."""

from .frame import RenderFrame
from .viewport import (
    ScrollbarExtent,
    Viewport,
    reconcile,
    scrollbar_extent,
    visible_slice,
)

__all__ = [
    "RenderFrame",
    "ScrollbarExtent",
    "Viewport",
    "reconcile",
    "scrollbar_extent",
    "visible_slice",
]
