"""Conversions between scroll offsets and scrollbar thumb geometry."""

from __future__ import annotations


def thumb_dim(content_dim: float, outer_dim: float) -> float:
    """Length of the thumb for content of ``content_dim`` in a view of ``outer_dim``."""
    return outer_dim * outer_dim / content_dim


def thumb_offset(content_dim: float, outer_dim: float, scroll_offset: float) -> float:
    """Thumb position for a given scroll offset."""
    return scroll_offset * outer_dim / content_dim


def thumb_dim_offset(
    content_dim: float, outer_dim: float, scroll_offset: float
) -> tuple[float, float]:
    """Thumb length and thumb position, as a pair."""
    scale = outer_dim / content_dim
    return outer_dim * scale, scroll_offset * scale


def scroll_offset(content_dim: float, outer_dim: float, thumb_offset: float) -> float:
    """Scroll offset for a given thumb position."""
    return thumb_offset * content_dim / outer_dim


def max_scroll_offset(content_dim: float, outer_dim: float) -> float:
    """Largest scroll offset that still keeps the view filled."""
    return content_dim - outer_dim


def max_thumb_offset(content_dim: float, outer_dim: float) -> float:
    """Largest thumb position."""
    return (content_dim - outer_dim) * outer_dim / content_dim