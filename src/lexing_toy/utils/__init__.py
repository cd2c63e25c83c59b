"""Shared helpers for lexing_toy."""

from lexing_toy.utils.logger import get_logger

__all__ = ["get_logger"]
