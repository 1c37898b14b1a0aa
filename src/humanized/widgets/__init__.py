"""Textual widgets for displaying relative times."""
from .relative_time_label import RelativeTimeLabel

__all__ = ["RelativeTimeLabel"]
