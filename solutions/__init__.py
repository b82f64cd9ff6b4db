"""
solutions - Проверка найденных решений.
"""

from .verify import verify_path, reachable_in_one_step, layout_is_legal

__all__ = [
    'verify_path',
    'reachable_in_one_step',
    'layout_is_legal',
]
