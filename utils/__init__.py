"""
utils - Логирование и обработка ошибок

Экспортирует:
- get_logger / setup_file_logging
- Иерархию исключений SolverError
- Проверку расстановки перед поиском
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidConfigurationError, NoSolutionError, SearchCancelledError,
    validate_setup, safe_solve, require_solution
)

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidConfigurationError', 'NoSolutionError', 'SearchCancelledError',
    'validate_setup', 'safe_solve', 'require_solution'
]
