"""
huarong_io/parser.py

Парсинг текстового описания расстановки.
"""

import re
from typing import Dict, List, Optional, Tuple

from core.config import Configuration
from core.pieces import Piece, PieceType, assign_label, standard_pieces
from core.utils import pos_to_index

# Ключ в строке → тип фигуры (в порядке добавления на доску)
PIECE_KEYS = [
    ('G', PieceType.GENERAL),
    ('V', PieceType.COMMANDER_VERTICAL),
    ('H', PieceType.COMMANDER_HORIZONTAL),
    ('S', PieceType.SOLDIER),
]

FORMAT_HINT = "size=4x5 goal=B4 G=B1 V=A1,D1 H=B3 S=A5,D5"

TOKEN_RE = re.compile(r'(\w+)=(\S+)')
SIZE_RE = re.compile(r'(\d+)x(\d+)')
POSITIONS_RE = re.compile(r'[A-Za-z]\d+(?:,[A-Za-z]\d+)*')


def _split_tokens(text: str) -> Dict[str, str]:
    """Разбивает строку на пары ключ=значение; каждый ключ не больше одного раза."""
    known = {'size', 'goal'} | {key for key, _ in PIECE_KEYS}
    values: Dict[str, str] = {}
    for token in text.split():
        match = TOKEN_RE.fullmatch(token)
        if not match:
            raise ValueError(f"Не разобран фрагмент '{token}'. Ожидается: {FORMAT_HINT}")
        key, value = match.groups()
        if key not in known:
            raise ValueError(f"Неизвестный ключ '{key}'. Ожидается: {FORMAT_HINT}")
        if key in values:
            raise ValueError(f"Ключ '{key}' указан повторно")
        values[key] = value
    return values


def parse_layout(text: str, base_config: Optional[Configuration] = None) -> Tuple[List[Piece], Configuration]:
    """
    Парсит текстовый формат описания позиции.

    Формат: size=4x5 goal=B4 G=B1 V=A1,D1,A3,D3 H=B3 S=A5,B4,C4,D5
    Позиция — левый верхний угол фигуры (столбец буквой, строка с 1).
    size и goal необязательны. Неизвестный или повторный ключ,
    лишний текст и неверный разделитель позиций — ошибка.

    Args:
        text: строка с описанием
        base_config: конфигурация, из которой берутся остальные параметры

    Returns:
        (фигуры, конфигурация)

    Raises:
        ValueError: если строку не удалось разобрать
    """
    config = base_config or Configuration.standard()
    values = _split_tokens(text)

    if 'size' in values:
        size_match = SIZE_RE.fullmatch(values['size'])
        if not size_match:
            raise ValueError(f"Неверный размер '{values['size']}', ожидается NxM")
        config = config.with_options(columns=int(size_match.group(1)),
                                     rows=int(size_match.group(2)))

    if 'goal' in values:
        config = config.with_options(goal_position=pos_to_index(values['goal']))

    pieces: List[Piece] = []
    for key, piece_type in PIECE_KEYS:
        if key not in values:
            continue
        if not POSITIONS_RE.fullmatch(values[key]):
            raise ValueError(f"Неверный список позиций '{key}={values[key]}', ожидается A1,B2,...")
        for pos in values[key].split(','):
            label = assign_label(piece_type, pieces)
            pieces.append(Piece(label, piece_type, pos_to_index(pos)))

    if not pieces:
        raise ValueError(f"Неверный формат. Ожидается: {FORMAT_HINT}")

    return pieces, config


def create_standard_layout() -> Tuple[List[Piece], Configuration]:
    """Стандартная расстановка «横刀立马» и стандартные параметры."""
    return standard_pieces(), Configuration.standard()
