"""
Map Reference: Metadata served by /api/metadata.
Purpose: Parsed grid metadata (row lengths, offsets, steps, skipped cells).
Dependencies: dataclasses, typing.
Ext Hooks: Per-row vertical offsets.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def _int_keys(mapping):
    # JSON object keys are strings ("1", "2", ...)
    return {int(k): v for k, v in mapping.items()}


@dataclass(frozen=True)
class Metadata:
    """Grid placement data for the map image.

    ``row_length`` and ``left_offset`` are keyed by 1-based row number.
    ``special`` lists ``(row, column)`` pairs, column 1-based, naming the one
    cell to leave out of that row.
    """

    row_length: Dict[int, int] = field(default_factory=dict)
    left_offset: Dict[int, float] = field(default_factory=dict)
    bottom_offset: float = 0.0
    horizontal_step: float = 0.0
    vertical_step: float = 0.0
    flatten: float = 0.0
    special: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Metadata":
        """Build from the deserialized metadata document.

        Missing keys raise KeyError; nothing else is validated.
        """
        return cls(
            row_length=_int_keys(data['row-length']),
            left_offset=_int_keys(data['left-offset']),
            bottom_offset=data['bottom-offset'],
            horizontal_step=data['horizontal-step'],
            vertical_step=data['vertical-step'],
            flatten=data['flatten'],
            special=[(int(row), int(col)) for row, col in data['special']],
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            'row-length': {str(k): v for k, v in self.row_length.items()},
            'left-offset': {str(k): v for k, v in self.left_offset.items()},
            'bottom-offset': self.bottom_offset,
            'horizontal-step': self.horizontal_step,
            'vertical-step': self.vertical_step,
            'flatten': self.flatten,
            'special': [[row, col] for row, col in self.special],
        }
