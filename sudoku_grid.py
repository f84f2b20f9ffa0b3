"""
数独棋盘 (Sudoku Grid)

81 个格子按行优先顺序存放的 9x9 棋盘，以及下标与行/列/宫之间的换算。
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

SIZE = 9
BOX = 3
CELL_COUNT = SIZE * SIZE


class SudokuError(Exception):
    """数独相关错误的基类。"""


class ShapeError(SudokuError, ValueError):
    """输入的格子数量不是 81 个。"""


class CellValueError(SudokuError, ValueError):
    """格子的值不是 0-9 之间的整数。"""


# 下标 -> (行, 列, 宫)，预先算好供检查器反复查表
COORDINATES: Tuple[Tuple[int, int, int], ...] = tuple(
    (index // SIZE, index % SIZE, (index // SIZE // BOX) * BOX + (index % SIZE) // BOX)
    for index in range(CELL_COUNT)
)


def check_cell_value(value: object, index: int) -> None:
    """格子的值必须是 0-9 的整数（bool 不算），否则抛出 CellValueError。"""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= SIZE:
        row, col, _ = COORDINATES[index]
        raise CellValueError(
            f"cell at row {row + 1}, column {col + 1} must be an integer 0..{SIZE}, got {value!r}"
        )


def coordinates(index: int) -> Tuple[int, int, int]:
    """
    计算线性下标对应的坐标

    Args:
        index: 0-80 的线性下标

    Returns:
        tuple: (row, col, box)，均在 0-8 之间
    """
    if not 0 <= index < CELL_COUNT:
        raise IndexError(f"cell index {index} out of range 0..{CELL_COUNT - 1}")
    return COORDINATES[index]


class Grid:
    """9x9 棋盘，0 表示空格"""

    def __init__(self, cells: Iterable[int]) -> None:
        self.cells: List[int] = list(cells)
        if len(self.cells) != CELL_COUNT:
            raise ShapeError(
                f"board must have {CELL_COUNT} cells (9x9), got {len(self.cells)}"
            )
        for index, value in enumerate(self.cells):
            check_cell_value(value, index)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """由 9 行、每行 9 个数字的嵌套列表构造棋盘。"""

        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ShapeError("board must be 9 rows of 9 cells")
        return cls(value for row in rows for value in row)

    def to_rows(self) -> List[List[int]]:
        return [self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def copy(self) -> "Grid":
        return Grid(self.cells)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __setitem__(self, index: int, value: int) -> None:
        self.cells[index] = value

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.cells!r})"


def new_grid(cells: Iterable[int]) -> Grid:
    """构造棋盘；格子数量不为 81 时抛出 ShapeError，值不合法时抛出 CellValueError。"""
    return Grid(cells)


__all__ = [
    "BOX",
    "CELL_COUNT",
    "CellValueError",
    "COORDINATES",
    "Grid",
    "ShapeError",
    "SIZE",
    "SudokuError",
    "check_cell_value",
    "coordinates",
    "new_grid",
]
