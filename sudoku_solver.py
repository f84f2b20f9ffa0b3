"""
数独求解器 (Sudoku Solver)
按格子顺序回溯求解 9x9 数独，原地修改棋盘
"""

from __future__ import annotations

from typing import List, Set

from loguru import logger

from sudoku_grid import (
    CELL_COUNT,
    COORDINATES,
    SIZE,
    Grid,
    SudokuError,
    check_cell_value,
    coordinates,
)

# 依次尝试的数字，0 表示候选已用尽
CANDIDATES = (9, 8, 7, 6, 5, 4, 3, 2, 1, 0)
DIGIT_SUM = sum(range(1, SIZE + 1))


class SolveError(SudokuError, RuntimeError):
    """无法得到合法且填满的棋盘。"""


def check_space(grid: Grid, index: int) -> bool:
    """
    检查指定格子所在的行、列、宫是否存在重复数字

    扫描整个棋盘，空格（0）忽略不计，目标格子自身的值也参与检查。

    Args:
        grid: 当前棋盘
        index: 要检查的格子下标 (0-80)

    Returns:
        bool: 行、列、宫均无重复返回True，否则返回False
    """
    ptr_row, ptr_col, ptr_box = coordinates(index)

    row_seen: Set[int] = set()
    col_seen: Set[int] = set()
    box_seen: Set[int] = set()

    for i, value in enumerate(grid):
        if value == 0:
            continue

        row, col, box = COORDINATES[i]

        if row == ptr_row:
            if value in row_seen:
                return False
            row_seen.add(value)

        if col == ptr_col:
            if value in col_seen:
                return False
            col_seen.add(value)

        if box == ptr_box:
            if value in box_seen:
                return False
            box_seen.add(value)

    # 填满的行/列之和必须为 45
    if len(row_seen) == SIZE and sum(row_seen) != DIGIT_SUM:
        return False

    if len(col_seen) == SIZE and sum(col_seen) != DIGIT_SUM:
        return False

    return True


def is_valid(grid: Grid) -> bool:
    """所有格子非零且每个位置都通过 check_space。"""

    for index in range(CELL_COUNT):
        if grid[index] == 0:
            return False
        if not check_space(grid, index):
            return False
    return True


class SudokuSolver:
    """数独求解器类"""

    def __init__(self, grid: Grid) -> None:
        """
        初始化数独求解器

        Args:
            grid: 待求解的棋盘，求解过程中会被原地修改
        """
        self.grid = grid
        self.placements = 0
        self.backtracks = 0

    def solve(self) -> None:
        """
        使用回溯算法解决数独

        Raises:
            CellValueError: 棋盘中有不在 0-9 之间的值
            SolveError: 题目中的已知数字互相冲突，或搜索结束后棋盘仍不合法
        """
        if is_valid(self.grid):
            logger.debug("Board already solved, skipping search")
            return

        self._check_clues()

        logger.debug("Starting backtracking search")
        self._solve_from(0)

        if not is_valid(self.grid):
            logger.debug(
                "Search exhausted after {} placement(s), {} backtrack(s)",
                self.placements,
                self.backtracks,
            )
            raise SolveError("failed to solve board")

        logger.debug(
            "Solved board with {} placement(s), {} backtrack(s)",
            self.placements,
            self.backtracks,
        )

    def get_solution(self) -> List[List[int]]:
        """
        获取解决方案

        Returns:
            list: 9x9 的嵌套列表
        """
        return self.grid.to_rows()

    def _check_clues(self) -> None:
        """
        搜索前检查题目给出的数字

        Raises:
            CellValueError: 某个格子的值不是 0-9 的整数
            SolveError: 已知数字在行、列或宫内互相冲突
        """
        for index, value in enumerate(self.grid):
            check_cell_value(value, index)

        for index, value in enumerate(self.grid):
            if value == 0 or check_space(self.grid, index):
                continue
            row, col, _ = coordinates(index)
            logger.debug("Clue {} at r{}c{} conflicts with its peers", value, row + 1, col + 1)
            raise SolveError(
                f"failed to solve board: clue {value} at row {row + 1}, "
                f"column {col + 1} conflicts with another clue"
            )

    def _solve_from(self, ptr: int) -> bool:
        """
        从第 ptr 个格子开始递归求解

        Returns:
            bool: 后续格子全部填好返回True；当前格子候选用尽返回False
        """
        if ptr >= CELL_COUNT:
            return True

        # 已有数字且合法，不改动
        if self.grid[ptr] != 0 and check_space(self.grid, ptr):
            return self._solve_from(ptr + 1)

        for candidate in CANDIDATES:
            self.grid[ptr] = candidate

            if candidate == 0:
                self.backtracks += 1
                return False

            self.placements += 1
            if not check_space(self.grid, ptr):
                continue

            if self._solve_from(ptr + 1):
                return True

        return False


def solve(grid: Grid) -> None:
    """原地求解棋盘，失败时抛出 SolveError。"""
    SudokuSolver(grid).solve()


def create_example_board() -> List[List[int]]:
    """
    创建一个示例数独题目

    Returns:
        list: 9x9的数独棋盘
    """
    return [
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ]


__all__ = [
    "CANDIDATES",
    "SolveError",
    "SudokuSolver",
    "check_space",
    "create_example_board",
    "is_valid",
    "solve",
]
