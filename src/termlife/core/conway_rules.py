"""
Pure Conway's Game of Life Rules Implementation

This module provides the B3/S23 transition rule used by the board engine.
Only the standard rule is supported - there are no alternative rule sets.
"""

from typing import FrozenSet


# Standard Conway rules - unmodified
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        # Survival rule
        return live_neighbors in SURVIVAL_SET
    else:
        # Birth rule
        return live_neighbors in BIRTH_SET


def neighborhood_sum_rule(alive: bool, block_sum: int) -> bool:
    """Apply Conway's rules using the 3x3 block sum (center included).

    A block sum of 3 means either a dead cell with 3 neighbors (birth) or a
    live cell with 2 neighbors (survival). A block sum of 4 keeps a live cell
    with 3 neighbors alive but leaves a dead cell with 4 neighbors dead.

    Args:
        alive: Current cell state
        block_sum: Live cells in the 3x3 block around and including the cell (0-9)

    Returns:
        Next cell state
    """
    if block_sum == 3:
        return True
    if block_sum == 4:
        return bool(alive)
    return False
