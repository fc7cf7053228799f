"""
State Vector Layout
===================
Index layout of the integer state vector shared by all model templates
"""

from enum import IntEnum

import numpy as np


class Compartment(IntEnum):
    """Positions in the state vector"""
    S = 0
    I = 1
    R = 2
    N = 3
    CASES = 4


STATE_SIZE = len(Compartment)

# Column names used in trajectories
COLUMN_NAMES = {
    Compartment.S: 'S',
    Compartment.I: 'I',
    Compartment.R: 'R',
    Compartment.N: 'N',
    Compartment.CASES: 'cases',
}


def empty_state() -> np.ndarray:
    """All-zero state vector"""
    return np.zeros(STATE_SIZE, dtype=np.int64)


def make_delta(**changes: int) -> tuple:
    """
    Build an immutable state-delta vector from named changes

    Names are the column names (S, I, R, N, cases); unnamed entries are 0.
    """
    by_name = {name: comp for comp, name in COLUMN_NAMES.items()}
    delta = [0] * STATE_SIZE
    for name, change in changes.items():
        delta[by_name[name]] = int(change)
    return tuple(delta)
