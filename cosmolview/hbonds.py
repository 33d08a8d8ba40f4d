"""Backbone hydrogen placement and DSSP-style hydrogen-bond detection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

import numpy as np

from .structures import AminoAcid, Residue

NH_BOND_LENGTH = 1.01
HBOND_CUTOFF = -0.5

_Q1 = 0.42
_Q2 = 0.20
_F = 332.0
_NEIGHBOUR_RADIUS_SQ = 400.0
_MAX_CN_SQ = 49.0


@dataclass(frozen=True)
class HydrogenBond:
    """A backbone hydrogen bond between an N-H donor and a C=O acceptor."""

    donor_idx: int
    acceptor_idx: int
    energy: float


def imide_hydrogen(current: Residue, previous: Residue) -> np.ndarray:
    """Place the amide hydrogen of ``current`` from its own N/CA and the previous C/O."""
    n = current.n
    direction = (current.ca - n) + (previous.c - n) + (previous.o - previous.c)
    return (n - direction * np.float32(NH_BOND_LENGTH)).astype(np.float32)


def add_imide_hydrogens(residues: Sequence[Residue]) -> list[Residue]:
    """Return copies of the residues with missing amide hydrogens filled in.

    The first residue has no predecessor and keeps whatever hydrogen it had.
    """
    result = [replace(residue) for residue in residues]
    for previous, current in zip(result, result[1:]):
        if current.h is None:
            current.h = imide_hydrogen(current, previous)
    return result


def hbond_energy(c, o, n, h) -> float:
    """Electrostatic hydrogen-bond energy (kcal/mol) of C=O ... H-N."""
    c, o, n, h = (np.asarray(p, dtype=np.float64) for p in (c, o, n, h))
    with np.errstate(divide="ignore", invalid="ignore"):
        value = (
            _Q1
            * _Q2
            * (
                1.0 / np.linalg.norm(o - n)
                + 1.0 / np.linalg.norm(c - h)
                - 1.0 / np.linalg.norm(o - h)
                - 1.0 / np.linalg.norm(c - n)
            )
            * _F
        )
    return float(value)


def _distances(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    diff = a[:, None, :] - b[None, :, :]
    return np.sqrt(np.einsum("ijk,ijk->ij", diff, diff))


def _sq_distances(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    diff = a[:, None, :] - b[None, :, :]
    return np.einsum("ijk,ijk->ij", diff, diff)


def find_hydrogen_bonds(residues: Sequence[Residue], cutoff: float = HBOND_CUTOFF) -> np.ndarray:
    """Boolean matrix of backbone hydrogen bonds.

    ``matrix[d, a]`` is true when the N-H of residue ``d`` bonds to the C=O of
    residue ``a``. Residues must already carry their amide hydrogens; prolines
    and residues without a hydrogen never donate. Neighbouring residues are
    never considered.
    """
    count = len(residues)
    matrix = np.zeros((count, count), dtype=bool)
    if count == 0:
        return matrix

    n = np.array([r.n for r in residues], dtype=np.float64)
    c = np.array([r.c for r in residues], dtype=np.float64)
    o = np.array([r.o for r in residues], dtype=np.float64)
    h = np.array(
        [r.h if r.h is not None else (np.nan, np.nan, np.nan) for r in residues],
        dtype=np.float64,
    )
    donor = np.array(
        [r.h is not None and r.residue_type is not AminoAcid.PRO for r in residues],
        dtype=bool,
    )

    index = np.arange(count)
    candidate = (
        (index[None, :] >= index[:, None] + 2)
        & (_sq_distances(n, n) <= _NEIGHBOUR_RADIUS_SQ)
        & (_sq_distances(c, n) <= _MAX_CN_SQ)
    )

    # energy[i, j]: C=O of residue i against N-H of residue j
    with np.errstate(divide="ignore", invalid="ignore"):
        energy = (
            _Q1
            * _Q2
            * _F
            * (
                1.0 / _distances(o, n)
                + 1.0 / _distances(c, h)
                - 1.0 / _distances(o, h)
                - 1.0 / _distances(c, n)
            )
        )
        bonded = energy < cutoff

    forward = candidate & donor[None, :] & bonded
    backward = candidate & donor[:, None] & bonded.T
    matrix |= forward.T
    matrix |= backward
    return matrix