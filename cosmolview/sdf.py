"""Reader for SDF / MDL molfile text, V2000 and V3000."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .structures import (
    AtomGeneric,
    BondGeneric,
    BondType,
    ChainGeneric,
    Element,
    ParseError,
    PharmacophoreFeatures,
    ResidueEnd,
    ResidueGeneric,
    ResidueKind,
    ResidueType,
)


def _fixed(line: str, start: int, end: int) -> str:
    return line[start:end] if len(line) >= end else ""


def _uint(text: str, message: str) -> int:
    value = text.strip()
    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(message)
    return int(digits)


def _float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParseError(f"Invalid number: {text}") from None


def _element(symbol: str) -> Element:
    try:
        return Element.from_letter(symbol)
    except ParseError:
        return Element.OTHER


def _bond_type(token: str) -> BondType:
    try:
        return BondType.parse(token)
    except ParseError:
        return BondType.UNKNOWN


def _block(lines: list[str], start: int, count: int, what: str) -> list[str]:
    block = lines[start : start + count]
    if len(block) < count:
        raise ParseError(f"{what} block is truncated")
    return block


def _parse_v2000(lines: list[str], counts_line: str):
    n_atoms = _uint(_fixed(counts_line, 0, 3), "Invalid atom count")
    n_bonds = _uint(_fixed(counts_line, 3, 6), "Invalid bond count")

    atoms = []
    for offset, line in enumerate(_block(lines, 4, n_atoms, "Atom")):
        cols = line.split()
        if len(cols) < 4:
            raise ParseError(f"Invalid atom line at {4 + offset}")
        atoms.append(
            AtomGeneric(
                serial_number=offset + 1,
                posit=[_float(cols[0]), _float(cols[1]), _float(cols[2])],
                element=_element(cols[3]),
                hetero=True,
            )
        )

    bonds = []
    for line in _block(lines, 4 + n_atoms, n_bonds, "Bond"):
        bonds.append(
            BondGeneric(
                atom_0_sn=_uint(_fixed(line, 0, 3), "Invalid bond atom 1"),
                atom_1_sn=_uint(_fixed(line, 3, 6), "Invalid bond atom 2"),
                bond_type=_bond_type(_fixed(line, 6, 9).strip()),
            )
        )
    return atoms, bonds, None


def _parse_v3000(lines: list[str]):
    position = 4
    n_atoms = n_bonds = 0
    try:
        while position < len(lines):
            line = lines[position]
            position += 1
            if line.startswith("M  V30 COUNTS"):
                cols = line.split()
                n_atoms = _uint(cols[3], "Invalid atom count")
                n_bonds = _uint(cols[4], "Invalid bond count")
            if line.startswith("M  V30 BEGIN ATOM"):
                break

        atoms = []
        weights: list[Optional[float]] = []
        for line in _block(lines, position, n_atoms, "Atom"):
            cols = line.split()
            weight = None
            for col in cols[7:]:
                if col.startswith("WEIGHT="):
                    try:
                        weight = float(col[len("WEIGHT="):])
                    except ValueError:
                        pass
            atoms.append(
                AtomGeneric(
                    serial_number=_uint(cols[2], f"Invalid atom serial number: {cols[2]}"),
                    posit=[_float(cols[4]), _float(cols[5]), _float(cols[6])],
                    element=_element(cols[3]),
                    hetero=True,
                )
            )
            weights.append(weight)
        position += n_atoms

        while position < len(lines) and not lines[position].startswith("M  V30 BEGIN BOND"):
            position += 1
        position += 1

        bonds = []
        for line in _block(lines, position, n_bonds, "Bond"):
            cols = line.split()
            bonds.append(
                BondGeneric(
                    bond_type=_bond_type(cols[3]),
                    atom_0_sn=_uint(cols[4], "Invalid bond atom 1"),
                    atom_1_sn=_uint(cols[5], "Invalid bond atom 2"),
                )
            )
    except IndexError:
        raise ParseError("Malformed V3000 line") from None
    return atoms, bonds, weights


@dataclass(eq=False)
class Sdf:
    """A molecule read from SDF text."""

    ident: str
    atoms: list[AtomGeneric]
    bonds: list[BondGeneric]
    chains: list[ChainGeneric]
    residues: list[ResidueGeneric]
    atoms_weight: Optional[list[Optional[float]]] = None
    metadata: dict[str, str] = field(default_factory=dict)
    pharmacophore_features: list[PharmacophoreFeatures] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "Sdf":
        """Parse the first molecule of an SDF document."""
        lines = text.splitlines()
        if len(lines) < 4:
            raise ParseError("Not enough lines for SDF header")

        ident = lines[0].strip()
        counts_line = lines[3]
        if "V2000" in counts_line:
            atoms, bonds, weights = _parse_v2000(lines, counts_line)
        elif "V3000" in counts_line:
            atoms, bonds, weights = _parse_v3000(lines)
        else:
            raise ParseError("Unknown SDF version (neither V2000 nor V3000)")

        atom_sns = [atom.serial_number for atom in atoms]
        residues = [
            ResidueGeneric(
                serial_number=0,
                res_type=ResidueType(ResidueKind.OTHER, name="Unknown"),
                atom_sns=list(atom_sns),
                end=ResidueEnd.HETERO,
            )
        ]
        chains = [ChainGeneric(id="A", residue_sns=[0], atom_sns=atom_sns)]
        return cls(
            ident=ident,
            atoms=atoms,
            bonds=bonds,
            chains=chains,
            residues=residues,
            atoms_weight=weights,
        )


def parse_sdf(text: str) -> Sdf:
    """Parse SDF text into an :class:`Sdf`."""
    return Sdf.from_text(text)