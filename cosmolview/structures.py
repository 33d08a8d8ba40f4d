"""Generic molecular records shared by the structure-file readers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

import numpy as np


class ParseError(ValueError):
    """Raised when structure text or a token in it cannot be understood."""


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=np.float32).reshape(3)


class Element(enum.Enum):
    """A chemical element, identified by its symbol."""

    H = "H"
    HE = "He"
    LI = "Li"
    BE = "Be"
    B = "B"
    C = "C"
    N = "N"
    O = "O"
    F = "F"
    NE = "Ne"
    NA = "Na"
    MG = "Mg"
    AL = "Al"
    SI = "Si"
    P = "P"
    S = "S"
    CL = "Cl"
    AR = "Ar"
    K = "K"
    CA = "Ca"
    SC = "Sc"
    TI = "Ti"
    V = "V"
    CR = "Cr"
    MN = "Mn"
    FE = "Fe"
    CO = "Co"
    NI = "Ni"
    CU = "Cu"
    ZN = "Zn"
    GA = "Ga"
    GE = "Ge"
    AS = "As"
    SE = "Se"
    BR = "Br"
    KR = "Kr"
    RB = "Rb"
    SR = "Sr"
    Y = "Y"
    ZR = "Zr"
    MO = "Mo"
    RU = "Ru"
    RH = "Rh"
    PD = "Pd"
    AG = "Ag"
    CD = "Cd"
    IN = "In"
    SN = "Sn"
    SB = "Sb"
    TE = "Te"
    I = "I"  # noqa: E741
    XE = "Xe"
    CS = "Cs"
    BA = "Ba"
    GD = "Gd"
    W = "W"
    OS = "Os"
    IR = "Ir"
    PT = "Pt"
    AU = "Au"
    HG = "Hg"
    TL = "Tl"
    PB = "Pb"
    BI = "Bi"
    U = "U"
    OTHER = "Other"

    @classmethod
    def from_letter(cls, letter: str) -> "Element":
        """Look up an element by its symbol, in any letter case."""
        key = letter.strip()
        symbol = key[:1].upper() + key[1:].lower()
        try:
            element = cls(symbol)
        except ValueError:
            raise ParseError(f"Invalid element: {letter}") from None
        if element is cls.OTHER:
            raise ParseError(f"Invalid element: {letter}")
        return element

    def to_letter(self) -> str:
        """The element symbol."""
        return self.value


class AminoAcid(enum.Enum):
    """The twenty standard amino acids: three-letter and one-letter codes."""

    ALA = ("ALA", "A")
    ARG = ("ARG", "R")
    ASN = ("ASN", "N")
    ASP = ("ASP", "D")
    CYS = ("CYS", "C")
    GLN = ("GLN", "Q")
    GLU = ("GLU", "E")
    GLY = ("GLY", "G")
    HIS = ("HIS", "H")
    ILE = ("ILE", "I")
    LEU = ("LEU", "L")
    LYS = ("LYS", "K")
    MET = ("MET", "M")
    PHE = ("PHE", "F")
    PRO = ("PRO", "P")
    SER = ("SER", "S")
    THR = ("THR", "T")
    TRP = ("TRP", "W")
    TYR = ("TYR", "Y")
    VAL = ("VAL", "V")

    @property
    def three_letter(self) -> str:
        return self.value[0]

    @classmethod
    def from_str(cls, name: str) -> "AminoAcid":
        """Parse a three-letter or one-letter code, in any letter case."""
        found = _AMINO_LOOKUP.get(name.strip().upper())
        if found is None:
            raise ParseError(f"Invalid amino acid: {name}")
        return found

    def to_one_letter(self) -> str:
        return self.value[1]

    def __str__(self) -> str:
        return self.three_letter


_AMINO_LOOKUP: dict[str, AminoAcid] = {}
for _aa in AminoAcid:
    _AMINO_LOOKUP[_aa.value[0]] = _aa
    _AMINO_LOOKUP[_aa.value[1]] = _aa


class ResidueKind(enum.Enum):
    AMINO_ACID = "amino_acid"
    WATER = "water"
    OTHER = "other"


@dataclass(frozen=True)
class ResidueType:
    """What a residue is: an amino acid, water, or something named otherwise."""

    kind: ResidueKind = ResidueKind.OTHER
    amino_acid: Optional[AminoAcid] = None
    name: str = ""

    @classmethod
    def from_name(cls, name: str) -> "ResidueType":
        """Classify a residue name as found in CIF, PDB and similar formats."""
        if name.upper() == "HOH":
            return cls(ResidueKind.WATER)
        try:
            return cls(ResidueKind.AMINO_ACID, amino_acid=AminoAcid.from_str(name))
        except ParseError:
            return cls(ResidueKind.OTHER, name=name)

    def is_amino_acid(self) -> bool:
        return self.kind is ResidueKind.AMINO_ACID

    def __str__(self) -> str:
        if self.kind is ResidueKind.WATER:
            return "Water"
        if self.kind is ResidueKind.AMINO_ACID:
            return str(self.amino_acid)
        return self.name


class ResidueEnd(enum.Enum):
    INTERNAL = "internal"
    N_TERMINUS = "n_terminus"
    C_TERMINUS = "c_terminus"
    HETERO = "hetero"


class BondType(enum.Enum):
    """Bond types of the Mol2 standard, plus a few from mmCIF."""

    SINGLE = "Single"
    DOUBLE = "Double"
    TRIPLE = "Triple"
    AROMATIC = "Aromatic"
    AMIDE = "Amide"
    DUMMY = "Dummy"
    UNKNOWN = "Unknown"
    NOT_CONNECTED = "Not connected"
    QUADRUPLE = "Quadruple"
    DELOCALIZED = "Delocalized"
    POLYMERIC_LINK = "Polymeric link"

    @classmethod
    def parse(cls, text: str) -> "BondType":
        """Read a bond-type token from Mol2, SDF or mmCIF."""
        found = _BOND_TOKENS.get(text.strip().lower())
        if found is None:
            raise ParseError(f"Invalid BondType: {text}")
        return found

    def order(self) -> float:
        return _BOND_ORDERS.get(self, 1.0)

    def to_visual_str(self) -> str:
        return _BOND_VISUAL[self]

    def to_mol2_str(self) -> str:
        return _BOND_MOL2[self]

    def to_str_sdf(self) -> str:
        """The SDF token; SDF only knows a truncated set of types."""
        if self in (BondType.SINGLE, BondType.DOUBLE, BondType.TRIPLE):
            return self.to_mol2_str()
        if self is BondType.AROMATIC:
            return "4"
        return BondType.SINGLE.to_mol2_str()

    def __str__(self) -> str:
        return self.value


_BOND_TOKENS = {
    "1": BondType.SINGLE,
    "sing": BondType.SINGLE,
    "2": BondType.DOUBLE,
    "doub": BondType.DOUBLE,
    "3": BondType.TRIPLE,
    "trip": BondType.TRIPLE,
    "4": BondType.AROMATIC,
    "ar": BondType.AROMATIC,
    "arom": BondType.AROMATIC,
    "am": BondType.AMIDE,
    "du": BondType.DUMMY,
    "un": BondType.UNKNOWN,
    "nc": BondType.NOT_CONNECTED,
    "quad": BondType.QUADRUPLE,
    "delo": BondType.DELOCALIZED,
    "poly": BondType.POLYMERIC_LINK,
}

_BOND_ORDERS = {
    BondType.AROMATIC: 1.5,
    BondType.DOUBLE: 2.0,
    BondType.TRIPLE: 3.0,
    BondType.QUADRUPLE: 4.0,
}

_BOND_VISUAL = {
    BondType.SINGLE: "-",
    BondType.DOUBLE: "=",
    BondType.TRIPLE: "≡",
    BondType.AROMATIC: "=–",
    BondType.AMIDE: "-am-",
    BondType.DUMMY: "-",
    BondType.UNKNOWN: "-un-",
    BondType.NOT_CONNECTED: "-nc-",
    BondType.QUADRUPLE: "-#-",
    BondType.DELOCALIZED: "-delo-",
    BondType.POLYMERIC_LINK: "-poly-",
}

_BOND_MOL2 = {
    BondType.SINGLE: "1",
    BondType.DOUBLE: "2",
    BondType.TRIPLE: "3",
    BondType.AROMATIC: "ar",
    BondType.AMIDE: "am",
    BondType.DUMMY: "du",
    BondType.UNKNOWN: "un",
    BondType.NOT_CONNECTED: "nc",
    BondType.QUADRUPLE: "quad",
    BondType.DELOCALIZED: "delo",
    BondType.POLYMERIC_LINK: "poly",
}


@dataclass(eq=False)
class AtomGeneric:
    """One atom as read from a structure file."""

    serial_number: int = 0
    posit: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float32))
    element: Element = Element.OTHER
    type_in_res: Optional[str] = None
    type_in_res_general: Optional[str] = None
    force_field_type: Optional[str] = None
    partial_charge: Optional[float] = None
    hetero: bool = False
    occupancy: Optional[float] = None
    alt_conformation_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.posit = _vec3(self.posit)

    def __str__(self) -> str:
        ff_type = self.force_field_type if self.force_field_type is not None else "None"
        charge = f"{self.partial_charge:.3f}" if self.partial_charge is not None else "None"
        position = ", ".join(str(float(v)) for v in self.posit)
        text = (
            f"Atom {self.serial_number}: {self.element.to_letter()}, [{position}]. "
            f"{self.type_in_res}, ff: {ff_type}, q: {charge}"
        )
        if self.hetero:
            text += ", Het"
        return text


@dataclass
class ChainGeneric:
    id: str
    residue_sns: list[int] = field(default_factory=list)
    atom_sns: list[int] = field(default_factory=list)


@dataclass
class ResidueGeneric:
    serial_number: int
    res_type: ResidueType
    atom_sns: list[int] = field(default_factory=list)
    end: ResidueEnd = ResidueEnd.INTERNAL


@dataclass
class BondGeneric:
    bond_type: BondType
    atom_0_sn: int
    atom_1_sn: int


class SecondaryStructure(enum.Enum):
    HELIX = "helix"
    SHEET = "sheet"
    COIL = "coil"
    TURN = "turn"


@dataclass(eq=False)
class Residue:
    """Backbone coordinates of one amino-acid residue."""

    residue_type: AminoAcid
    sns: int
    c: np.ndarray
    n: np.ndarray
    ca: np.ndarray
    o: np.ndarray
    h: Optional[np.ndarray] = None
    ss: Optional[SecondaryStructure] = None

    def __post_init__(self) -> None:
        self.c = _vec3(self.c)
        self.n = _vec3(self.n)
        self.ca = _vec3(self.ca)
        self.o = _vec3(self.o)
        if self.h is not None:
            self.h = _vec3(self.h)


class PharmacophoreType(enum.Enum):
    ACCEPTOR = "acceptor"
    DONOR = "donor"
    CATION = "cation"
    RINGS = "rings"


@dataclass
class PharmacophoreFeatures:
    atom_sns: list[int]
    kind: PharmacophoreType