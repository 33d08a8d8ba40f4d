import numpy as np
import pytest

from cosmolview.structures import (
    AminoAcid,
    AtomGeneric,
    BondType,
    Element,
    ParseError,
    Residue,
    ResidueKind,
    ResidueType,
)


def test_element_from_letter_known():
    assert Element.from_letter("C") is Element.C
    assert Element.from_letter("FE") is Element.FE
    assert Element.from_letter(" cl ") is Element.CL


@pytest.mark.parametrize("element", [e for e in Element if e is not Element.OTHER])
def test_element_round_trip(element):
    assert Element.from_letter(element.to_letter()) is element


@pytest.mark.parametrize("bad", ["Xx", "", "Other", "OTHER"])
def test_element_unknown_raises(bad):
    with pytest.raises(ParseError):
        Element.from_letter(bad)


def test_amino_acid_three_letter():
    assert AminoAcid.from_str("ALA") is AminoAcid.ALA
    assert AminoAcid.from_str("pro") is AminoAcid.PRO


@pytest.mark.parametrize("aa", list(AminoAcid))
def test_amino_acid_one_letter_round_trip(aa):
    assert AminoAcid.from_str(aa.to_one_letter()) is aa
    assert AminoAcid.from_str(str(aa)) is aa


def test_amino_acid_invalid():
    with pytest.raises(ParseError):
        AminoAcid.from_str("LIG")


def test_residue_type_water():
    for name in ("HOH", "hoh"):
        res = ResidueType.from_name(name)
        assert res.kind is ResidueKind.WATER
        assert str(res) == "Water"
        assert not res.is_amino_acid()


def test_residue_type_amino_acid():
    res = ResidueType.from_name("GLY")
    assert res.is_amino_acid()
    assert res.amino_acid is AminoAcid.GLY


def test_residue_type_other_keeps_name():
    res = ResidueType.from_name("LIG")
    assert res.kind is ResidueKind.OTHER
    assert str(res) == "LIG"
    assert ResidueType() == ResidueType(ResidueKind.OTHER, name="")


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1", BondType.SINGLE),
        ("sing", BondType.SINGLE),
        ("DOUB", BondType.DOUBLE),
        ("3", BondType.TRIPLE),
        ("4", BondType.AROMATIC),
        ("arom", BondType.AROMATIC),
        ("am", BondType.AMIDE),
        ("du", BondType.DUMMY),
        ("un", BondType.UNKNOWN),
        ("nc", BondType.NOT_CONNECTED),
        ("quad", BondType.QUADRUPLE),
        ("delo", BondType.DELOCALIZED),
        (" poly ", BondType.POLYMERIC_LINK),
    ],
)
def test_bond_type_parse(token, expected):
    assert BondType.parse(token) is expected


def test_bond_type_parse_invalid():
    with pytest.raises(ParseError, match="Invalid BondType"):
        BondType.parse("zz")


@pytest.mark.parametrize("bond", list(BondType))
def test_bond_type_mol2_round_trip(bond):
    assert BondType.parse(bond.to_mol2_str()) is bond


def test_bond_type_order():
    assert BondType.AROMATIC.order() == 1.5
    assert BondType.DOUBLE.order() == 2.0
    assert BondType.TRIPLE.order() == 3.0
    assert BondType.QUADRUPLE.order() == 4.0
    assert BondType.AMIDE.order() == 1.0


def test_bond_type_sdf_tokens():
    assert BondType.AROMATIC.to_str_sdf() == "4"
    assert BondType.DOUBLE.to_str_sdf() == "2"
    assert BondType.AMIDE.to_str_sdf() == BondType.SINGLE.to_mol2_str()


def test_bond_type_display_and_visual():
    assert str(BondType.NOT_CONNECTED) == "Not connected"
    assert BondType.DOUBLE.to_visual_str() == "="
    assert BondType.POLYMERIC_LINK.to_visual_str() == "-poly-"


def test_atom_display():
    atom = AtomGeneric(serial_number=7, element=Element.C, hetero=True, partial_charge=0.25)
    text = str(atom)
    assert text.startswith("Atom 7: C, ")
    assert "q: 0.250" in text
    assert "ff: None" in text
    assert text.endswith(", Het")


def test_atom_posit_is_vector():
    atom = AtomGeneric(posit=(1.0, 2.0, 3.0))
    assert atom.posit.shape == (3,)
    assert np.allclose(atom.posit, [1.0, 2.0, 3.0])
    assert not str(AtomGeneric()).endswith("Het")


def test_residue_coordinates():
    res = Residue(AminoAcid.ALA, 1, c=[1, 0, 0], n=[0, 1, 0], ca=[0, 0, 1], o=[1, 1, 1])
    assert res.h is None
    assert np.allclose(res.o, [1, 1, 1])
    assert res.ca.shape == (3,)