# cosmolview

Building blocks for a 3D molecular viewer: reading small molecules from SDF
text, placing backbone hydrogens and finding hydrogen bonds in a protein
chain, and describing what should be on screen (scenes, lighting, camera,
animation timing).

## Modules

- `cosmolview.structures`: plain records shared by the readers:
  `AtomGeneric`, `BondGeneric`, `ResidueGeneric`, `ChainGeneric`, `Residue`
  (backbone N/CA/C/O/H coordinates), and the enums `Element`, `AminoAcid`,
  `ResidueType`, `ResidueEnd`, `BondType`, `SecondaryStructure`,
  `PharmacophoreType`. Bad input raises `ParseError` (a `ValueError`).
  `BondType.parse` accepts Mol2, SDF and mmCIF tokens ("1", "doub", "ar",
  "am", ...), and `BondType` can be written back with `to_mol2_str`,
  `to_str_sdf` and `to_visual_str`.
- `cosmolview.sdf`: `parse_sdf(text)` / `Sdf.from_text(text)` read the first
  molecule of an SDF/MOL document in V2000 or V3000 form. Unknown element
  symbols become `Element.OTHER` and unknown bond tokens become
  `BondType.UNKNOWN`. For V3000, `WEIGHT=` atom properties are collected in
  `atoms_weight`. All atoms go into one hetero residue of one chain "A".
- `cosmolview.hbonds`: `imide_hydrogen` and `add_imide_hydrogens` place
  missing amide hydrogens 1.01 Å from N. `hbond_energy` gives the
  electrostatic C=O···H-N energy in kcal/mol, and `find_hydrogen_bonds(residues,
  cutoff=-0.5)` returns a boolean matrix where `matrix[d, a]` means the N-H
  of residue `d` bonds to the C=O of residue `a`. Prolines and residues
  without a hydrogen never donate, and neighbouring residues are skipped.
- `cosmolview.scene`: `Scene` holds named and unnamed shapes, scale, centre,
  background colour and camera lights (`Lighting`, `AmbientLight`,
  `DirectionalLight`, `PointLight`). Replacing or removing a missing id
  raises `ShapeNotFoundError`. `Scene.interpolate(other, t)` blends centre
  and scale linearly and calls each shape's own `interpolate(other, t)`.
  `Animation(interval, loops=-1, interpolate=True)` takes the interval in
  seconds, stores it in whole milliseconds, and collects frames.
- `cosmolview.camera`: `CameraState` is an orbit camera. `matrices(aspect)`
  returns view, projection and eye position. `rotate(drag_x, drag_y)` turns it
  by a screen drag, and `zoom(scroll_delta)` changes the distance, kept
  between 0.1 and 500.
- `cosmolview.playback`: `AnimationPlayer(animation).frame_at(now)` returns a
  `FrameSelection` for a time in seconds. Without interpolation it returns
  `None` when the frame has not changed since the last call. Once a finite
  number of loops has run, the last frame is held.

## Installation

```
pip install cosmolview
```

## Examples

Read a ligand:

```python
from cosmolview.sdf import parse_sdf

with open("ligand.sdf") as fh:
    mol = parse_sdf(fh.read())

print(mol.ident, len(mol.atoms), "atoms", len(mol.bonds), "bonds")
for bond in mol.bonds:
    print(bond.atom_0_sn, bond.bond_type.to_visual_str(), bond.atom_1_sn)
```

Find backbone hydrogen bonds:

```python
from cosmolview.hbonds import add_imide_hydrogens, find_hydrogen_bonds

# residues: a list of cosmolview.structures.Residue in chain order
with_h = add_imide_hydrogens(residues)
matrix = find_hydrogen_bonds(with_h)
```

Scenes, camera and playback:

```python
from cosmolview.scene import Scene, Animation
from cosmolview.camera import CameraState
from cosmolview.playback import AnimationPlayer

a = Scene()
a.set_scale(2.0)
b = Scene()
b.recenter((1.0, 0.0, 0.0))

animation = Animation(0.05, -1, True)
animation.add_frame(a)
animation.add_frame(b)

player = AnimationPlayer(animation)
selection = player.frame_at(0.0)
print(selection.frame_index, selection.scene.scene_center)

camera = player.initial_camera()
camera.rotate(100.0, 0.0)
camera.zoom(120.0)
view, projection, eye = camera.matrices(800 / 500)
```

## What this package does not do

It does not open a window or draw anything. The camera and playback modules
only compute matrices and pick frames for a renderer to use. It has no shape
classes of its own, because a `Scene` stores whatever objects it is given. It
does not read mmCIF or PDB files, and it does not assign helix/sheet/turn
labels. `find_hydrogen_bonds` gives the hydrogen-bond matrix such labelling
would start from. It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```