"""
Lattice Demo

This example walks through the main features of the package:
- Building lattices with the factory (default substitution, variants)
- Wigner-Seitz regimes and the coarse mesh
- Mapping points into the fundamental domain
- Symmetry points, paths and band-path sampling
- YAML configuration and export
"""

import numpy as np
import sys
from pathlib import Path

# Add bravais to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bravais import LatticeType, bravais_lattice_factory, lattice_from_config, setup_logging
from bravais.io import save_coarse_mesh, save_config, symmetry_points_to_dataframe


def example_factory():
    """Example 1: Factory and default parameters."""
    print("="*60)
    print("Example 1: Building lattices with the factory")
    print("="*60)

    # Negative parameters select the defaults of the type
    lattice = bravais_lattice_factory(LatticeType.PRIMITIVE_CUBIC, a=-1)
    print(f"\nLattice: {lattice}")
    print(f"Unit cell volume:      {lattice.unit_cell_volume:.4f}")
    print(f"Brillouin zone volume: {lattice.brillouin_zone_volume:.4f}")

    print("\nReciprocal vectors:")
    for i, b in enumerate(lattice.get_reciprocal_vectors()):
        print(f"  b{i+1} = {b}")

    print("\nDefault lattice of every type:")
    for lattice_type in LatticeType:
        if lattice_type == LatticeType.INVALID_TYPE:
            continue
        lat = bravais_lattice_factory(lattice_type)
        print(f"  {lattice_type.short_code:6s} {lat.variant:7s} "
              f"{lat.wigner_seitz_shape:24s} {lat.get_number_symmetry_points():3d} points")


def example_regimes():
    """Example 2: Wigner-Seitz regime bifurcation in BCT."""
    print("\n" + "="*60)
    print("Example 2: Body-centered tetragonal regimes")
    print("="*60)

    for c in (0.5, 1.2, np.sqrt(2), 2.0):
        lattice = bravais_lattice_factory('BCT', a=1.0, c=c)
        mesh = lattice.get_coarse_wigner_seitz_mesh()
        print(f"  c = {c:.3f}: {lattice.variant}, {lattice.wigner_seitz_shape} "
              f"({lattice.get_wigner_seitz_cell().num_faces} faces), "
              f"{mesh.num_elements} tetrahedra, mesh volume {mesh.volume:.4f}")


def example_mapping():
    """Example 3: Folding points into the fundamental domain."""
    print("\n" + "="*60)
    print("Example 3: Mapping points")
    print("="*60)

    lattice = bravais_lattice_factory(LatticeType.PRIMITIVE_CUBIC, a=2.0)
    for pt in ([1.5, 0.2, -1.2], [0.3, -0.5, 0.9], [0.1, 0.2, 0.3]):
        ipt, moved = lattice.map_to_primitive_cell(pt)
        fpt, folded = lattice.map_to_fundamental_domain(pt)
        print(f"  {pt} -> primitive {ipt} (moved={moved}), "
              f"fundamental {fpt} (moved={folded})")


def example_paths():
    """Example 4: Symmetry points and band paths."""
    print("\n" + "="*60)
    print("Example 4: Symmetry points of FCC")
    print("="*60)

    lattice = bravais_lattice_factory(LatticeType.FACE_CENTERED_CUBIC)
    print(symmetry_points_to_dataframe(lattice).to_string())

    for p, labels in enumerate(lattice.get_path_labels()):
        print(f"\nPath {p}: {'-'.join(labels)}")
        for s in range(lattice.get_number_path_segments(p)):
            print(f"  segment {s}: {lattice.get_intermediate_point_label(p, s)}")

    kpoints, distances, ticks = lattice.sample_path(0, density=10.0)
    print(f"\nSampled {len(kpoints)} k-points, path length {distances[-1]:.3f}")
    print(f"Ticks: {ticks}")


def example_config(output_dir: Path):
    """Example 5: YAML configuration and mesh export."""
    print("\n" + "="*60)
    print("Example 5: Configuration and export")
    print("="*60)

    output_dir.mkdir(parents=True, exist_ok=True)
    lattice = bravais_lattice_factory(LatticeType.PRIMITIVE_RHOMBOHEDRAL, a=1.0, alpha=0.6 * np.pi)
    config_path = save_config(lattice, output_dir / "rhl.yaml")
    rebuilt = lattice_from_config(config_path)
    print(f"\nSaved {config_path}, rebuilt {rebuilt} ({rebuilt.variant})")

    mesh_path = save_coarse_mesh(rebuilt, output_dir / "rhl_mesh.json")
    print(f"Saved coarse mesh to {mesh_path}")


if __name__ == '__main__':
    setup_logging(verbosity=0)

    example_factory()
    example_regimes()
    example_mapping()
    example_paths()
    example_config(Path(__file__).parent / "output")

    print("\n" + "="*60)
    print("Done!")
    print("="*60)
    print("\nNext steps:")
    print("  - Run unit tests: pytest tests/")
    print("  - Plot a Brillouin zone: bravais.visualization.plot_brillouin_zone")
