"""
Tests for CSV and JSON export.
"""

import json

import numpy as np
import pandas as pd
from bravais.core.lattice import CubicLattice, SquareLattice
from bravais.io import (
    intermediate_points_to_dataframe,
    mesh_to_dict,
    save_coarse_mesh,
    save_symmetry_points,
    symmetry_points_to_dataframe,
)
from bravais.io.export import serialize_array


class TestDataFrames:
    """Test tabulation of catalogs."""

    def test_symmetry_points(self):
        df = symmetry_points_to_dataframe(CubicLattice(a=2.0))
        assert list(df.columns) == ['label', 'f1', 'f2', 'f3', 'kx', 'ky', 'kz']
        assert len(df) == 4
        assert df.loc[3, 'label'] == 'X'
        assert np.isclose(df.loc[3, 'ky'], np.pi / 2)

    def test_planar_columns(self):
        df = symmetry_points_to_dataframe(SquareLattice())
        assert list(df.columns) == ['label', 'f1', 'f2', 'kx', 'ky']

    def test_intermediate_points(self):
        df = intermediate_points_to_dataframe(CubicLattice())
        assert len(df) == 6
        assert df.iloc[0]['label'] == 'Δ'
        assert (df.iloc[0]['start'], df.iloc[0]['end']) == ('Γ', 'X')


class TestFiles:
    """Test files written to disk."""

    def test_save_symmetry_points(self, tmp_path):
        path = save_symmetry_points(CubicLattice(), tmp_path / "points.csv")
        df = pd.read_csv(path, index_col='index')
        assert list(df['label']) == ['Γ', 'M', 'R', 'X']

    def test_save_coarse_mesh(self, tmp_path):
        lattice = CubicLattice(a=2.0)
        path = save_coarse_mesh(lattice, tmp_path / "mesh.json")
        with open(path) as f:
            data = json.load(f)
        assert data['lattice'] == {'type': 'PRIMITIVE_CUBIC', 'a': 2.0}
        assert data['wigner_seitz_shape'] == 'cube'
        assert len(data['translation_vectors']) == 3
        assert len(data['mesh']['elements']) == 24
        assert data['mesh']['element_geometry'] == 'tetrahedron'

    def test_mesh_to_dict_is_json_ready(self):
        data = mesh_to_dict(SquareLattice().get_coarse_wigner_seitz_mesh())
        assert isinstance(data['vertices'], list)
        assert data['dim'] == 2
        json.dumps(data)

    def test_serialize_array(self):
        out = serialize_array({'a': np.arange(3), 'b': (np.float64(1.5), [np.eye(1)])})
        assert out == {'a': [0, 1, 2], 'b': [1.5, [[[1.0]]]]}
