import math

import numpy as np
import pytest

from mockup.exceptions import InvalidPlacementError
from mockup.models import Placement
from mockup.services.compositor import placement_corners


class TestPlacementValidation:
    def test_zero_width_rejected(self):
        with pytest.raises(InvalidPlacementError):
            Placement(x=10, y=10, width=0, height=100)

    def test_negative_height_rejected(self):
        with pytest.raises(InvalidPlacementError):
            Placement(x=10, y=10, width=100, height=-5)

    @pytest.mark.parametrize("field", ["x", "y", "width", "height", "rotation"])
    def test_non_finite_values_rejected(self, field):
        values = {"x": 1.0, "y": 1.0, "width": 10.0, "height": 10.0, "rotation": 0.0}
        values[field] = math.nan if field != "width" else math.inf
        with pytest.raises(InvalidPlacementError):
            Placement(**values)

    def test_numpy_scalars_accepted(self):
        placement = Placement(x=np.int64(10), y=np.float32(20), width=np.int64(100), height=np.float64(50))
        assert placement.size == (100, 50)

    @pytest.mark.parametrize("field", ["x", "width"])
    def test_bool_rejected(self, field):
        values = {"x": 1, "y": 1, "width": 10, "height": 10}
        values[field] = True
        with pytest.raises(InvalidPlacementError):
            Placement(**values)

    def test_rotation_defaults_to_zero(self):
        assert Placement(x=0, y=0, width=5, height=5).rotation == 0.0

    def test_frozen(self):
        placement = Placement(x=0, y=0, width=5, height=5)
        with pytest.raises(AttributeError):
            placement.width = 10


class TestPlacementGeometry:
    def test_center(self):
        assert Placement(x=320, y=310, width=180, height=180).center == (410.0, 400.0)

    def test_size_rounds_to_pixels(self):
        assert Placement(x=0, y=0, width=99.6, height=0.2).size == (100, 1)

    def test_unrotated_corners_are_rectangle(self):
        corners = placement_corners(Placement(x=10, y=20, width=30, height=40))
        np.testing.assert_allclose(corners, [[10, 20], [40, 20], [40, 60], [10, 60]])

    def test_positive_rotation_is_clockwise(self):
        # Quarter turn clockwise: top-left lands where top-right was
        corners = placement_corners(Placement(x=0, y=0, width=100, height=100, rotation=math.pi / 2))
        np.testing.assert_allclose(corners[0], [100, 0], atol=1e-9)
        np.testing.assert_allclose(corners[1], [100, 100], atol=1e-9)

    def test_rotated_corners_keep_center_and_size(self):
        placement = Placement(x=320, y=310, width=180, height=180, rotation=-0.05)
        corners = placement_corners(placement)
        np.testing.assert_allclose(corners.mean(axis=0), placement.center)
        np.testing.assert_allclose(np.linalg.norm(corners[1] - corners[0]), 180)
        np.testing.assert_allclose(np.linalg.norm(corners[3] - corners[0]), 180)
