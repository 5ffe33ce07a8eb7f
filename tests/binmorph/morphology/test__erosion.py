"""Tests for binary erosion."""

import hypothesis
import hypothesis.strategies
import numpy as np
import pytest
from hypothesis.extra.numpy import arrays

from binmorph.errors import InvalidArgument
from binmorph.morphology import erode


@hypothesis.strategies.composite
def image_and_mask(draw):
    mask_rows = draw(hypothesis.strategies.integers(1, 4))
    mask_cols = draw(hypothesis.strategies.integers(1, 4))
    rows = draw(hypothesis.strategies.integers(mask_rows, 8))
    cols = draw(hypothesis.strategies.integers(mask_cols, 8))
    bits = hypothesis.strategies.integers(0, 1)
    image = draw(arrays(np.uint8, (rows, cols), elements=bits))
    mask = draw(arrays(np.uint8, (mask_rows, mask_cols), elements=bits))
    return image, mask


class TestErosionKnownValues:
    """Tests for known erosion results."""

    def test_full_image_without_border_handling(self):
        """5x5 foreground eroded by 3x3 leaves a 1-pixel background frame."""
        image = np.ones((5, 5), dtype=np.uint8)
        mask = np.ones((3, 3), dtype=np.uint8)
        result = erode(image, mask, False)
        expected = np.zeros((5, 5), dtype=np.uint8)
        expected[1:4, 1:4] = 1
        np.testing.assert_array_equal(result, expected)

    def test_full_image_with_border_handling(self):
        """Replicated borders keep a full image full."""
        image = np.ones((5, 5), dtype=np.uint8)
        mask = np.ones((3, 3), dtype=np.uint8)
        result = erode(image, mask, True)
        np.testing.assert_array_equal(result, image)

    def test_square_shrinks(self):
        """A 4x4 square shrinks by one pixel on each side."""
        image = np.zeros((10, 10), dtype=np.uint8)
        image[3:7, 3:7] = 1
        mask = np.ones((3, 3), dtype=np.uint8)
        result = erode(image, mask, True)
        expected = np.zeros((10, 10), dtype=np.uint8)
        expected[4:6, 4:6] = 1
        np.testing.assert_array_equal(result, expected)

    def test_even_mask_origin(self):
        """A 2x2 mask has its origin at (1, 1): the window reaches up and left."""
        image = np.zeros((5, 5), dtype=np.uint8)
        image[1:3, 1:3] = 1
        mask = np.ones((2, 2), dtype=np.uint8)
        result = erode(image, mask, False)
        expected = np.zeros((5, 5), dtype=np.uint8)
        expected[2, 2] = 1
        np.testing.assert_array_equal(result, expected)

    def test_even_mask_border_strips(self):
        """A 2x2 mask leaves one background row on top and one column on the left."""
        image = np.ones((4, 4), dtype=np.uint8)
        mask = np.ones((2, 2), dtype=np.uint8)
        result = erode(image, mask, False)
        expected = np.zeros((4, 4), dtype=np.uint8)
        expected[1:, 1:] = 1
        np.testing.assert_array_equal(result, expected)

    def test_background_mask_cells_are_ignored(self):
        """Only foreground mask cells have to be covered."""
        image = np.zeros((5, 5), dtype=np.uint8)
        image[2, 1:4] = 1
        mask = np.array([[0, 0, 0], [1, 1, 1], [0, 0, 0]], dtype=np.uint8)
        result = erode(image, mask, False)
        expected = np.zeros((5, 5), dtype=np.uint8)
        expected[2, 2] = 1
        np.testing.assert_array_equal(result, expected)

    def test_empty_mask_footprint(self):
        """A mask without foreground is always covered."""
        image = np.zeros((4, 4), dtype=np.uint8)
        mask = np.zeros((3, 3), dtype=np.uint8)
        result = erode(image, mask, False)
        expected = np.zeros((4, 4), dtype=np.uint8)
        expected[1:3, 1:3] = 1
        np.testing.assert_array_equal(result, expected)

    def test_nonzero_values_are_foreground(self):
        """Any nonzero pixel is foreground; the output is 0/1."""
        image = np.full((5, 5), 255, dtype=np.uint8)
        image[0, 0] = 7
        mask = np.ones((3, 3), dtype=np.int32)
        result = erode(image, mask, True)
        np.testing.assert_array_equal(result, np.ones((5, 5), dtype=np.uint8))


class TestErosionShapesAndTypes:
    """Tests for shape and dtype handling."""

    @pytest.mark.parametrize("dtype", [np.uint8, np.uint16, np.int32, np.float64, np.bool_])
    def test_dtype_preserved(self, dtype):
        image = np.ones((6, 7), dtype=dtype)
        result = erode(image, np.ones((3, 3)), True)
        assert result.dtype == np.dtype(dtype)
        assert result.shape == (6, 7)

    def test_accepts_nested_lists(self):
        result = erode([[1, 1, 1], [1, 1, 1], [1, 1, 1]], [[1]], False)
        np.testing.assert_array_equal(result, np.ones((3, 3)))

    @pytest.mark.parametrize("shape", [(0, 0), (0, 4), (4, 0)])
    @pytest.mark.parametrize("handle_borders", [False, True])
    def test_empty_image(self, shape, handle_borders):
        """Zero-sized images give a zero-sized result without error."""
        result = erode(np.zeros(shape, dtype=np.uint8), np.ones((3, 3)), handle_borders)
        assert result.shape == shape

    def test_input_not_modified(self):
        image = np.ones((5, 5), dtype=np.uint8)
        erode(image, np.ones((3, 3)), False)
        np.testing.assert_array_equal(image, np.ones((5, 5), dtype=np.uint8))


class TestErosionMaskLargerThanImage:
    """Tests for the non-fatal 'mask larger than image' condition."""

    def test_with_border_handling(self, binmorph_caplog):
        """Warns and still computes the padded erosion."""
        image = np.ones((2, 2), dtype=np.uint8)
        result = erode(image, np.ones((3, 3), dtype=np.uint8), True)
        assert "cannot be larger than image" in binmorph_caplog.text
        np.testing.assert_array_equal(result, image)

    def test_with_border_handling_partial_foreground(self, binmorph_caplog):
        image = np.array([[1, 0], [1, 1]], dtype=np.uint8)
        result = erode(image, np.ones((3, 3), dtype=np.uint8), True)
        assert result.shape == (2, 2)
        np.testing.assert_array_equal(result, np.zeros((2, 2), dtype=np.uint8))

    def test_without_border_handling(self, binmorph_caplog):
        """Warns and returns the input unchanged."""
        image = np.array([[5, 0], [0, 3]], dtype=np.uint8)
        result = erode(image, np.ones((3, 3), dtype=np.uint8), False)
        assert "cannot be larger than image" in binmorph_caplog.text
        np.testing.assert_array_equal(result, image)
        assert result is not image


class TestErosionInvalidArguments:
    """Tests for rejected inputs."""

    @pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
    def test_empty_mask(self, shape):
        with pytest.raises(InvalidArgument):
            erode(np.ones((5, 5)), np.ones(shape), False)

    def test_1d_mask(self):
        with pytest.raises(InvalidArgument):
            erode(np.ones((5, 5)), np.ones(3), False)

    def test_3d_image(self):
        with pytest.raises(InvalidArgument):
            erode(np.ones((2, 5, 5)), np.ones((3, 3)), False)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            erode(np.ones((5, 5)), np.ones((0, 0)), False)


class TestErosionMatchesDefinition:
    """Erosion agrees with the pixel-by-pixel definition."""

    @hypothesis.given(image_and_mask(), hypothesis.strategies.booleans())
    @hypothesis.settings(deadline=None, max_examples=60)
    def test_against_reference(self, reference_erode, case, handle_borders):
        image, mask = case
        result = erode(image, mask, handle_borders)
        expected = reference_erode(image, mask, handle_borders)
        np.testing.assert_array_equal(result, expected.astype(np.uint8))
