"""Shared fixtures: loop-based set-definition references and log capture."""

import logging

import numpy as np
import pytest


def _reference_erode(image, mask, handle_borders):
    """Erosion straight from its definition, one pixel at a time."""
    fg = np.asarray(image) != 0
    se = np.asarray(mask) != 0
    rows, cols = fg.shape
    mask_rows, mask_cols = se.shape
    r_orig, c_orig = mask_rows // 2, mask_cols // 2
    out = np.zeros((rows, cols), dtype=bool)
    for i in range(rows):
        for j in range(cols):
            hit = True
            for mr in range(mask_rows):
                for mc in range(mask_cols):
                    r = i + mr - r_orig
                    c = j + mc - c_orig
                    inside = 0 <= r < rows and 0 <= c < cols
                    if not inside:
                        if not handle_borders:
                            hit = False
                            continue
                        r = min(max(r, 0), rows - 1)
                        c = min(max(c, 0), cols - 1)
                    if se[mr, mc] and not fg[r, c]:
                        hit = False
            out[i, j] = hit
    return out


def _reference_dilate(image, mask):
    """Minkowski union straight from its definition; outside pixels are background."""
    fg = np.asarray(image) != 0
    se = np.asarray(mask) != 0
    rows, cols = fg.shape
    mask_rows, mask_cols = se.shape
    r_orig, c_orig = mask_rows // 2, mask_cols // 2
    out = np.zeros((rows, cols), dtype=bool)
    for i in range(rows):
        for j in range(cols):
            for mr in range(mask_rows):
                for mc in range(mask_cols):
                    r = i - mr + r_orig
                    c = j - mc + c_orig
                    if se[mr, mc] and 0 <= r < rows and 0 <= c < cols and fg[r, c]:
                        out[i, j] = True
    return out


@pytest.fixture(scope="session")
def reference_erode():
    return _reference_erode


@pytest.fixture(scope="session")
def reference_dilate():
    return _reference_dilate


@pytest.fixture
def binmorph_caplog(caplog):
    """caplog capturing WARNING records of the binmorph loggers."""
    caplog.set_level(logging.WARNING, logger="binmorph")
    return caplog
