# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test geometric formulas of sinogram geometries."""

import pytest
import numpy as np

import sinogeom
from sinogeom import sino_geom
from sinogeom.util.testutils import all_almost_equal, simple_fixture


# --- pytest fixtures --- #


dfs = simple_fixture('dfs', [0.0, float('inf')])
parallel_how = simple_fixture('how', ['par', 'moj'])


@pytest.fixture(scope='module')
def fan_geom(dfs):
    return sino_geom('fan', nb=128, na=96, d=1, dsd=512, dod=128, dfs=dfs)


# --- tests --- #


def test_gamma(fan_geom):
    sg = fan_geom
    if sg.dfs == 0:
        assert all_almost_equal(sg.gamma, sg.s / sg.dsd)
    else:
        assert all_almost_equal(sg.gamma, np.arctan(sg.s / sg.dsd))


def test_gamma_max(fan_geom):
    sg = fan_geom
    assert 0 < sg.gamma_max < np.pi / 2
    assert sg.gamma_max == pytest.approx(np.max(np.abs(sg.gamma)))


def test_orbit_short(fan_geom):
    sg = fan_geom
    assert sg.orbit_short == pytest.approx(
        180 + 2 * np.rad2deg(sg.gamma_max))


def test_gamma_parallel_unsupported(parallel_how):
    sg = sino_geom(parallel_how)
    with pytest.raises(sinogeom.UnsupportedBeamError):
        sg.gamma
    with pytest.raises(sinogeom.UnsupportedBeamError):
        sg.gamma_max


def test_rfov(parallel_how):
    sg = sino_geom(parallel_how, nb=64, d=0.5)
    assert sg.rfov == pytest.approx(np.max(np.abs(sg.r)))
    assert sg.rfov == pytest.approx(15.75)


def test_rfov_fan(fan_geom):
    sg = fan_geom
    assert sg.rfov == pytest.approx(sg.dso * np.sin(sg.gamma_max))
    assert 0 < sg.rfov < sg.dso


def test_detector_positions_parallel(parallel_how):
    sg = sino_geom(parallel_how, nb=8)
    assert all_almost_equal(sg.xds, sg.s)
    assert all_almost_equal(sg.yds, np.zeros(8))


def test_detector_positions_fan(fan_geom):
    sg = fan_geom
    if sg.dfs == 0:
        assert all_almost_equal(sg.xds, sg.dsd * np.sin(sg.gamma))
        assert all_almost_equal(sg.yds, sg.dso - sg.dsd * np.cos(sg.gamma))
        # Arc detector elements lie on a circle around the source
        src = np.array([0, sg.dso])
        dist = np.hypot(sg.xds - src[0], sg.yds - src[1])
        assert all_almost_equal(dist, sg.dsd)
    else:
        assert all_almost_equal(sg.xds, sg.s)
        assert all_almost_equal(sg.yds, -sg.dod * np.ones(sg.nb))


def test_source_offset_shifts_xds():
    with pytest.warns(UserWarning):
        sg = sino_geom('fan', nb=16, dsd=64, dod=16, source_offset=0.5)
    sg0 = sg.replace(source_offset=0)
    assert all_almost_equal(sg.xds, sg0.xds + 0.5)


def test_taufun_isocenter(fan_geom):
    """A point at the isocenter projects to the detector center."""
    sg = fan_geom
    tau = sg.taufun(np.zeros(3), np.zeros(3))
    assert tau.shape == (3, sg.na)
    assert all_almost_equal(tau, 0)


def test_taufun_parallel():
    sg = sino_geom('par', nb=32, na=4, d=0.5, orbit=180)
    x = np.array([[1.0, 0.0], [2.0, -1.0]])
    y = np.array([[0.0, 1.0], [3.0, 0.5]])
    tau = sg.taufun(x, y)
    assert tau.shape == (4, 4)

    ar = sg.ar
    expected = (x.reshape(-1, 1) * np.cos(ar) +
                y.reshape(-1, 1) * np.sin(ar)) / sg.d
    assert all_almost_equal(tau, expected)

    # The point (0, 1) projects to 0 at angle 0 and to 1 / d at 90 degrees
    assert tau[1, 0] == pytest.approx(0)
    assert tau[1, 2] == pytest.approx(2)


def test_taufun_mojette():
    sg = sino_geom('moj', nb=32, na=4, d=0.5, orbit=180)
    tau = sg.taufun([1.0], [1.0])
    # angle 45 degrees: projection sqrt(2), spacing d / sqrt(2)
    assert tau[0, 1] == pytest.approx(np.sqrt(2) / (0.5 / np.sqrt(2)))
    assert tau[0, 0] == pytest.approx(1 / 0.5)


def test_taufun_fan_matches_detector(fan_geom):
    """Points on the central ray of a detector element project onto it."""
    sg = fan_geom
    ib = 80
    # Point halfway between source and detector element ib, at angle 0
    src = np.array([0, sg.dso])
    det = np.array([sg.xds[ib], sg.yds[ib]])
    point = (src + det) / 2
    tau = sg.taufun([point[0]], [point[1]])
    assert tau[0, 0] == pytest.approx(sg.s[ib] / sg.ds)


def test_taufun_shape_mismatch(fan_geom):
    with pytest.raises(sinogeom.ShapeMismatchError):
        fan_geom.taufun(np.zeros(3), np.zeros(4))
    with pytest.raises(ValueError):
        fan_geom.taufun(np.zeros((2, 2)), np.zeros(4))


def test_unitv():
    sg = sino_geom('par', nb=8, na=6)
    out = sg.unitv()
    assert out.shape == (8, 6)
    assert np.sum(out == 1) == 1
    assert np.sum(out != 0) == 1
    assert out[4, 3] == 1

    out = sg.unitv(ib=0, ia=1)
    assert np.sum(out != 0) == 1
    assert out[0, 1] == 1


def test_unitv_odd():
    sg = sino_geom('par', nb=5, na=3)
    out = sg.unitv()
    assert out[3, 1] == 1
    assert np.sum(out) == 1


def test_invalid_detector_model_in_formulas():
    """Formulas fail for a detector model they do not know."""

    class FakeGeometry(object):
        beam = sinogeom.Beam.FAN
        dfs = 3.0
        dsd = 10.0
        s = np.zeros(4)

    with pytest.raises(sinogeom.InvalidDetectorModelError):
        sinogeom.sino_geom_gamma(FakeGeometry())


if __name__ == '__main__':
    sinogeom.util.test_file(__file__)
