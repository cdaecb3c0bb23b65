# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test construction of sinogram geometries."""

import logging

import pytest
import numpy as np

import sinogeom
from sinogeom import Beam, sino_geom
from sinogeom.util.testutils import simple_fixture


# --- pytest fixtures --- #


beam_how = simple_fixture('how', ['par', 'parallel', 'fan', 'moj', 'mojette'])
preset = simple_fixture('preset', ['ge1', 'hd1'])


# --- tests --- #


def test_dispatch(beam_how):
    sg = sino_geom(beam_how)
    assert sg.beam == Beam.from_name(beam_how)
    assert sg.nb == 128
    assert sg.na == 200
    assert sg.d == 1


def test_dispatch_beam_member():
    assert sino_geom(Beam.MOJ).beam == Beam.MOJ


def test_unknown_variant():
    with pytest.raises(sinogeom.UnknownVariantError):
        sino_geom('cone')
    with pytest.raises(ValueError):
        sino_geom('cone')
    with pytest.raises(sinogeom.UnknownVariantError):
        sino_geom(None)


def test_unknown_option():
    with pytest.raises(TypeError):
        sino_geom('par', dsd=10)
    with pytest.raises(TypeError):
        sino_geom('fan', foo=1)


def test_parallel_defaults():
    sg = sino_geom('par', nb=64)
    assert sg.na == 2 * int(np.floor(64 * np.pi / 4))
    assert sg.orbit == 180
    assert sg.orbit_start == 0
    assert sg.offset == 0
    assert sg.strip_width == sg.d
    assert (sg.source_offset, sg.dsd, sg.dod, sg.dfs) == (0, 0, 0, 0)
    assert sg.units is None


def test_parallel_down():
    sg = sino_geom('par', nb=128, down=2)
    assert sg.dim == (64, 100)
    assert sg.d == 2


def test_fan_defaults():
    sg = sino_geom('fan', nb=64, d=0.5)
    assert sg.orbit == 360
    assert sg.dsd == 4 * 64 * 0.5
    assert sg.dod == 64 * 0.5
    assert sg.dfs == 0
    assert sg.dso == 3 * 64 * 0.5


def test_fan_scenario():
    sg = sino_geom('fan', nb=128, d=1, dsd=512, dod=128, dfs=0)
    assert 0 < sg.gamma_max < np.pi / 2


def test_fan_short_orbit():
    sg_full = sino_geom('fan', nb=128, dsd=512, dod=128)
    sg = sino_geom('fan', nb=128, dsd=512, dod=128, orbit='short')
    assert isinstance(sg.orbit, float)
    assert sg.orbit == pytest.approx(sg_full.orbit_short)
    assert sg.orbit == pytest.approx(180 + 2 * np.rad2deg(sg.gamma_max))
    assert 180 < sg.orbit < 360


def test_fan_short_orbit_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='sinogeom'):
        sino_geom('fan', nb=32, orbit='short')
    assert 'short scan' in caplog.text


def test_invalid_orbit():
    with pytest.raises(sinogeom.InvalidOrbitError):
        sino_geom('fan', orbit='long')
    with pytest.raises(sinogeom.InvalidOrbitError):
        sino_geom('par', orbit='short')
    with pytest.raises(sinogeom.InvalidOrbitError):
        sino_geom('moj', orbit='short')


def test_invalid_dfs():
    with pytest.raises(sinogeom.InvalidDetectorModelError):
        sino_geom('fan', dfs=100)


def test_presets(preset):
    sg = sino_geom(preset)
    assert sg.beam == Beam.FAN
    assert sg.units == 'mm'
    assert sg.nb == 888
    assert sg.d == pytest.approx(1.0239)
    assert sg.offset == 1.25
    assert sg.dsd == pytest.approx(949.075)
    assert sg.dod == pytest.approx(408.075)
    assert sg.dfs == 0


def test_preset_units(preset):
    sg_mm = sino_geom(preset)
    sg_cm = sino_geom(preset, units='cm')
    assert sg_cm.units == 'cm'
    assert sg_cm.d == pytest.approx(sg_mm.d / 10)
    assert sg_cm.dsd == pytest.approx(sg_mm.dsd / 10)
    assert sg_cm.dod == pytest.approx(sg_mm.dod / 10)
    assert sg_cm.gamma_max == pytest.approx(sg_mm.gamma_max)

    with pytest.raises(sinogeom.InvalidUnitsError):
        sino_geom(preset, units='inch')
    with pytest.raises(sinogeom.InvalidUnitsError):
        sino_geom(preset, units=None)


def test_preset_overrides(preset):
    sg = sino_geom(preset, orbit_start=20, dfs=float('inf'), down=4)
    assert sg.orbit_start == 20
    assert sg.dfs == float('inf')
    assert sg.nb == 222
    assert sg.d == pytest.approx(4 * 1.0239)


def test_ge1():
    sg = sino_geom('ge1')
    assert sg.dim == (888, 984)
    assert sg.orbit == 360

    sg_short = sino_geom('ge1', orbit='short')
    assert sg_short.na == 642
    assert sg_short.orbit == pytest.approx(642 / 984 * 360)


def test_hd1():
    sg = sino_geom('hd1')
    assert sg.dim == (888, 1968)

    sg_short = sino_geom('hd1', orbit='short')
    assert sg_short.na == 1968
    assert sg_short.orbit == pytest.approx(sg.orbit_short)


if __name__ == '__main__':
    sinogeom.util.test_file(__file__)
