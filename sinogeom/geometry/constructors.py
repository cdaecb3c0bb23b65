# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Convenience functions for creating sinogram geometries."""

import logging
import warnings

import numpy as np

from sinogeom.geometry.beam import Beam
from sinogeom.geometry.record import SinoGeometry, downsample
from sinogeom.util.exceptions import (
    InvalidOrbitError, InvalidUnitsError, UnknownVariantError)
from sinogeom.util.utility import is_string, safe_int_conv


__all__ = ('sino_geom', 'sino_geom_par', 'sino_geom_fan', 'sino_geom_moj',
           'sino_geom_ge1', 'sino_geom_hd1')

log = logging.getLogger(__name__)


def _default_na(nb):
    """Number of views approximating full angular sampling for ``nb``."""
    return 2 * int(np.floor(safe_int_conv(nb) * np.pi / 4))


def _check_numeric_orbit(orbit, beam):
    if is_string(orbit):
        raise InvalidOrbitError('`orbit` {!r} not supported for beam {!r}, '
                                'expected a value in degrees'
                                ''.format(orbit, beam.value))
    return orbit


def sino_geom_par(units=None, nb=128, na=None, d=1.0, orbit=180.0,
                  orbit_start=0.0, strip_width=None, offset=0.0, down=1):
    """Return a parallel beam sinogram geometry.

    Parameters
    ----------
    units : str, optional
        Descriptive unit tag, e.g. ``'mm'``.
    nb : positive int, optional
        Number of radial samples.
    na : positive int, optional
        Number of views. Default: ``2 * floor(nb * pi / 4)``
    d : positive float, optional
        Radial sample spacing.
    orbit, orbit_start : float, optional
        Angular coverage and first view angle in degrees.
    strip_width : positive float, optional
        Detector element width. Default: ``d``
    offset : float, optional
        Detector centering offset in units of ``d``. Use ``0.25`` or
        ``1.25`` for a quarter detector offset.
    down : positive int, optional
        Downsampling factor applied to the final geometry.

    Returns
    -------
    sg : `SinoGeometry`

    Examples
    --------
    >>> sg = sino_geom_par(nb=128)
    >>> sg.dim
    (128, 200)
    >>> float(sg.rfov)
    63.5
    """
    if na is None:
        na = _default_na(nb)
    orbit = _check_numeric_orbit(orbit, Beam.PAR)
    sg = SinoGeometry(Beam.PAR, nb, na, d=d, orbit=orbit,
                      orbit_start=orbit_start, offset=offset,
                      strip_width=strip_width, units=units)
    return downsample(sg, down)


def sino_geom_moj(units=None, nb=128, na=None, d=1.0, orbit=180.0,
                  orbit_start=0.0, strip_width=None, offset=0.0, down=1):
    """Return a mojette sinogram geometry.

    The parameters are the same as for `sino_geom_par`, except that ``d``
    is the pixel size ``dx`` of the (square) image grid. The effective
    radial spacing of each view is given by the derived property
    ``d_ang``.
    """
    if na is None:
        na = _default_na(nb)
    orbit = _check_numeric_orbit(orbit, Beam.MOJ)
    sg = SinoGeometry(Beam.MOJ, nb, na, d=d, orbit=orbit,
                      orbit_start=orbit_start, offset=offset,
                      strip_width=strip_width, units=units)
    return downsample(sg, down)


def sino_geom_fan(units=None, nb=128, na=None, d=1.0, orbit=360.0,
                  orbit_start=0.0, strip_width=None, offset=0.0,
                  source_offset=0.0, dsd=None, dod=None, dfs=0.0, down=1):
    """Return a fan beam sinogram geometry.

    Parameters
    ----------
    units, nb, na, d, orbit_start, strip_width, offset, down :
        See `sino_geom_par`.
    orbit : float or ``'short'``, optional
        Angular coverage in degrees. ``'short'`` selects a short scan of
        ``180`` degrees plus the fan angle.
    source_offset : float, optional
        Lateral source offset, same units as ``d``. Use with caution.
    dsd : positive float, optional
        Source to detector distance. Default: ``4 * nb * d``
    dod : float, optional
        Isocenter to detector distance. Default: ``nb * d``
    dfs : {0, inf}, optional
        Focal spot to source distance. ``0`` gives a 3rd generation arc
        detector, ``inf`` a flat detector.

    Returns
    -------
    sg : `SinoGeometry`

    Examples
    --------
    >>> sg = sino_geom_fan(nb=64, na=96, dsd=256, dod=64)
    >>> sg.dso
    192.0
    >>> sg_short = sino_geom_fan(nb=64, na=96, dsd=256, dod=64,
    ...                          orbit='short')
    >>> bool(np.isclose(sg_short.orbit, sg_short.orbit_short))
    True
    """
    nb = safe_int_conv(nb)
    if na is None:
        na = _default_na(nb)
    if dsd is None:
        dsd = 4 * nb * d
    if dod is None:
        dod = nb * d
    if source_offset != 0:
        warnings.warn('nonzero `source_offset` {} is poorly tested, use with '
                      'caution'.format(source_offset), UserWarning)

    params = dict(d=d, orbit_start=orbit_start, offset=offset,
                  strip_width=strip_width, source_offset=source_offset,
                  dsd=dsd, dod=dod, dfs=dfs, units=units)

    if is_string(orbit):
        if orbit != 'short':
            raise InvalidOrbitError("`orbit` must be a value in degrees or "
                                    "'short', got {!r}".format(orbit))
        sg_tmp = SinoGeometry(Beam.FAN, nb, na, orbit=0.0, **params)
        orbit = sg_tmp.orbit_short
        log.debug('resolved short scan orbit to %.4f degrees', orbit)

    sg = SinoGeometry(Beam.FAN, nb, na, orbit=orbit, **params)
    return downsample(sg, down)


# Scale factors of the scanner presets, which are defined in mm
_UNIT_SCALES = {'mm': 1, 'cm': 10}


def _unit_scale(units):
    try:
        return _UNIT_SCALES[units]
    except (KeyError, TypeError):
        raise InvalidUnitsError('units {!r} not supported, expected one of {}'
                                ''.format(units, sorted(_UNIT_SCALES)))


def _ge_lightspeed_params(units):
    """Detector geometry of the GE LightSpeed gantry in ``units``.

    These numbers are published in IEEE T-MI Oct. 2006, p.1272-1283.
    """
    scale = _unit_scale(units)
    return dict(units=units, d=1.0239 / scale, offset=1.25,
                dsd=949.075 / scale, dod=408.075 / scale, dfs=0.0)


def sino_geom_ge1(na=984, nb=888, orbit=360.0, units='mm', **kwargs):
    """Return the sinogram geometry of the GE LightSpeed system.

    Parameters
    ----------
    na, nb : positive int, optional
        Number of views and radial samples.
    orbit : float or ``'short'``, optional
        Angular coverage in degrees. For ``'short'``, the number of views
        is reduced to 642 and the orbit to the corresponding fraction of
        a full turn.
    units : {'mm', 'cm'}, optional
        Units of the geometry.
    kwargs :
        Further arguments to `sino_geom_fan`. They override the
        preset values.

    Examples
    --------
    >>> sg = sino_geom_ge1()
    >>> sg.dim
    (888, 984)
    >>> sino_geom_ge1(orbit='short').na
    642
    """
    if is_string(orbit) and orbit == 'short':
        na = 642  # reduced view count of the short scan
        orbit = na / 984 * 360
    params = _ge_lightspeed_params(units)
    params.update(nb=nb, na=na, orbit=orbit)
    params.update(kwargs)
    log.debug('GE LightSpeed preset: nb=%s, na=%s, units=%s',
              params['nb'], params['na'], units)
    return sino_geom_fan(**params)


def sino_geom_hd1(na=2 * 984, nb=888, orbit=360.0, units='mm', **kwargs):
    """Return the sinogram geometry of the GE high definition mode.

    Same gantry as `sino_geom_ge1`, with twice the number of views.
    A ``'short'`` orbit is resolved from the fan angle by
    `sino_geom_fan`.

    Examples
    --------
    >>> sino_geom_hd1().dim
    (888, 1968)
    """
    params = _ge_lightspeed_params(units)
    params.update(nb=nb, na=na, orbit=orbit)
    params.update(kwargs)
    log.debug('GE high definition preset: nb=%s, na=%s, units=%s',
              params['nb'], params['na'], units)
    return sino_geom_fan(**params)


_PRESETS = {
    'ge1': sino_geom_ge1,
    'hd1': sino_geom_hd1,
}

_BEAM_CONSTRUCTORS = {
    Beam.PAR: sino_geom_par,
    Beam.FAN: sino_geom_fan,
    Beam.MOJ: sino_geom_moj,
}


def sino_geom(how, **kwargs):
    """Create a sinogram geometry.

    Parameters
    ----------
    how : `Beam` or str
        ``'par'`` (or ``'parallel'``), ``'fan'``, ``'moj'`` (or
        ``'mojette'``), or one of the scanner presets ``'ge1'`` and
        ``'hd1'``.
    kwargs :
        Options passed on to the respective constructor, see
        `sino_geom_par`, `sino_geom_fan`, `sino_geom_moj`,
        `sino_geom_ge1` and `sino_geom_hd1`.

    Returns
    -------
    sg : `SinoGeometry`

    Raises
    ------
    UnknownVariantError
        If ``how`` is not recognized.

    Examples
    --------
    >>> sg = sino_geom('fan', nb=128, d=1, dsd=512, dod=128)
    >>> sg.beam
    <Beam.FAN: 'fan'>
    >>> sino_geom('moj').dim
    (128, 200)
    """
    if is_string(how) and how.lower() in _PRESETS:
        return _PRESETS[how.lower()](**kwargs)

    try:
        beam = Beam.from_name(how)
    except UnknownVariantError:
        raise UnknownVariantError(
            'unknown sinogram geometry type {!r}, expected one of {}'
            ''.format(how, ['par', 'parallel', 'fan', 'moj', 'mojette'] +
                      sorted(_PRESETS)))
    return _BEAM_CONSTRUCTORS[beam](**kwargs)


if __name__ == '__main__':
    from sinogeom.util.testutils import run_doctests
    run_doctests()
