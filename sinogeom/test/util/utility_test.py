# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test internal utilities."""

import pytest
import numpy as np

import sinogeom
from sinogeom.util.utility import (
    indent, is_string, npy_printoptions, safe_int_conv, signature_string)
from sinogeom.util.testutils import all_almost_equal, all_equal


def test_is_string():
    assert is_string('mm')
    assert not is_string(1)
    assert not is_string(None)


def test_safe_int_conv():
    assert safe_int_conv(3) == 3
    assert safe_int_conv(3.0) == 3
    assert safe_int_conv(np.int64(7)) == 7
    for bad in (3.5, 'a', None, float('nan'), float('inf'), True):
        with pytest.raises(ValueError):
            safe_int_conv(bad)


def test_signature_string():
    assert signature_string([], []) == ''
    assert signature_string(['fan', 888], [('d', 1.0, 1.0)]) == "'fan', 888"
    assert (signature_string([], [('d', 0.25, 1.0), ('units', 'mm', None)])
            == "d=0.25, units='mm'")
    assert signature_string([float('inf')], []) == "'inf'"
    with npy_printoptions(precision=3):
        assert signature_string([1.0239], []) == '1.02'


def test_indent():
    assert indent('a\nb') == '    a\n    b'


def test_all_equal():
    assert all_equal([1, 2], [1, 2])
    assert all_equal(np.arange(3), [0, 1, 2])
    assert not all_equal([1, 2], [1, 2, 3])
    assert not all_equal(np.arange(3), [0, 1, 3])


def test_all_almost_equal():
    assert all_almost_equal(np.ones(3), np.ones(3) + 1e-9)
    assert all_almost_equal((1.0, 2.0), (1.0, 2.0 + 1e-9))
    assert not all_almost_equal(np.ones(3), np.zeros(3))


if __name__ == '__main__':
    sinogeom.util.test_file(__file__)
