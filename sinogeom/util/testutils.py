# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Testing utilities."""

import os
from itertools import zip_longest

import numpy as np

from sinogeom.util.utility import is_string


__all__ = (
    'all_equal',
    'all_almost_equal',
    'simple_fixture',
    'test',
    'run_doctests',
    'test_file',
)


def all_equal(iter1, iter2):
    """Return ``True`` if all elements in ``a`` and ``b`` are equal."""
    # Direct comparison for scalars, tuples or lists
    try:
        if iter1 == iter2:
            return True
    except ValueError:  # Raised by NumPy when comparing arrays
        pass

    # Special case for None
    if iter1 is None and iter2 is None:
        return True

    # If one nested iterator is exhausted, go to direct comparison
    try:
        it1 = iter(iter1)
        it2 = iter(iter2)
    except TypeError:
        try:
            return iter1 == iter2
        except ValueError:  # Raised by NumPy when comparing arrays
            return False

    diff_length_sentinel = object()

    # Compare element by element and return False if the sequences have
    # different lengths
    for [ip1, ip2] in zip_longest(it1, it2,
                                  fillvalue=diff_length_sentinel):
        if ip1 is diff_length_sentinel or ip2 is diff_length_sentinel:
            return False

        if not all_equal(ip1, ip2):
            return False

    return True


def all_almost_equal(iter1, iter2, ndigits=5):
    """Return ``True`` if all elements in ``a`` and ``b`` are almost equal.

    Arrays are compared with `numpy.allclose` using relative and absolute
    tolerance ``10 ** -ndigits``; array shapes must be broadcastable.
    """
    try:
        if iter1 is iter2 or iter1 == iter2:
            return True
    except ValueError:
        pass

    if iter1 is None and iter2 is None:
        return True

    if hasattr(iter1, '__array__') or hasattr(iter2, '__array__'):
        return np.allclose(iter1, iter2,
                           rtol=10 ** -ndigits, atol=10 ** -ndigits,
                           equal_nan=True)

    try:
        it1 = iter(iter1)
        it2 = iter(iter2)
    except TypeError:
        return bool(np.isclose(iter1, iter2,
                               atol=10 ** -ndigits, rtol=10 ** -ndigits,
                               equal_nan=True))

    diff_length_sentinel = object()
    for [ip1, ip2] in zip_longest(it1, it2,
                                  fillvalue=diff_length_sentinel):
        if ip1 is diff_length_sentinel or ip2 is diff_length_sentinel:
            return False

        if not all_almost_equal(ip1, ip2, ndigits):
            return False

    return True


def simple_fixture(name, params, fmt=None):
    """Helper to create a pytest fixture using only name and params.

    Parameters
    ----------
    name : str
        Name of the parameters used for the ``ids`` argument
        to `pytest.fixture`.
    params : sequence
        Values to be taken as parameters in the fixture.
    fmt : str, optional
        Use this format string for the generation of the ``ids``.
        For each value, the id string is generated as ::

            fmt.format(name=name, value=value)

        hence the format string must use ``{name}`` and ``{value}``.
        Default format strings are:

            - ``" {name}='{value}' "`` for string parameters,
            - ``" {name}={value} "`` for other types.
    """
    import pytest

    if fmt is None:
        ids = []
        for p in params:
            if is_string(p):
                ids.append(" {name}='{value}' ".format(name=name, value=p))
            else:
                ids.append(' {name}={value} '.format(name=name, value=p))
    else:
        ids = [fmt.format(name=name, value=p) for p in params]

    wrapper = pytest.fixture(scope='module', ids=ids, params=params)
    return wrapper(lambda request: request.param)


def test(arguments=None):
    """Run sinogeom tests given by arguments."""
    try:
        import pytest
    except ImportError:
        raise ImportError(
            'sinogeom tests cannot be run without `pytest` installed.\n'
            'Run `$ pip install [--user] sinogeom[testing]` in order to '
            'install `pytest`.'
        )

    this_dir = os.path.dirname(__file__)
    pkg_root = os.path.abspath(os.path.join(this_dir, os.pardir))

    args = [pkg_root, '-p', 'sinogeom.util.pytest_config']
    if arguments is not None:
        args.extend(arguments)

    return pytest.main(args)


def run_doctests(skip_if=False, **kwargs):
    """Run all doctests in the current module.

    This function calls ``doctest.testmod()``, by default with the options
    ``optionflags=doctest.NORMALIZE_WHITESPACE`` and
    ``extraglobs={'sinogeom': sinogeom, 'np': np}``. This can be changed
    with keyword arguments.

    Parameters
    ----------
    skip_if : bool
        For ``True``, skip the doctests in this module.
    kwargs :
        Extra keyword arguments passed on to the ``doctest.testmod``
        function.
    """
    from doctest import testmod, NORMALIZE_WHITESPACE, SKIP
    import sinogeom

    optionflags = kwargs.pop('optionflags', NORMALIZE_WHITESPACE)
    if skip_if:
        optionflags |= SKIP

    extraglobs = kwargs.pop('extraglobs', {'sinogeom': sinogeom, 'np': np})
    testmod(optionflags=optionflags, extraglobs=extraglobs, **kwargs)


def test_file(file, args=None):
    """Run tests in file with proper default arguments."""
    try:
        import pytest
    except ImportError:
        raise ImportError('sinogeom tests cannot be run without `pytest` '
                          'installed.\nRun `$ pip install [--user] '
                          'sinogeom[testing]` in order to install `pytest`.')

    if args is None:
        args = []

    args.extend([str(file.replace('\\', '/')), '-v', '--capture=sys'])

    return pytest.main(args)


if __name__ == '__main__':
    run_doctests()
