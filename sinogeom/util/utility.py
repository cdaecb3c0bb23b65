# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

from contextlib import contextmanager

import numpy as np

__all__ = (
    'indent',
    'npy_printoptions',
    'is_string',
    'safe_int_conv',
    'signature_string',
)


def indent(string, indent_str='    '):
    """Return a copy of ``string`` indented by ``indent_str``.

    Examples
    --------
    >>> print(indent('nb=128,\\nna=200'))
        nb=128,
        na=200
    >>> print(indent('nb=128', indent_str='<->'))
    <->nb=128
    """
    return '\n'.join(indent_str + row for row in string.splitlines())


@contextmanager
def npy_printoptions(**extra_opts):
    """Context manager to temporarily set NumPy print options.

    Examples
    --------
    >>> with npy_printoptions(precision=3):
    ...     np.get_printoptions()['precision']
    3
    """
    orig_opts = np.get_printoptions()

    try:
        new_opts = orig_opts.copy()
        new_opts.update(extra_opts)
        np.set_printoptions(**new_opts)
        yield

    finally:
        np.set_printoptions(**orig_opts)


def is_string(obj):
    """Return ``True`` if ``obj`` behaves like a string, ``False`` else."""
    try:
        obj + ''
    except TypeError:
        return False
    else:
        return True


def safe_int_conv(number):
    """Safely convert a single number to integer.

    Integral floats like ``4.0`` are accepted, anything that would lose
    information is not.

    Examples
    --------
    >>> safe_int_conv(4.0)
    4
    >>> safe_int_conv(4.5)
    Traceback (most recent call last):
        ...
    ValueError: cannot safely convert 4.5 to integer
    """
    if is_string(number) or isinstance(number, bool):
        raise ValueError('cannot safely convert {!r} to integer'
                         ''.format(number))
    try:
        as_int = int(number)
    except (TypeError, ValueError, OverflowError):
        raise ValueError('cannot safely convert {!r} to integer'
                         ''.format(number))
    if as_int != number:
        raise ValueError('cannot safely convert {!r} to integer'
                         ''.format(number))
    return as_int


def _arg_str(value):
    """Stringify a single signature value."""
    if is_string(value):
        return "'{}'".format(value)
    elif isinstance(value, (bool, np.bool_)) or not np.isscalar(value):
        return '{!r}'.format(value)
    elif isinstance(value, (int, np.integer)):
        return '{!r}'.format(int(value))
    elif str(value) in ('inf', '-inf', 'nan'):
        # Make sure the string quotes are added
        return "'{}'".format(value)
    else:
        # Floating point value, use numpy print option 'precision'
        precision = np.get_printoptions()['precision']
        return '{{:.{}}}'.format(precision).format(float(value))


def signature_string(posargs, optargs, sep=', '):
    """Return a stringified signature from given arguments.

    Parameters
    ----------
    posargs : sequence
        Positional argument values, always included in the returned string.
    optargs : sequence of 3-tuples
        Optional arguments with names and defaults, given in the form::

            [(name1, value1, default1), (name2, value2, default2), ...]

        Only those parameters that are different from the given default
        are included as ``name=value`` keyword pairs.
    sep : string, optional
        Separator for the argument strings.

    Returns
    -------
    signature : string
        Stringification of a signature, typically used in the form::

            '{}({})'.format(self.__class__.__name__, signature)

    Examples
    --------
    >>> signature_string(['fan'], [('nb', 888, 128), ('na', 200, 200)])
    "'fan', nb=888"
    >>> signature_string([], [('dfs', float('inf'), 0.0)])
    "dfs='inf'"
    >>> signature_string(['par'], [('d', 0.5, 1.0)], sep=',\\n')
    "'par',\\nd=0.5"
    """
    parts = [_arg_str(arg) for arg in posargs]
    for name, value, default in optargs:
        if value == default:
            # Don't include
            continue
        parts.append('{}={}'.format(name, _arg_str(value)))
    return sep.join(parts)


if __name__ == '__main__':
    from sinogeom.util.testutils import run_doctests
    run_doctests()
