"""
Shape checking and pressure broadcasting shared by the equation of state functions in PyEOS80.ocean.

Salinity defines the reference m x n shape. Temperature must match it exactly, whereas pressure-like arguments may
be given as a scalar (1 x 1), a row (1 x n), a column (m x 1) or a full m x n array. Scalars and 1D arrays are
treated as 1 x 1 and 1 x n respectively.

"""

import numpy as np


class ShapeMismatch(ValueError):
    """ Raised when an argument cannot be reconciled with the shape of the salinity array. """

    def __init__(self, argument, shape, expected):
        self.argument = argument
        self.shape = shape
        self.expected = expected
        if argument == 'S':
            message = 'S has wrong dimensions {}: must have at most two dimensions'.format(shape)
        elif argument == 'T':
            message = 'S & T must have same dimensions (S is {}, T is {})'.format(expected, shape)
        else:
            m, n = expected
            message = '{} has wrong dimensions {}: must be 1x1, 1x{n}, {m}x1 or {m}x{n} to match S'.format(
                argument, shape, m=m, n=n)
        super().__init__(message)


def _as_matrix(x):
    """ Return `x' as a floating point array with at least two dimensions. """
    return np.atleast_2d(np.asarray(x, dtype=float))


def check_same_shape(s, t):
    """
    Check salinity and temperature have identical shapes.

    Parameters
    ----------
    s : array_like
        Salinity. At most two dimensions.
    t : array_like
        Temperature. Must be the same shape as `s'.

    Returns
    -------
    s, t : ndarray
        The inputs as two-dimensional floating point arrays.

    Raises
    ------
    ShapeMismatch
        If `s' has more than two dimensions or `t' differs in shape from `s'.

    """

    s = _as_matrix(s)
    t = _as_matrix(t)

    if s.ndim > 2:
        raise ShapeMismatch('S', s.shape, None)
    if t.shape != s.shape:
        raise ShapeMismatch('T', t.shape, s.shape)

    return s, t


def broadcast_pressure(x, shape, name):
    """
    Expand a pressure-like array to the shape of the salinity data.

    The four cases are checked in order and the first one which matches is used:
        1. 1 x 1 - replicated to m x n.
        2. 1 x n - copied down each of the m rows.
        3. m x 1 - copied across each of the n columns.
        4. m x n - returned as is.

    Parameters
    ----------
    x : array_like
        Pressure (or reference pressure) in decibars.
    shape : tuple
        The (m, n) shape of the salinity array.
    name : str
        Name of the argument being expanded, used in the error message (e.g. 'P' or 'PR').

    Returns
    -------
    expanded : ndarray
        A new m x n array. The caller's `x' is never modified.

    Raises
    ------
    ShapeMismatch
        If `x' matches none of the four cases.

    """

    x = _as_matrix(x)
    ms, ns = shape

    if x.ndim != 2:
        raise ShapeMismatch(name, x.shape, shape)

    mx, nx = x.shape
    if mx == 1 and nx == 1:
        expanded = np.full(shape, x[0, 0])
    elif mx == 1 and nx == ns:
        expanded = np.repeat(x, ms, axis=0)
    elif mx == ms and nx == 1:
        expanded = np.repeat(x, ns, axis=1)
    elif mx == ms and nx == ns:
        expanded = x.copy()
    else:
        raise ShapeMismatch(name, x.shape, shape)

    return expanded


def restore_shape(result, reference):
    """ Give `result' the shape of `reference' as originally supplied by the caller. """
    return np.reshape(result, np.shape(reference))
