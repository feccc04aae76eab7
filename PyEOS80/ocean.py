"""
The UNESCO 1983 (EOS-80) equation of state for seawater. These are ported
from the CSIRO SEAWATER MATLAB toolbox (Phil Morgan and Lindsay Pender) and
follow its argument order and input shape rules.

The MATLAB toolbox can be found at:
    http://www.cmar.csiro.au/datacentre/ext_docs/seawater.htm

References:
    Fofonoff, P. & Millard, R.C. Unesco 1983. Algorithms for computation of
    fundamental properties of seawater, 1983. Unesco Tech. Pap. in Mar. Sci.,
    No. 44.

    Millero, F.J. and Poisson, A. International one-atmosphere equation of
    state of seawater. Deep-Sea Res. 1981. Vol28A(6) pp625-629.

    Millero, F.J., Chen, C.T., Bradshaw, A., and Schleicher, K. A new high
    pressure equation of state for seawater. Deep-Sea Research, 1980, Vol27A,
    pp255-264.

    Bryden, H. 1973. New polynomials for thermal expansion, adiabatic
    temperature gradient and potential temperature of sea water. Deep-Sea
    Res., 1973, Vol20, 401-408.

All functions take salinity first, then temperature and then any pressures:
    S  = salinity (PSS-78)
    T  = temperature (Celsius, ITS-90)
    P  = pressure (decibars)
    PR = reference pressure (decibars)

S and T must be the same shape. P and PR may be a scalar, a row with as many
columns as S, a column with as many rows as S or the same shape as S. Results
are returned in the shape of S.

No checks are made on the physical validity of the inputs (e.g. negative
salinities give NaNs). Use check_ranges if you want to be told about values
outside the range of the UNESCO 1983 fits.

Provides functions:
    - sw_smow : calculate density of Standard Mean Ocean Water
    - sw_dens0 : calculate seawater density at atmospheric surface pressure
    - sw_seck : calculate Secant Bulk Modulus (K) of seawater
    - sw_dens : calculate density from salinity, temperature and pressure
    - sw_adtg : calculate adiabatic temperature gradient
    - sw_ptmp : calculate potential temperature for sea water
    - sw_pden : calculate potential density for sea water
    - sw_svan : calculate specific volume anomaly
    - check_ranges : report values outside the UNESCO 1983 validity ranges

"""

import numpy as np
from numpy.polynomial.polynomial import polyval

from PyEOS80.utilities.arrays import check_same_shape, broadcast_pressure, restore_shape
from PyEOS80.utilities.general import fixed_arguments, warn


# Conversion constant to T68 temperature scale.
c68 = 1.00024

# Coefficient tables. Each is in ascending order of power so can be given straight to polyval.

# UNESCO 1983 eqn 14, p17.
smow_coefficients = (999.842594, 6.793952e-2, -9.095290e-3, 1.001685e-4, -1.120083e-6, 6.536332e-9)

# UNESCO 1983 eqn 13, p17.
dens0_b = (8.24493e-1, -4.0899e-3, 7.6438e-5, -8.2467e-7, 5.3875e-9)
dens0_c = (-5.72466e-3, 1.0227e-4, -1.6546e-6)
dens0_d0 = 4.8314e-4

# Pure water terms of the secant bulk modulus at atmospheric pressure (UNESCO 1983 eqn 19, p18).
seck_h = (3.239908, 1.43713e-3, 1.16092e-4, -5.77905e-7)
seck_k = (8.50935e-5, -6.12293e-6, 5.2787e-8)
seck_e = (19652.21, 148.4206, -2.327105, 1.360477e-2, -5.155288e-5)

# Sea water terms of the secant bulk modulus at atmospheric pressure (UNESCO 1983 eqns 16-18, p18).
seck_i = (2.2838e-3, -1.0981e-5, -1.6078e-6)
seck_j0 = 1.91075e-4
seck_m = (-9.9348e-7, 2.0816e-8, 9.1697e-10)
seck_f = (54.6746, -0.603459, 1.09987e-2, -6.1670e-5)
seck_g = (7.944e-2, 1.6483e-2, -5.3009e-4)

# Adiabatic temperature gradient (Bryden, 1973).
adtg_a = (3.5803e-5, 8.5258e-6, -6.836e-8, 6.6228e-10)
adtg_b = (1.8932e-6, -4.2393e-8)
adtg_c = (1.8741e-8, -6.7795e-10, 8.733e-12, -5.4481e-14)
adtg_d = (-1.1351e-10, 2.7759e-12)
adtg_e = (-4.6206e-13, 1.8676e-14, -2.1687e-16)

# Validity ranges (minimum, maximum) of the UNESCO 1983 fits.
valid_ranges = {'temperature': (-2, 40), 'salinity': (0, 42), 'pressure': (0, 10000)}


class OutOfRangeError(ValueError):
    """ Raised by check_ranges in strict mode when inputs fall outside the valid ranges. """
    pass


@fixed_arguments
def sw_smow(t):
    """
    Calculate the density of Standard Mean Ocean Water (pure water).

    Parameters
    ----------
    t : ndarray
        Temperature in degrees Celsius. Any shape.

    Returns
    -------
    rho : ndarray
        Density in kg m^{-3}.

    """

    T68 = np.asarray(t, dtype=float) * c68

    return polyval(T68, smow_coefficients)


@fixed_arguments
def sw_dens0(s, t):
    """
    Calculate sea water density at atmospheric surface pressure.

    Parameters
    ----------
    s : ndarray
        Salinity (PSU).
    t : ndarray
        Temperature in degrees Celsius. Must be the same shape as s.

    Returns
    -------
    dens : ndarray
        Seawater density at atmospheric surface pressure (kg m^{-3}).

    """

    S, T = check_same_shape(s, t)

    T68 = T * c68

    dens = sw_smow(T) + polyval(T68, dens0_b) * S + polyval(T68, dens0_c) * S * np.sqrt(S) + dens0_d0 * S**2

    return restore_shape(dens, s)


@fixed_arguments
def sw_seck(s, t, p):
    """
    Calculate Secant Bulk Modulus (K) of seawater.

    Parameters
    ----------
    s : ndarray
        Salinity in practical salinity units (unitless).
    t : ndarray
        Temperature in degrees Celsius. Must be the same shape as s.
    p : ndarray
        Pressure in decibars. Scalar, row, column or the same shape as s.

    Returns
    -------
    k : ndarray
        Secant Bulk Modulus of seawater (bar).

    """

    S, T = check_same_shape(s, t)
    P = broadcast_pressure(p, S.shape, 'P')

    # Compression terms
    T68 = T * c68
    Patm = P / 10.0  # convert to bar

    AW = polyval(T68, seck_h)
    BW = polyval(T68, seck_k)
    KW = polyval(T68, seck_e)

    # K at atmospheric pressure
    SR = np.sqrt(S)

    A = AW + (polyval(T68, seck_i) + seck_j0 * SR) * S
    B = BW + polyval(T68, seck_m) * S  # Equation 18
    K0 = KW + (polyval(T68, seck_f) + polyval(T68, seck_g) * SR) * S  # Equation 16

    # K at s, t, p
    K = K0 + (A + B * Patm) * Patm  # Equation 15

    return restore_shape(K, s)


@fixed_arguments
def sw_dens(s, t, p):
    """
    Convert salinity, temperature and pressure to density.

    Parameters
    ----------
    s : ndarray
        Salinity in practical salinity units (unitless).
    t : ndarray
        Temperature in degrees Celsius. Must be the same shape as s.
    p : ndarray
        Pressure in decibars. Scalar, row, column or the same shape as s.

    Returns
    -------
    rho : ndarray
        Density in kg m^{-3}.

    Notes
    -----
    Valid temperature range is -2 to 40C, salinity is 0-42 and pressure is
    0-10000 decibars. Values outside these ranges are not flagged; see
    check_ranges.

    """

    S, T = check_same_shape(s, t)
    P = broadcast_pressure(p, S.shape, 'P')

    dens0 = sw_dens0(S, T)
    k = sw_seck(S, T, P)
    Patm = P / 10.0  # pressure in bars
    rho = dens0 / (1 - Patm / k)

    return restore_shape(rho, s)


@fixed_arguments
def sw_adtg(s, t, p):
    """
    Calculate adiabatic temperature gradient (degrees Celsius dbar^{-1})

    Parameters
    ----------
    s : ndarray
        Salinity (PSU)
    t : ndarray
        Temperature (Celsius). Must be the same shape as s.
    p : ndarray
        Pressure (decibars). Scalar, row, column or the same shape as s.

    Returns
    -------
    atg : ndarray
        Adiabatic temperature gradient

    """

    S, T = check_same_shape(s, t)
    P = broadcast_pressure(p, S.shape, 'P')

    T68 = T * c68  # convert to 1968 temperature scale

    atg = polyval(T68, adtg_a) + polyval(T68, adtg_b) * (S - 35) + \
        (polyval(T68, adtg_c) + polyval(T68, adtg_d) * (S - 35)) * P + \
        polyval(T68, adtg_e) * P * P

    return restore_shape(atg, s)


@fixed_arguments
def sw_ptmp(s, t, p, pr):
    """
    Calculate potential temperature for seawater from salinity, temperature
    and pressure relative to a reference pressure.

    The adiabatic temperature gradient is integrated from p to pr with the
    fourth order Runge-Kutta scheme of Fofonoff (1977) (UNESCO 1983 eqn 31,
    p39).

    Parameters
    ----------
    s : ndarray
        Salinity in practical salinity units (unitless).
    t : ndarray
        Temperature in degrees Celsius. Must be the same shape as s.
    p : ndarray
        Pressure in decibars. Scalar, row, column or the same shape as s.
    pr : ndarray
        Reference pressure in decibars. Scalar, row, column or the same shape
        as s.

    Returns
    -------
    th : ndarray
        Potential temperature (Celsius)

    """

    S, T = check_same_shape(s, t)
    P = broadcast_pressure(p, S.shape, 'P')
    PR = broadcast_pressure(pr, S.shape, 'PR')

    dP = PR - P  # pressure difference.

    # 1st iteration
    dth = dP * sw_adtg(S, T, P)
    th = (T * c68) + (0.5 * dth)
    q = dth

    # 2nd iteration
    dth = dP * sw_adtg(S, th / c68, (P + (0.5 * dP)))
    th = th + ((1 - (1 / np.sqrt(2))) * (dth - q))
    q = ((2 - np.sqrt(2)) * dth) + ((-2 + (3 / np.sqrt(2))) * q)

    # 3rd iteration
    dth = dP * sw_adtg(S, th / c68, (P + (0.5 * dP)))
    th = th + ((1 + (1 / np.sqrt(2))) * (dth - q))
    q = ((2 + np.sqrt(2)) * dth) + ((-2 - (3 / np.sqrt(2))) * q)

    # 4th iteration
    dth = dP * sw_adtg(S, th / c68, (P + dP))
    th = (th + (dth - (2 * q)) / 6) / c68

    return restore_shape(th, s)


@fixed_arguments
def sw_pden(s, t, p, pr):
    """
    Calculate potential density relative to the reference pressure pr (Gill,
    1982, p54). Input shapes are checked by sw_ptmp and sw_dens.

    Parameters
    ----------
    s, t, p, pr : ndarray
        As for sw_ptmp.

    Returns
    -------
    pden : ndarray
        Potential density in kg m^{-3}.

    """

    th = sw_ptmp(s, t, p, pr)

    return sw_dens(s, th, pr)


@fixed_arguments
def sw_svan(s, t, p):
    """
    Calculate the specific volume (steric) anomaly relative to a standard
    ocean of salinity 35 and temperature 0C at the same pressure.

    Parameters
    ----------
    s : ndarray
        Salinity in practical salinity units (unitless).
    t : ndarray
        Temperature in degrees Celsius. Must be the same shape as s.
    p : ndarray
        Pressure in decibars. Scalar, row, column or the same shape as s.

    Returns
    -------
    svan : ndarray
        Specific Volume Anomaly in m^{3} kg^{-1}.

    """

    S, T = check_same_shape(s, t)
    P = broadcast_pressure(p, S.shape, 'P')

    rho = sw_dens(S, T, P)
    rho0 = sw_dens(np.full(S.shape, 35.0), np.zeros(S.shape), P)
    svan = (1 / rho) - (1 / rho0)

    return restore_shape(svan, s)


def check_ranges(s, t, p, strict=False):
    """
    Check salinity, temperature and pressure against the ranges over which the
    UNESCO 1983 polynomials are valid (see `valid_ranges').

    A warning is issued for each limit which is exceeded.

    Parameters
    ----------
    s : ndarray
        Salinity (PSU).
    t : ndarray
        Temperature (Celsius). Must be the same shape as s.
    p : ndarray
        Pressure (decibars). Scalar, row, column or the same shape as s.
    strict : bool, optional
        Set to True to raise an OutOfRangeError if any value is out of range.
        Defaults to False (warn only).

    Returns
    -------
    valid : ndarray
        Boolean array (shape of s) which is True where all three inputs are
        within range.

    """

    S, T = check_same_shape(s, t)
    P = broadcast_pressure(p, S.shape, 'P')

    valid = np.ones(S.shape, dtype=bool)
    failures = []
    for name, data, units in (('temperature', T, 'C'), ('salinity', S, ' PSU'), ('pressure', P, ' decibar')):
        minimum, maximum = valid_ranges[name]

        n = np.sum(data < minimum)
        if n:
            failures.append('{} values below minimum {} value ({}{})'.format(n, name, minimum, units))

        n = np.sum(data > maximum)
        if n:
            failures.append('{} values above maximum {} value ({}{})'.format(n, name, maximum, units))

        valid &= (data >= minimum) & (data <= maximum)

    for failure in failures:
        warn(failure)

    if strict and failures:
        raise OutOfRangeError('; '.join(failures))

    return restore_shape(valid, s)
