"""
Blasius flat-plate solution and generation of precomputed delta_99 tables.

The viewer never solves anything at runtime; this module produces the
static CSV resource it reads.
"""

import io
from typing import Iterable

import numpy as np
from loguru import logger
from scipy.integrate import solve_ivp
from scipy.optimize import fsolve

CSV_HEADER = "nu,uInf,x,reX,delta99"

def blasiusEqn(eta, y):
    "RHS of the Blasius equations f''' = -f'' * f/2 for f, g=f', h=f''"
    f, g, h = y
    return g, h, -h*f/2

def shoot_boundary_condition(h0, eta_max=10.0):
    """
    Target function to find correct wall shear h0: f'(eta_max) = 1.
    """
    f0, g0 = 0, 0
    res = solve_ivp(
        fun=blasiusEqn,
        t_span=(0, eta_max),
        y0=np.array([f0, g0, np.atleast_1d(h0)[0]], dtype=float),
        max_step=0.1
    )
    return 1.0 - res.y[1][-1]

def blasius(eta_max=10.0):
    """
    Solve for the Blasius equations.
    Returns eta, u, du/deta
    """
    h0 = fsolve(shoot_boundary_condition, 0.3, args=(eta_max,))[0]
    res = solve_ivp(
        fun=blasiusEqn,
        t_span=(0, eta_max),
        y0=np.array([0.0, 0.0, h0], dtype=float),
        max_step=0.01
    )
    return res.t, res.y[1], res.y[2]

class Blasius:
    def __init__(self):
        self.eta, self.u, self.dudeta = blasius()

    @property
    def wall_shear(self):
        "f''(0), about 0.332"
        return self.dudeta[0]

    def eta_at(self, fraction=0.99):
        '''
        Similarity coordinate where u / Uinf first reaches ``fraction``.
        eta = y * sqrt(Uinf / (nu x)), so eta_at(0.99) is about 4.91.
        '''
        i = int(np.argmax(self.u >= fraction))
        if self.u[i] < fraction:
            raise ValueError(f"u never reaches {fraction} within eta <= {self.eta[-1]}")
        if i == 0:
            return self.eta[0]
        # Linear interpolation inside the bracketing step
        u0, u1 = self.u[i - 1], self.u[i]
        e0, e1 = self.eta[i - 1], self.eta[i]
        return e0 + (fraction - u0) * (e1 - e0) / (u1 - u0)

    def delta99(self, nu, u_inf, x):
        '''
        Boundary-layer thickness delta_99 = eta_99 * sqrt(nu x / Uinf).
        Broadcasts over array arguments.
        '''
        x = np.asarray(x, dtype=float)
        return self.eta_at(0.99) * np.sqrt(nu * x / u_inf)


def generate_dataset(
    nu_values: Iterable[float],
    u_inf_values: Iterable[float],
    x_values: Iterable[float],
    solution: Blasius = None,
) -> str:
    """
    Tabulate delta_99 for every (nu, U_inf, x) combination.

    Parameters
    ----------
    nu_values : iterable of float
        Kinematic viscosities [m^2/s].
    u_inf_values : iterable of float
        Free-stream velocities [m/s].
    x_values : iterable of float
        Streamwise stations [m].
    solution : Blasius, optional
        Reuse an already solved profile.

    Returns
    -------
    str
        CSV text with a header line and one row per combination.
    """
    solution = solution or Blasius()
    nu_values = list(nu_values)
    u_inf_values = list(u_inf_values)
    x = np.asarray(list(x_values), dtype=float)

    buf = io.StringIO()
    buf.write(CSV_HEADER + "\n")
    n_rows = 0
    for nu in nu_values:
        for u_inf in u_inf_values:
            re_x = u_inf * x / nu
            delta = solution.delta99(nu, u_inf, x)
            for xi, rei, di in zip(x, re_x, delta):
                buf.write(f"{float(nu)!r},{float(u_inf)!r},{float(xi)!r},{float(rei)!r},{float(di)!r}\n")
                n_rows += 1

    logger.info(f"Generated {n_rows} rows (eta_99 = {solution.eta_at(0.99):.4f})")
    return buf.getvalue()
