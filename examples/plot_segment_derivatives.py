r"""
Derivatives of a Single Segment
===============================

.. currentmodule:: catmullrom

Each segment is a Hermite cubic for every axis. Its derivatives and antiderivative
are polynomials too, which can be requested with :class:`DerivedCurves`.
"""  # noqa: D205, D400

import numpy as np
from catmullrom import DerivedCurves, segment_curves
from matplotlib import pyplot as plt

pts = np.array([(0.0, 0.0), (1.0, 2.0), (3.0, 3.0), (4.0, 1.0)])

curves = segment_curves(
    pts, DerivedCurves(first_derivative=True, second_derivative=True)
)
assert curves.first_derivatives is not None
assert curves.second_derivatives is not None

s = np.linspace(0, 1, 128)
fig, axes = plt.subplots(1, 3, figsize=(12, 4))
for i, name in enumerate(("x", "y")):
    axes[0].plot(s, curves.polynomials[i](s), label=f"${name}(s)$")
    axes[1].plot(s, curves.first_derivatives[i](s), label=f"${name}'(s)$")
    axes[2].plot(s, curves.second_derivatives[i](s), label=f"${name}''(s)$")
for ax in axes:
    ax.set(xlabel="$s$")
    ax.legend()
    ax.grid()
fig.tight_layout()
plt.show()
