# MIT License (see LICENSE)
import numpy as np
import pytest

from orbit_burst.types import Body
from orbit_burst.collision.resolver import resolve_collisions
from orbit_burst.core.invariants import total_mass, kinetic_energy, linear_momentum


def test_diagnostics():
    """
    T = 0.5 * 2 * (3² + 4²) + 0.5 * 1 * 1² = 25.5
    P = 2 * (3, 4) + 1 * (-1, 0) = (5, 8)
    """
    bodies = [
        Body(velocity=(3.0, 4.0), mass=2.0),
        Body(velocity=(-1.0, 0.0), mass=1.0),
    ]
    assert total_mass(bodies) == 3.0
    assert kinetic_energy(bodies) == pytest.approx(25.5)
    assert np.allclose(linear_momentum(bodies), [5.0, 8.0])


def test_merge_conserves_mass_not_energy():
    a = Body(position=(0.0, 0.0), velocity=(2.0, 0.0), radius=5.0, mass=3.0)
    b = Body(position=(9.0, 0.0), velocity=(-1.0, 0.0), radius=5.0, mass=1.0)
    a.id, b.id = 1, 2
    bodies = [a, b]
    m0, ke0 = total_mass(bodies), kinetic_energy(bodies)

    resolve_collisions(bodies)

    assert bodies == [a]
    assert total_mass(bodies) == pytest.approx(m0)
    assert kinetic_energy(bodies) != pytest.approx(ke0)
