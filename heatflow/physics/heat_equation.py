import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from heatflow.errors import InvalidConfiguration, NumericInstability, OutOfRange

logger = logging.getLogger(__name__)

ROD_LENGTH = 1.0  # arbitrary unit length


@dataclass(frozen=True, order=True)
class SourceSink:
    position: int  # section index
    strength: float  # heat rate, negative for a sink


class ThermalRod:
    def __init__(
        self,
        initial_temperature: float,
        num_sections: int,
        diffusivity: Sequence[float],
        dt: float,
        check_finite: bool = False,
    ):
        if num_sections < 3:
            raise InvalidConfiguration(
                f"num_sections must be at least 3, got {num_sections}"
            )
        if not np.isfinite(dt) or dt <= 0:
            raise InvalidConfiguration(f"dt must be a positive number, got {dt}")
        if not np.isfinite(initial_temperature):
            raise InvalidConfiguration(
                f"initial_temperature must be finite, got {initial_temperature}"
            )

        kappa = np.array(diffusivity, dtype=float)
        if kappa.shape != (num_sections,):
            raise InvalidConfiguration(
                f"expected {num_sections} diffusivity values, got {kappa.size}"
            )
        if not np.all(np.isfinite(kappa)) or np.any(kappa < 0):
            raise InvalidConfiguration("diffusivity values must be finite and >= 0")
        kappa.setflags(write=False)

        self.initial_temperature = float(initial_temperature)
        self.num_sections = num_sections
        self.rod_length = ROD_LENGTH
        self.dx = self.rod_length / (num_sections - 1)
        self.diffusivity = kappa
        self.dt = float(dt)
        self.check_finite = check_finite

        # State
        self.temperature = np.full(num_sections, self.initial_temperature)
        self.time = 0.0
        self.step_count = 0
        self._sources_sinks = set()

        logger.debug(
            "Created rod: %d sections, dx=%.4g, dt=%.4g", num_sections, self.dx, self.dt
        )
        # Explicit FDM stability: dt <= dx^2 / (2*kappa_max)
        if not self.is_stable:
            logger.warning(
                "dt=%.4g exceeds the explicit stability limit %.4g; "
                "temperatures may grow without bound",
                self.dt,
                self.stability_limit,
            )

    @property
    def stability_limit(self) -> float:
        kappa_max = float(self.diffusivity.max())
        if kappa_max == 0.0:
            return float("inf")
        return self.dx**2 / (2 * kappa_max)

    @property
    def is_stable(self) -> bool:
        return self.dt <= self.stability_limit

    @property
    def sources_sinks(self) -> Tuple[SourceSink, ...]:
        return tuple(sorted(self._sources_sinks))

    def add_source_sink(self, position: int, strength: float):
        """
        Register a constant heat term at a section index.
        Registering the same (position, strength) pair again has no effect.
        """
        if isinstance(position, bool) or not isinstance(position, (int, np.integer)):
            raise OutOfRange(f"position must be an integer index, got {position!r}")
        if not 0 <= position < self.num_sections:
            raise OutOfRange(
                f"position {position} outside [0, {self.num_sections - 1}]"
            )
        self._sources_sinks.add(SourceSink(int(position), float(strength)))

    def tick(self):
        """
        Advance simulation by one time-step of dt seconds.
        """
        T = self.temperature
        T_new = T.copy()

        # Interior nodes (1 to N-2), read only from the previous step
        d2T_dx2 = (T[2:] - 2 * T[1:-1] + T[:-2]) / self.dx**2
        T_new[1:-1] = T[1:-1] + self.diffusivity[1:-1] * d2T_dx2 * self.dt

        # Boundaries keep their previous values; sources may still touch them.
        # Injections are additive, so their order does not matter.
        for source in self._sources_sinks:
            T_new[source.position] += source.strength * self.dt

        self.temperature = T_new
        self.step_count += 1
        self.time = self.step_count * self.dt

        if self.check_finite and not np.all(np.isfinite(T_new)):
            raise NumericInstability(
                f"non-finite temperature after step {self.step_count} "
                f"(dt={self.dt}, stability limit={self.stability_limit:.4g})"
            )

    def run(self, steps: int):
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        for _ in range(steps):
            self.tick()

    def snapshot(self) -> np.ndarray:
        snap = self.temperature.copy()
        snap.setflags(write=False)
        return snap

    def reset(self):
        self.temperature = np.full(self.num_sections, self.initial_temperature)
        self.time = 0.0
        self.step_count = 0
