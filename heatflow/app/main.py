import logging
from typing import List, Optional, Tuple

import numpy as np

from heatflow.app.reporter import ConsoleReporter, Reporter
from heatflow.config import SimulationConfig
from heatflow.logging_config import setup_logging
from heatflow.physics.heat_equation import ThermalRod

logger = logging.getLogger(__name__)


class SimulationManager:
    def __init__(self, config: Optional[SimulationConfig] = None, reporter: Optional[Reporter] = None):
        self.config = config or SimulationConfig()
        self.reporter = reporter or ConsoleReporter()
        self.rod = self._build_rod()

    def _build_rod(self) -> ThermalRod:
        rod = ThermalRod(
            initial_temperature=self.config.initial_temperature,
            num_sections=self.config.num_sections,
            diffusivity=self.config.diffusivity,
            dt=self.config.dt,
        )
        for source in self.config.sources:
            rod.add_source_sink(source.position, source.strength)
        return rod

    def _report(self, label: str):
        self.reporter.report(self.rod.snapshot(), self.rod.num_sections, label=label)

    def run(self) -> List[Tuple[float, np.ndarray]]:
        """
        Tick the rod config.steps times, reporting the initial state and
        every config.report_every-th step.

        Returns (elapsed time, temperature snapshot) for each report.
        """
        cfg = self.config
        logger.info(
            "Running %d steps of dt=%g on %d sections", cfg.steps, cfg.dt, cfg.num_sections
        )

        history = [(0.0, self.rod.snapshot())]
        self._report("Initial state:")

        for i in range(cfg.steps):
            self.rod.tick()
            if i % cfg.report_every == cfg.report_every - 1:
                elapsed = (i + 1) * cfg.dt
                history.append((elapsed, self.rod.snapshot()))
                self._report(f"After {elapsed:.1f} seconds:")

        logger.info("Finished after %d steps (t=%.1f s)", self.rod.step_count, self.rod.time)
        return history

    def reset(self):
        self.rod = self._build_rod()


def main() -> int:
    setup_logging()
    manager = SimulationManager()
    manager.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
