"""
Simulation configuration.

Defaults reproduce the reference scenario: a 15-section rod at 10 degrees,
a low-diffusivity middle third, and a single 100.0 source at the left end.
"""
from typing import List

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from heatflow.errors import InvalidConfiguration


def default_diffusivity() -> List[float]:
    return [0.1] * 5 + [0.01] * 5 + [0.1] * 5


class SourceConfig(BaseModel):
    position: int
    strength: float


class SimulationConfig(BaseModel):
    initial_temperature: float = 10.0
    num_sections: int = 15
    dt: float = 0.1
    diffusivity: List[float] = Field(default_factory=default_diffusivity)
    sources: List[SourceConfig] = Field(
        default_factory=lambda: [SourceConfig(position=0, strength=100.0)]
    )
    steps: int = 100
    report_every: int = 10

    @field_validator("num_sections")
    @classmethod
    def check_num_sections(cls, v: int) -> int:
        if v < 3:
            raise ValueError("num_sections must be at least 3")
        return v

    @field_validator("dt")
    @classmethod
    def check_dt(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("dt must be positive")
        return v

    @field_validator("steps")
    @classmethod
    def check_steps(cls, v: int) -> int:
        if v < 0:
            raise ValueError("steps must be >= 0")
        return v

    @field_validator("report_every")
    @classmethod
    def check_report_every(cls, v: int) -> int:
        if v < 1:
            raise ValueError("report_every must be >= 1")
        return v

    @model_validator(mode="after")
    def check_layout(self) -> "SimulationConfig":
        if len(self.diffusivity) != self.num_sections:
            raise ValueError(
                f"expected {self.num_sections} diffusivity values, "
                f"got {len(self.diffusivity)}"
            )
        for source in self.sources:
            if not 0 <= source.position < self.num_sections:
                raise ValueError(
                    f"source position {source.position} outside "
                    f"[0, {self.num_sections - 1}]"
                )
        return self


def load_config(**overrides) -> SimulationConfig:
    """Build a SimulationConfig, reporting bad values as InvalidConfiguration."""
    try:
        return SimulationConfig(**overrides)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e
