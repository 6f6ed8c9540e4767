import sys
from typing import Optional, Protocol, Sequence, TextIO

CELL_WIDTH = 10


class Reporter(Protocol):
    def report(
        self,
        temperatures: Sequence[float],
        num_sections: int,
        label: Optional[str] = None,
    ) -> None: ...


def format_temperature(value: float) -> str:
    # Fixed-point only where one decimal is readable, scientific otherwise
    if 0.01 <= abs(value) < 1000:
        return f"{value:{CELL_WIDTH}.1f}"
    return f"{value:{CELL_WIDTH}.2e}"


def render_table(temperatures: Sequence[float], num_sections: int) -> str:
    if len(temperatures) != num_sections:
        raise ValueError(
            f"expected {num_sections} temperatures, got {len(temperatures)}"
        )
    border = "+" + "-" * (num_sections * (CELL_WIDTH + 1) - 1) + "+"
    row = "|" + "".join(format_temperature(t) + "|" for t in temperatures)
    return "\n".join([border, row, border])


class ConsoleReporter:
    """Prints each snapshot as a bordered one-row table."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def report(self, temperatures, num_sections, label=None):
        # Resolve stdout lazily so redirection after construction still applies
        out = self.stream if self.stream is not None else sys.stdout
        if label is not None:
            out.write(label + "\n")
        out.write(render_table(temperatures, num_sections) + "\n")
