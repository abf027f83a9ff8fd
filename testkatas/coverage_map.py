"""Records which statements of each function have run."""

from __future__ import annotations


class CoverageMap:
    """Per-function record of executed statement slots."""

    def __init__(self) -> None:
        self._functions: dict[str, list[bool]] = {}

    def append(self, function_name: str, num_elements: int) -> None:
        """Register a function with ``num_elements`` slots; re-registering is ignored."""
        if num_elements < 0:
            raise ValueError("num_elements must not be negative")
        self._functions.setdefault(function_name, [False] * num_elements)

    def executed(self, function_name: str, element: int) -> None:
        """Mark one slot of a registered function as executed."""
        slots = self._functions[function_name]
        if not 0 <= element < len(slots):
            raise IndexError(f"element {element} out of range for {function_name!r}")
        slots[element] = True

    def percentages(self) -> dict[str, float]:
        """Percent of slots executed per function, in name order.

        A function with no slots counts as fully covered.
        """
        return {
            name: (100.0 * sum(slots) / len(slots)) if slots else 100.0
            for name, slots in sorted(self._functions.items())
        }

    def report(self) -> str:
        """Coverage summary, one line per function."""
        lines = "".join(
            f"function {name}: {percent:.2f}\n"
            for name, percent in self.percentages().items()
        )
        return "\n\n" + lines