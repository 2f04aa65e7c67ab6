"""Variable selection.

Selection is an index into a dataset's immutable variable tuple, so the
"exactly one visible variable" rule holds by construction.
"""

from __future__ import annotations

from collections.abc import Sequence

from pyskope.models.metadata import Variable


def select_variable(variables: Sequence[Variable], variable_id: str) -> int | None:
    """Return the index of the variable with *variable_id*, or ``None``.

    If the catalog lists the same id more than once, the last entry wins.
    """
    selected: int | None = None
    for index, variable in enumerate(variables):
        if variable.id == variable_id:
            selected = index
    return selected


def first_variable_index(variables: Sequence[Variable]) -> int | None:
    return 0 if variables else None


def with_visibility(variables: Sequence[Variable], selected: int | None) -> tuple[Variable, ...]:
    """Copies of *variables* with ``visible`` set only on the selected entry."""
    return tuple(
        variable.model_copy(update={"visible": index == selected}) for index, variable in enumerate(variables)
    )
