"""State layer.

:class:`DatasetSession` is the single owner of mutable session data:
the selected dataset and variable, the drawn study area, the temporal
range and the status of the latest time-series fetch.
"""

from pyskope.state.events import Mutation, SessionListener
from pyskope.state.selection import first_variable_index, select_variable
from pyskope.state.store import DatasetSession

__all__ = [
    "DatasetSession",
    "Mutation",
    "SessionListener",
    "first_variable_index",
    "select_variable",
]
