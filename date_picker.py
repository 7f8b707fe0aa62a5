"""Date-picker state machine and the contract it offers its host.

Toolkit-free: the tkinter widget in ``picker_widget`` only renders the state
kept here and forwards user actions to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Protocol

from calendar_logic import DayCell, add_months, build_month_grid
from persian_calendar import (
    CalendarFormatter,
    as_date,
    day_label,
    gregorian_to_persian_text,
    month_name,
    persian_labels,
    persian_text_to_gregorian,
    year_label,
)

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "تاریخ:"
DEFAULT_PLACEHOLDER = "انتخاب تاریخ"


@dataclass(frozen=True)
class PickerState:
    """Snapshot handed to state listeners after each transition."""

    selected_date: date | None
    displayed_month: date
    is_open: bool


@dataclass(frozen=True)
class DateChangeEvent:
    """Emitted to the host on every successful selection."""

    persian_text: str
    gregorian: date
    year_label: str
    month_label: str
    day_label: str


# ------------------------------------------------------------------
# Outside-pointer dismissal
# ------------------------------------------------------------------
class DismissalSource(Protocol):
    """Global pointer stream the picker listens on while mounted."""

    def subscribe(self, callback: Callable[[Any], None]) -> Any: ...

    def unsubscribe(self, token: Any) -> None: ...


class DismissalSubscription:
    """Holds one registration against a DismissalSource."""

    def __init__(self, callback: Callable[[Any], None]) -> None:
        self._callback = callback
        self._source: DismissalSource | None = None
        self._token: Any = None

    @property
    def active(self) -> bool:
        return self._source is not None

    def subscribe(self, source: DismissalSource) -> None:
        if self._source is source:
            return
        self.unsubscribe()
        self._token = source.subscribe(self._callback)
        self._source = source

    def unsubscribe(self) -> None:
        if self._source is None:
            return
        source, token = self._source, self._token
        self._source = None
        self._token = None
        source.unsubscribe(token)


# ------------------------------------------------------------------
# State machine
# ------------------------------------------------------------------
class DatePicker:
    """Selection, visibility and navigation state of one Persian date picker."""

    def __init__(
        self,
        initial_value: str = "",
        *,
        on_date_change: Callable[[DateChangeEvent], None] | None = None,
        disabled: bool = False,
        placeholder: str = DEFAULT_PLACEHOLDER,
        label: str = DEFAULT_LABEL,
        clock: Callable[[], date] = date.today,
        formatter: CalendarFormatter | None = None,
        exact_conversion: bool = False,
    ) -> None:
        self.on_date_change = on_date_change
        self.disabled = disabled
        self.placeholder = placeholder
        self.label = label
        self._clock = clock
        self._formatter = formatter
        self._exact = exact_conversion

        self.is_open = False
        self.selected_date: date | None = None
        self.displayed_month: date = self._today()
        self.text = ""
        self._initial_value = ""
        self._listeners: list[Callable[[PickerState], None]] = []
        self._dismissal = DismissalSubscription(lambda _event=None: self.dismiss())

        self._load_initial(initial_value)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _today(self) -> date:
        return as_date(self._clock()) or date.today()

    def _load_initial(self, value) -> None:
        value = value or ""
        self._initial_value = value
        self.text = value
        self.selected_date = persian_text_to_gregorian(value, exact=self._exact)
        if value and self.selected_date is None:
            logger.debug("Initial value %r is not a date; starting empty", value)
        self.displayed_month = self.selected_date or self._today()

    def _select(self, d) -> DateChangeEvent | None:
        if self.disabled:
            logger.debug("Ignoring selection of %r: picker disabled", d)
            return None
        d = as_date(d)
        if d is None:
            logger.debug("Ignoring selection of a non-date value")
            return None
        persian = gregorian_to_persian_text(d, self._formatter)
        y, m, dd = persian_labels(d, self._formatter)
        self.selected_date = d
        self.text = persian
        self.is_open = False
        return DateChangeEvent(
            persian_text=persian, gregorian=d,
            year_label=y, month_label=m, day_label=dd,
        )

    def _emit(self, event: DateChangeEvent | None) -> None:
        self._notify()
        if event is not None and self.on_date_change is not None:
            self.on_date_change(event)

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def state(self) -> PickerState:
        return PickerState(self.selected_date, self.displayed_month, self.is_open)

    def add_listener(self, listener: Callable[[PickerState], None]) -> None:
        """Call *listener* with a fresh snapshot after every transition."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[PickerState], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Host inputs
    # ------------------------------------------------------------------
    def set_initial_value(self, value: str) -> None:
        """Re-initialize from a new host value. Never emits an event."""
        if (value or "") == self._initial_value:
            return
        self._load_initial(value)
        self._notify()

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled
        if disabled:
            self.is_open = False
        self._notify()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def toggle_open(self) -> None:
        if self.disabled:
            return
        self.is_open = not self.is_open
        self._notify()

    def select_date(self, d) -> DateChangeEvent | None:
        """Select *d*, close, and emit; returns the emitted event."""
        event = self._select(d)
        if event is not None:
            self._emit(event)
        return event

    def navigate_month(self, delta: int) -> None:
        try:
            self.displayed_month = add_months(self.displayed_month, delta)
        except (ValueError, OverflowError):
            logger.debug("Cannot move %d months from %s", delta, self.displayed_month)
            return
        self._notify()

    def jump_to_today(self) -> DateChangeEvent | None:
        today = self._today()
        event = self._select(today)
        self.displayed_month = today
        self._emit(event)
        return event

    def dismiss(self) -> None:
        """Pointer activity outside the picker: close, keep the selection."""
        if not self.is_open:
            return
        self.is_open = False
        self._notify()

    # ------------------------------------------------------------------
    # Mount / unmount
    # ------------------------------------------------------------------
    def mount(self, source: DismissalSource) -> None:
        self._dismissal.subscribe(source)

    def unmount(self) -> None:
        self._dismissal.unsubscribe()

    @property
    def mounted(self) -> bool:
        return self._dismissal.active

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------
    @property
    def display_text(self) -> str:
        return self.text or self.placeholder

    def grid(self) -> tuple[DayCell, ...]:
        return build_month_grid(self.displayed_month)

    def header_text(self) -> str:
        name = month_name(self.displayed_month, self._formatter)
        year = year_label(self.displayed_month, self._formatter)
        return f"{name} {year}".strip()

    def day_label(self, d: date) -> str:
        return day_label(d, self._formatter)

    def is_selected(self, d) -> bool:
        return d is not None and self.selected_date is not None and d == self.selected_date

    def is_today(self, d) -> bool:
        return d is not None and d == self._today()
