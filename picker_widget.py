"""Persian date picker widget (tkinter): trigger field plus drop-down month page."""

from __future__ import annotations

import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont
from typing import Callable

from PIL import ImageTk

from calendar_logic import WEEKDAY_ABBR_FA, weeks
from date_picker import (
    DEFAULT_LABEL,
    DEFAULT_PLACEHOLDER,
    DateChangeEvent,
    DatePicker,
    PickerState,
)
from icon_gen import create_icon_image
from persian_calendar import CalendarFormatter

logger = logging.getLogger(__name__)

# Colours
BG = "white"
BORDER = "#CBD5E1"
BORDER_HOVER = "#60A5FA"
DISABLED_BG = "#F1F5F9"
LABEL_FG = "#475569"
VALUE_FG = "#1D4ED8"
PLACEHOLDER_FG = "#94A3B8"
HEADER_FG = "#1E40AF"
DAY_FG = "#334155"
HOVER_BG = "#DBEAFE"
SEL_BG = "#3B82F6"
TODAY_FG = "#2563EB"

_MAX_WEEKS = 6


class TkDismissalSource:
    """Pointer presses anywhere in a toplevel, minus those inside the picker."""

    SEQUENCE = "<ButtonPress>"

    def __init__(self, toplevel: tk.Misc, is_inside: Callable[[object], bool]) -> None:
        self._toplevel = toplevel
        self._is_inside = is_inside

    def subscribe(self, callback: Callable[[tk.Event], None]) -> str:
        def _handler(event: tk.Event) -> None:
            if not self._is_inside(event.widget):
                callback(event)

        return self._toplevel.bind(self.SEQUENCE, _handler, add="+")

    def unsubscribe(self, token: str) -> None:
        # Drop only our line of the binding script; Misc.unbind before 3.13
        # clears every <ButtonPress> binding on the toplevel.
        toplevel = self._toplevel
        try:
            script = toplevel.bind(self.SEQUENCE)
            kept = "\n".join(line for line in script.split("\n") if token not in line)
            toplevel.tk.call("bind", toplevel._w, self.SEQUENCE, kept)
            toplevel.deletecommand(token)
        except tk.TclError:
            # toplevel already destroyed
            logger.debug("Dismissal binding %s outlived its toplevel", token)


class PersianDatePicker(tk.Frame):
    """Right-to-left date field that drops down a Persian month page."""

    def __init__(
        self,
        master: tk.Misc,
        initial_value: str = "",
        *,
        on_date_change: Callable[[DateChangeEvent], None] | None = None,
        label: str = DEFAULT_LABEL,
        placeholder: str = DEFAULT_PLACEHOLDER,
        disabled: bool = False,
        clock: Callable[[], date] = date.today,
        formatter: CalendarFormatter | None = None,
        exact_conversion: bool = False,
        font_family: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(master, bg=BG, **kwargs)
        self.picker = DatePicker(
            initial_value,
            on_date_change=on_date_change,
            disabled=disabled,
            placeholder=placeholder,
            label=label,
            clock=clock,
            formatter=formatter,
            exact_conversion=exact_conversion,
        )
        self._setup_fonts(font_family)
        self._icon = ImageTk.PhotoImage(create_icon_image(), master=self)

        # Widget-to-date mapping (filled during _fill_grid)
        self._cell_dates: dict[int, date] = {}

        self._build_field()
        self._build_popup()

        self.picker.add_listener(self._render)
        self.picker.mount(TkDismissalSource(self.winfo_toplevel(), self._contains))
        self._render(self.picker.state)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self, preferred: str | None) -> None:
        families = tkfont.families(self)
        base = "TkDefaultFont"
        for candidate in (preferred, "Vazirmatn", "Tahoma"):
            if candidate and candidate in families:
                base = candidate
                break
        self.font_normal = tkfont.Font(self, family=base, size=10)
        self.font_bold = tkfont.Font(self, family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(self, family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Build field (label + trigger) and popup (once)
    # ------------------------------------------------------------------
    def _build_field(self) -> None:
        if self.picker.label:
            tk.Label(
                self, text=self.picker.label, font=self.font_bold,
                bg=BG, fg=LABEL_FG, anchor="e",
            ).pack(side="right", padx=(8, 0))

        self._trigger = tk.Frame(
            self, bg=BG, highlightthickness=1, highlightbackground=BORDER,
            cursor="hand2",
        )
        self._trigger.pack(side="right", fill="x", expand=True)

        self._value_label = tk.Label(
            self._trigger, font=self.font_normal, bg=BG, anchor="e", padx=8, pady=4,
        )
        self._value_label.pack(side="right", fill="x", expand=True)

        self._icon_label = tk.Label(self._trigger, image=self._icon, bg=BG, padx=6)
        self._icon_label.pack(side="left")

        for w in (self._trigger, self._value_label, self._icon_label):
            w.bind("<Button-1>", lambda _e: self.picker.toggle_open())
            w.bind("<Enter>", lambda _e: self._hover_trigger(True))
            w.bind("<Leave>", lambda _e: self._hover_trigger(False))

    def _build_popup(self) -> None:
        # Child of the toplevel so it can overlap neighbouring widgets
        self._popup = tk.Frame(
            self.winfo_toplevel(), bg=BG, highlightthickness=1,
            highlightbackground=BORDER, padx=8, pady=8,
        )

        # Navigation row, right-to-left: previous month sits on the right
        nav = tk.Frame(self._popup, bg=BG)
        nav.pack(fill="x", pady=(0, 6))

        btn_prev = tk.Label(nav, text="→", font=self.font_nav, bg=BG, cursor="hand2")
        btn_prev.pack(side="right", padx=4)
        btn_prev.bind("<Button-1>", lambda _e: self.picker.navigate_month(-1))

        btn_next = tk.Label(nav, text="←", font=self.font_nav, bg=BG, cursor="hand2")
        btn_next.pack(side="left", padx=4)
        btn_next.bind("<Button-1>", lambda _e: self.picker.navigate_month(1))

        self._header = tk.Label(nav, font=self.font_bold, bg=BG, fg=HEADER_FG)
        self._header.pack(expand=True)

        days = tk.Frame(self._popup, bg=BG)
        days.pack()

        for i, abbr in enumerate(WEEKDAY_ABBR_FA):
            tk.Label(
                days, text=abbr, font=self.font_bold, bg=BG, fg=LABEL_FG, width=3,
            ).grid(row=0, column=6 - i)

        self._day_cells: list[list[tk.Label]] = []
        for r in range(_MAX_WEEKS):
            row_cells: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(days, font=self.font_normal, bg=BG, width=3)
                cell.grid(row=r + 1, column=6 - c, padx=1, pady=1)
                cell.bind("<Button-1>", self._on_cell_click)
                cell.bind("<Enter>", self._on_cell_enter)
                cell.bind("<Leave>", self._on_cell_leave)
                row_cells.append(cell)
            self._day_cells.append(row_cells)

        today_btn = tk.Label(
            self._popup, text="امروز", font=self.font_bold, bg=BG, fg=TODAY_FG,
            cursor="hand2", pady=4,
        )
        today_btn.pack(fill="x", pady=(6, 0))
        today_btn.bind("<Button-1>", lambda _e: self.picker.jump_to_today())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self, state: PickerState) -> None:
        picker = self.picker
        if picker.disabled:
            fg = PLACEHOLDER_FG
            bg = DISABLED_BG
        else:
            fg = VALUE_FG if picker.text else PLACEHOLDER_FG
            bg = BG
        for w in (self._trigger, self._value_label, self._icon_label):
            w.configure(bg=bg, cursor="" if picker.disabled else "hand2")
        self._value_label.configure(text=picker.display_text, fg=fg)

        if state.is_open and not picker.disabled:
            self._header.configure(text=picker.header_text())
            self._fill_grid()
            self._popup.place(in_=self._trigger, relx=1.0, rely=1.0, y=4, anchor="ne")
            self._popup.lift()
        else:
            self._popup.place_forget()

    def _fill_grid(self) -> None:
        """Reconfigure pooled day labels — no widget creation."""
        self._cell_dates.clear()
        rows = weeks(self.picker.grid())
        for r in range(_MAX_WEEKS):
            for c in range(7):
                cell = self._day_cells[r][c]
                d = rows[r][c].date if r < len(rows) else None
                if d is None:
                    cell.configure(text="", bg=BG, cursor="")
                    continue
                self._cell_dates[id(cell)] = d
                cell.configure(
                    text=self.picker.day_label(d), cursor="hand2",
                    **self._day_style(d),
                )

    def _day_style(self, d: date) -> dict:
        if self.picker.is_selected(d):
            return {"bg": SEL_BG, "fg": "white", "font": self.font_bold}
        if self.picker.is_today(d):
            return {"bg": BG, "fg": TODAY_FG, "font": self.font_bold}
        return {"bg": BG, "fg": DAY_FG, "font": self.font_normal}

    def _hover_trigger(self, inside: bool) -> None:
        if self.picker.disabled:
            return
        self._trigger.configure(highlightbackground=BORDER_HOVER if inside else BORDER)

    # ------------------------------------------------------------------
    # Day cell events
    # ------------------------------------------------------------------
    def _on_cell_click(self, event: tk.Event) -> None:
        d = self._cell_dates.get(id(event.widget))
        if d:
            self.picker.select_date(d)

    def _on_cell_enter(self, event: tk.Event) -> None:
        d = self._cell_dates.get(id(event.widget))
        if d and not self.picker.is_selected(d):
            event.widget.configure(bg=HOVER_BG)

    def _on_cell_leave(self, event: tk.Event) -> None:
        d = self._cell_dates.get(id(event.widget))
        if d and not self.picker.is_selected(d):
            event.widget.configure(bg=BG)

    # ------------------------------------------------------------------
    # Host surface
    # ------------------------------------------------------------------
    def _contains(self, widget: object) -> bool:
        """True if *widget* belongs to the field or its drop-down."""
        if not isinstance(widget, tk.Misc):
            return False
        w = widget
        while w is not None:
            if w is self or w is self._popup:
                return True
            w = w.master
        return False

    @property
    def value(self) -> str:
        return self.picker.text

    @property
    def selected_date(self) -> date | None:
        return self.picker.selected_date

    def set_initial_value(self, value: str) -> None:
        self.picker.set_initial_value(value)

    def set_disabled(self, disabled: bool) -> None:
        self.picker.set_disabled(disabled)

    def destroy(self) -> None:
        self.picker.unmount()
        self.picker.remove_listener(self._render)
        self._popup.destroy()
        super().destroy()
