"""Entry point for the inventory-receipt header window hosting the Persian date picker."""

import ctypes
import logging
import tkinter as tk

from date_picker import DateChangeEvent
from picker_widget import PersianDatePicker
from settings import load_settings

LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
LOG_DATEFMT = "%H:%M:%S"

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging once, from the entry point only."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def main() -> None:
    settings = load_settings()
    setup_logging(settings["log_level"])

    # DPI awareness so fonts are crisp on Hi-DPI Windows monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        logger.debug("Per-monitor DPI awareness unavailable on this platform")

    root = tk.Tk()
    root.title("رسید انبار")
    root.configure(bg="white", padx=16, pady=16)

    header = {"date": ""}
    status = tk.StringVar(value="")

    def on_date_change(event: DateChangeEvent) -> None:
        header["date"] = event.persian_text
        status.set(f"{event.persian_text}  ({event.gregorian.isoformat()})")
        logger.info("Receipt date set to %s", event.gregorian)

    picker = PersianDatePicker(
        root,
        header["date"],
        on_date_change=on_date_change,
        label=settings["label"],
        placeholder=settings["placeholder"],
        exact_conversion=settings["exact_conversion"],
        font_family=settings["font_family"],
    )
    picker.pack(fill="x")

    tk.Label(root, textvariable=status, bg="white", fg="#64748B", anchor="e").pack(
        fill="x", pady=(12, 0),
    )
    # Leave room below the field for the drop-down page
    root.minsize(360, 340)

    root.mainloop()


if __name__ == "__main__":
    main()
