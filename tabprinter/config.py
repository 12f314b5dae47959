# config.py

from dataclasses import dataclass

from .display.style.registry import TableStyle


@dataclass
class Settings:
    """Render and import defaults; override per Interface or TableRenderer."""
    page_header: str = "Page {page} of {total}"
    pause_prompt: str = "Press Enter to continue..."
    csv_column_width: int = 10
    default_style: TableStyle = TableStyle.SIMPLE

    def format_page_header(self, page: int, total: int) -> str:
        return self.page_header.format(page=page, total=total)

DEFAULT_SETTINGS = Settings()
