from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_time_filter(value, format_str="%H:%M"):
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.strftime(format_str)

templates.env.filters["format_time"] = format_time_filter
