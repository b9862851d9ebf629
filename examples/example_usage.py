"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; parsing and formatting live in the services.
"""

import importlib

from config import get_settings_module

from src.aub_converter.aub_converter.container import build_container

SAMPLE = (
    "72\t2025-11-03 08:52:08\t104\t15\tJohn Doe\tI\t0\t1\n"
    "72\t2025-11-03 18:18:47\t104\t15\tJohn Doe\tI\t0\t1\n"
    "broken line\n"
)


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(direction_mode=settings.DIRECTION_MODE)
    result = container.conversion_service.convert(SAMPLE)
    print(result.text)
    print(f"records={result.records} skipped={[s.line_number for s in result.skipped]}")


if __name__ == "__main__":
    main()
