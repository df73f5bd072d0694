"""Example: using the service layer without Flask."""

import importlib

from hoop_entry.config import get_settings_module
from hoop_entry.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_path=settings.STORAGE_PATH, storage_key=settings.STORAGE_KEY)
    print(container.report_service.build_analytics().sponsorship)


if __name__ == "__main__":
    main()
