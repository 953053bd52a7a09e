from __future__ import annotations

import sys

from loguru import logger

from catalog.core.config import settings
from catalog.core.db import Store
from catalog.core.errors import CatalogError
from catalog.core.log import configure_logging
from catalog.services.installer import SchemaInstaller


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    store = Store(settings.DATABASE_URL, echo=settings.SQL_ECHO).connect()
    try:
        SchemaInstaller(store).install()
    except CatalogError as exc:
        logger.error(str(exc))
        return 1
    finally:
        store.close()

    print("All tables created successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
