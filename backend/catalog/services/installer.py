"""Creates the catalog tables one statement at a time.

The five ``CREATE TABLE IF NOT EXISTS`` statements run strictly in order on the
shared connection with foreign-key enforcement suspended. The first failing
statement stops the run; tables created before it stay in place, so calling
``install()`` again is the way to recover.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from catalog.core.db import Store
from catalog.core.errors import InstallError, IntegrityToggleError, error_detail
from catalog.models import INSTALL_ORDER

# (disable, restore) per dialect
FOREIGN_KEY_TOGGLES = {
    "mysql": ("SET FOREIGN_KEY_CHECKS = 0", "SET FOREIGN_KEY_CHECKS = 1"),
    "mariadb": ("SET FOREIGN_KEY_CHECKS = 0", "SET FOREIGN_KEY_CHECKS = 1"),
    "sqlite": ("PRAGMA foreign_keys = OFF", "PRAGMA foreign_keys = ON"),
}


def install_statements() -> list:
    return [CreateTable(model.__table__, if_not_exists=True) for model in INSTALL_ORDER]


@contextmanager
def foreign_key_checks_disabled(store: Store) -> Iterator[None]:
    """Suspend foreign-key enforcement, restoring it on every way out."""
    toggle = FOREIGN_KEY_TOGGLES.get(store.dialect)
    if toggle is None:
        logger.warning("No foreign key toggle for dialect {}, leaving enforcement as is", store.dialect)
        yield
        return

    disable, restore = toggle
    try:
        store.execute(text(disable))
    except SQLAlchemyError as exc:
        logger.error("Error disabling foreign key checks: {}", exc)
        raise IntegrityToggleError(error_detail(exc)) from exc

    try:
        yield
    finally:
        try:
            store.execute(text(restore))
        except SQLAlchemyError as exc:
            logger.error("Error re-enabling foreign key checks: {}", exc)


class SchemaInstaller:
    def __init__(self, store: Store, statements: Sequence | None = None):
        self.store = store
        self.statements = list(statements) if statements is not None else install_statements()

    def install(self) -> None:
        # hold the connection so no insert slips in while checks are off
        with self.store.locked(), foreign_key_checks_disabled(self.store):
            for step, statement in enumerate(self.statements, start=1):
                try:
                    self.store.execute(statement)
                except SQLAlchemyError as exc:
                    logger.error("Error creating table {}: {}", step, exc)
                    raise InstallError(step, error_detail(exc)) from exc
                logger.info("Table {} created successfully", step)

        logger.info("All {} tables in place", len(self.statements))
