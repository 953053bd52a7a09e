from sqlalchemy.exc import SQLAlchemyError


class CatalogError(Exception):
    """Base class for errors reported back to HTTP callers."""


class IntegrityToggleError(CatalogError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error disabling foreign key checks: {detail}")


class InstallError(CatalogError):
    def __init__(self, step: int, detail: str):
        self.step = step
        self.detail = detail
        super().__init__(f"Error creating table {step}: {detail}")


def error_detail(exc: Exception) -> str:
    """Return the driver's own message for a database error.

    MySQL drivers raise with ``(code, message)`` args, the message alone is
    what gets relayed. Anything else falls back to ``str()`` of the driver
    exception, or of ``exc`` itself when there is none.
    """
    orig = exc.orig if isinstance(exc, SQLAlchemyError) and getattr(exc, "orig", None) else exc
    args = getattr(orig, "args", ())
    if len(args) == 2 and isinstance(args[0], int) and isinstance(args[1], str):
        return args[1]
    return str(orig)
