"""Storage error taxonomy.

Driver exceptions never leave the storage package; `Database.session()`
translates them into one of these:

- StorageUnavailable: the store cannot be opened or queried
- ConstraintViolation: foreign-key, CHECK or NOT NULL failure on write
- QueryFailure: malformed statement (programming error, not user-recoverable)
"""

from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError


class StorageError(RuntimeError):
    pass


class StorageUnavailable(StorageError):
    pass


class ConstraintViolation(StorageError):
    pass


class QueryFailure(StorageError):
    pass


def translate_error(exc: DBAPIError) -> StorageError:
    """Map a SQLAlchemy DBAPI error onto the storage taxonomy."""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    if isinstance(exc, IntegrityError):
        return ConstraintViolation(message)
    if isinstance(exc, (OperationalError, InterfaceError)):
        return StorageUnavailable(message)
    return QueryFailure(message)
