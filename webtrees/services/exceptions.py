"""
Custom exceptions for service layer
"""

import functools

import sqlalchemy.exc


class ServiceError(Exception):
    """Base exception for service layer errors"""
    pass

class ValidationError(ServiceError):
    """Raised when input validation fails"""
    pass

class NotFoundError(ServiceError):
    """Raised when a requested tree, block or record does not exist"""
    pass

class PermissionDeniedError(ServiceError):
    """Raised when the viewer may not see or change a resource"""
    pass

class ConflictError(ServiceError):
    """Raised when an operation conflicts with stored data"""
    pass

class DatabaseError(ServiceError):
    """Raised when database operations fail"""
    pass


def handle_service_exceptions(logger=None):
    """Decorator translating database and input errors into service exceptions"""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ServiceError:
                raise
            except sqlalchemy.exc.IntegrityError as e:
                if logger:
                    logger.error(f"Database integrity error in {func.__name__}: {e}")
                raise ConflictError(f"Data integrity violation: {e}") from e
            except sqlalchemy.exc.OperationalError as e:
                if logger:
                    logger.error(f"Database operational error in {func.__name__}: {e}")
                raise DatabaseError(f"Database connection error: {e}") from e
            except sqlalchemy.exc.SQLAlchemyError as e:
                if logger:
                    logger.error(f"Database error in {func.__name__}: {e}")
                raise DatabaseError(f"Database error: {e}") from e
            except ValueError as e:
                if logger:
                    logger.error(f"Validation error in {func.__name__}: {e}")
                raise ValidationError(f"Invalid input: {e}") from e
            except KeyError as e:
                if logger:
                    logger.error(f"Missing required data in {func.__name__}: {e}")
                raise ValidationError(f"Missing required field: {e}") from e
            except Exception as e:
                if logger:
                    logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
                raise ServiceError(f"Unexpected service error: {e}") from e
        return wrapper
    return decorator
