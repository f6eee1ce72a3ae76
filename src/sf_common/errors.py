"""Unified error codes and custom exceptions.

Every AppError is rendered as ``{"error": message}`` with its http_status.
Dependency failures carry a fixed message only; the cause is logged, never
returned to the client.

Error code ranges:
  1xxx: Client input
  2xxx: Lookup
  3xxx: Dependency (relational store, key-value table, cache, object store)
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class ConfigurationError(RuntimeError):
    """Required configuration is missing at startup. Fatal."""


# --- 1xxx: Client input ---

class MalformedBodyError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, detail, 400)


# --- 2xxx: Lookup ---

class RecordNotFoundError(AppError):
    def __init__(self, entity: str) -> None:
        super().__init__(2001, f"{entity} not found", 404)


# --- 3xxx: Dependency ---

class CacheReadError(AppError):
    def __init__(self) -> None:
        super().__init__(3001, "failed to fetch from cache", 500)


class StoreReadError(AppError):
    def __init__(self, detail: str = "failed to fetch from DB") -> None:
        super().__init__(3002, detail, 500)


class StoreWriteError(AppError):
    def __init__(self, detail: str = "failed to save to DB") -> None:
        super().__init__(3003, detail, 500)


class ExportError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3004, detail, 500)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "internal server error") -> None:
        super().__init__(9002, detail, 500)
