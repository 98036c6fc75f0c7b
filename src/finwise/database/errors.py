"""Connection pool errors."""


class PoolError(RuntimeError):
    """The backing store could not be reached or a connection could not be obtained."""


class PoolExhausted(PoolError):
    """Every pooled connection stayed checked out for the whole checkout timeout."""
