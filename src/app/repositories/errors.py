class PersistenceError(Exception):
    """A write was rejected by the storage layer (constraint violation, etc.)"""
