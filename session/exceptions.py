class OperationInProgressError(Exception):
    """An extraction or save of the same kind is already running for this session."""
