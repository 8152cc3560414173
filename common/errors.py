class PageConfigurationError(Exception):
    """
    Page model declares its fields incorrectly: duplicate names,
    unsupported field types, cyclic blocks.
    Raised from initialize() and never recovered.
    """


class ElementLookupError(LookupError):
    """Field name is not declared on the page or has another shape."""


class ElementTimeoutError(TimeoutError):
    """Element did not reach the expected state within the timeout."""


class PageNotInitializedError(RuntimeError):
    """Page model is queried before initialize() was called."""
