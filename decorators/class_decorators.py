def page_name(name: str):
    """
    Sets the name a page model or block is registered under in PageRegistry.
    Example:
        @page_name("Login page")
        class LoginPage(SmartPage):
            ...
    """
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Page name must be a non-empty string, got {name!r}")

    def decorator(cls):
        cls.page_name = name
        return cls

    return decorator
