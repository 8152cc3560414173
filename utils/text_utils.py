def normalize_text(text: str | None) -> str:
    """
    Trims leading and trailing whitespace and line breaks.
    None (detached element, empty value) becomes an empty string.
    """
    if text is None:
        return ""
    return text.strip()


def join_names(names) -> str:
    """
    Formats names for error messages.
    Example: ["Login", "Logout"] -> "'Login', 'Logout'"
    """
    return ", ".join(f"'{name}'" for name in names)


def find_duplicates(values) -> list:
    """Returns values met more than once, in order of the second occurrence."""
    seen = set()
    duplicates = []

    for value in values:
        if value in seen and value not in duplicates:
            duplicates.append(value)
        seen.add(value)

    return duplicates
