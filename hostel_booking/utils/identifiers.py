def normalize_id(value):
    """Identifiers are held as strings; numeric and string ids from the store compare equal."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def wire_id(value):
    """Send canonical integer ids as numbers; anything else (e.g. ``"0123"``) unchanged."""
    if value is None:
        return None
    text = str(value)
    if text.isdigit() and str(int(text)) == text:
        return int(text)
    return text
