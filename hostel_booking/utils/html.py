from markupsafe import escape


def escape_html(value):
    """Escape ``& < > " '`` so stored text is rendered literally. None becomes an empty string."""
    return escape('' if value is None else str(value))
