def canonicalize_url(url: str | None) -> str:
    """Normalize a URL into the identity used to recognise the same item across sources.

    Lower-cases, trims whitespace and strips trailing slashes. Returns "" when nothing is left.
    """
    if not url:
        return ""
    return url.strip().lower().rstrip("/")
