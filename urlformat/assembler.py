# urlformat/assembler.py


def join_url(base: str, path: str = "", query: str = "") -> str:
    """Concatenate base, path and query with one '/' between base and path.

    An empty path leaves the base untouched, trailing slash included.
    """
    url = base
    if path:
        url = f"{base.rstrip('/')}/{path.lstrip('/')}"
    if query:
        url = f"{url}?{query}"
    return url
