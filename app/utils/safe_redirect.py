"""Safe redirect URL validation to prevent open redirect attacks."""

DEFAULT_REDIRECT_URL = "/dash"


def is_valid_redirect_url(url) -> bool:
    """Check that a redirect target is a safe internal route.

    A valid target must be a non-empty string that starts with a single '/'
    and contains no ':' anywhere, which rules out absolute URLs
    (http:, javascript:, data:) as well as protocol-relative ones (//host).

    Never raises; anything that is not a string is simply invalid.
    """
    if not isinstance(url, str) or not url:
        return False

    # Must start with /
    if not url.startswith("/"):
        return False

    # Reject protocol-relative URLs like //evil.com
    if url.startswith("//"):
        return False

    # Reject any scheme, including the ones urlparse would not recognize
    if ":" in url:
        return False

    return True


def get_safe_redirect_url(redirect_param, default_url: str = DEFAULT_REDIRECT_URL) -> str:
    """Return redirect_param unchanged if it is safe, otherwise default_url."""
    if is_valid_redirect_url(redirect_param):
        return redirect_param
    return default_url
