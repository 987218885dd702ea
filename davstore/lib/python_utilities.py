def to_wire(text):
    if text is None:
        return None
    if isinstance(text, str):
        text = bytes(text, "utf-8")
    return text


def to_normal_str(text):
    """
    Make sure we return a normal string, no matter if we were given
    bytes or str.  Undecodable bytes are replaced, the result is only
    meant for humans reading log files.
    """
    if text is None:
        return text
    if not isinstance(text, str):
        text = bytes(text).decode("utf-8", errors="replace")
    text = text.replace("\r\n", "\n")
    return text


def preview(text, limit: int = 2048) -> str:
    """Shortened version of a request or response body for the logs"""
    if text is None:
        return ""
    if hasattr(text, "read"):
        return "<stream>"
    text = to_normal_str(text)
    if len(text) > limit:
        return text[:limit] + "... (%i characters truncated)" % (len(text) - limit)
    return text
