"""Exceptions raised by jsonx."""


class JsonxError(Exception):
    """Base class for errors raised by jsonx itself."""


class NilTargetError(JsonxError, ValueError):
    """
    Raised when raw bytes are unmarshaled into an absent target.

    The bytes have nowhere to go, so nothing is stored and nothing is retried.
    """

    def __init__(self, msg: str = "unmarshal into a nil target") -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        self.msg = msg
        super().__init__(f"jsonx: {msg}")


class EmptyFragmentError(JsonxError, ValueError):
    """
    Raised when a zero-length raw fragment would be written as a JSON value.

    A nested value cannot be empty, so the whole encode is abandoned.
    """

    def __init__(self, where: str) -> None:
        self.where = where
        super().__init__(f"jsonx: zero-length raw fragment as {where}")
