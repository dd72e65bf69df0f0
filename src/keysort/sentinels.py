"""Marker values understood by the canonicalizer."""


class _Omit:
    """Singleton returned by a transform to drop the current member."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OMIT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Omit, ())


OMIT = _Omit()
