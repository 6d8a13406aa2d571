"""
Handle to a named bucket.
"""


class Bucket:
    """Reference to a bucket by name.

    Creating a handle never touches the network; the bucket may or may not
    exist on the service.
    """

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other):
        if not isinstance(other, Bucket):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return f"Bucket({self._name!r})"
