# domain/errors.py


class UnknownNodeError(KeyError):
    """A node id was looked up that is not part of the graph snapshot."""

    def __init__(self, node):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"unknown node {self.node!r}"


class DanglingNeighborError(ValueError):
    def __init__(self, node, neighbor):
        super().__init__(f"node {node!r} lists neighbor {neighbor!r} which is not in the graph")
        self.node, self.neighbor = node, neighbor
