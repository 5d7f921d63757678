class CircuitError(Exception):
    pass


class InvalidConnection(CircuitError):
    pass


class NodeNotFound(CircuitError, KeyError):
    def __init__(self, node):
        super().__init__(node)
        self.node = node

    def __str__(self):
        return f"node {self.node} does not exist"


class InvalidPin(CircuitError, IndexError):
    pass


class PayloadError(CircuitError, TypeError):
    pass
