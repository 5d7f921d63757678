import itertools
import logging

import networkx as nx

from logicsim.errors import (
    InvalidConnection,
    InvalidPin,
    NodeNotFound,
    PayloadError,
)
from logicsim.gates import Kind

logger = logging.getLogger(__name__)


class Circuit:
    """Gates and the wires between their pins.

    Every node is keyed by an integer handle that is never reused. A wire is
    an edge from the source node to the target node, keyed by the target's
    input index, so one output can fan out to many pins and one pin can be
    fed by many outputs.
    """

    def __init__(self):
        self.graph = nx.MultiDiGraph()
        self._handles = itertools.count()

    def __contains__(self, id):
        return self.graph.__contains__(id)

    def __len__(self):
        return self.graph.__len__()

    def __iter__(self):
        return self.graph.__iter__()

    def _node(self, id):
        try:
            return self.graph.nodes[id]
        except KeyError:
            raise NodeNotFound(id) from None

    def insert_node(self, position, kind):
        kind = Kind.parse(kind)
        id = next(self._handles)
        self.graph.add_node(
            id,
            kind=kind,
            position=tuple(position),
            value=False if kind.has_value else None,
        )
        logger.debug("inserted %s node %d at %s", kind.title, id, position)
        return id

    def remove_node(self, id):
        if id not in self.graph:
            logger.debug("remove of stale node %s ignored", id)
            return False

        # networkx drops every edge touching the node along with it
        self.graph.remove_node(id)
        logger.debug("removed node %d", id)
        return True

    def connect(self, source, target, input_index):
        source_kind = self.kind(source)
        target_kind = self.kind(target)

        if source_kind.outputs == 0:
            raise InvalidConnection(
                f"{source_kind.title} node {source} has no output"
            )
        if target_kind.inputs == 0:
            raise InvalidConnection(
                f"{target_kind.title} node {target} has no inputs"
            )
        if not 0 <= input_index < target_kind.inputs:
            raise InvalidConnection(
                f"{target_kind.title} node {target} has no input "
                f"{input_index}"
            )

        self.graph.add_edge(
            source, target, key=input_index, position=input_index
        )
        logger.debug("connected %d -> %d[%d]", source, target, input_index)

    def disconnect(self, target, input_index, source):
        if not self.graph.has_edge(source, target, key=input_index):
            return False

        self.graph.remove_edge(source, target, key=input_index)
        logger.debug("disconnected %d -> %d[%d]", source, target, input_index)
        return True

    def input_sources(self, target, input_index):
        kind = self.kind(target)
        if not 0 <= input_index < kind.inputs:
            raise InvalidPin(
                f"{kind.title} node {target} has no input {input_index}"
            )

        return [
            source
            for source, _, index in self.graph.in_edges(target, keys=True)
            if index == input_index
        ]

    def connections(self):
        return list(self.graph.edges(keys=True))

    def kind(self, id):
        return self._node(id)["kind"]

    def position(self, id):
        return self._node(id)["position"]

    def move_node(self, id, position):
        self._node(id)["position"] = tuple(position)

    def get_value(self, id):
        return self._node(id)["value"]

    def set_value(self, id, value):
        node = self._node(id)
        if not node["kind"].has_value:
            raise PayloadError(f"{node['kind'].title} node {id} has no value")
        if not isinstance(value, bool):
            raise PayloadError(f"node values must be bool, not {value!r}")
        node["value"] = value

    def nodes(self, kind=None):
        if kind is None:
            return list(self.graph.nodes)

        kind = Kind.parse(kind)
        return [
            id
            for id, data in self.graph.nodes(data=True)
            if data["kind"] is kind
        ]

    def outputs(self):
        return self.nodes(Kind.OUTPUT)
