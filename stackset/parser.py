#!/usr/bin/env python3
"""
The parser module reads the text format for directed graphs.

    # comment
    vertices 4;
    0 -> 1 2;
    1 -> 2;
    2 -> 0;
    3;

Each statement lists a vertex's out-edges, a bare vertex just declares it.
Without a "vertices" declaration the graph has one more vertex than the
largest one mentioned.
"""
import io
import logging
from typing import List, Optional, cast, Callable, IO, Union

import lark

from .graph import Graph, GraphError

log = logging.getLogger('stackset.parser')

# larger graphs are built through the Graph api, not parsed from text
MAX_VERTICES = 10 ** 6

graph_grammar = r"""
    start : statement*

    ?statement : vertices_decl | adjacency

    vertices_decl : "vertices" INT ";"
    adjacency : INT ("->" INT+)? ";"

    COMMENT : /#[^\n]*/

    %import common.WS
    %import common.INT

    %ignore COMMENT
    %ignore WS
"""


class GraphParseError(Exception):
    pass


def tok2int(t: lark.Token) -> int:
    return int(t.value)


# noinspection PyMethodMayBeStatic
class GraphBuilder:
    """
        collects statements from the lark.Tree, then builds the Graph
    """
    declared: Optional[int]
    statements: List[List[int]]

    def __init__(self):
        self.declared = None
        self.statements = []

    def visit(self, lt: lark.Tree) -> None:
        if hasattr(self, lt.data):
            f = cast(Callable[[lark.Tree], None], getattr(self, lt.data))
            f(lt)
            return
        raise GraphParseError(f'''unrecognized Lark node "{lt.data}" during parse of graph: {lt}''')  # pragma: no cover

    def vertices_decl(self, lt: lark.Tree) -> None:
        n = tok2int(cast(lark.Token, lt.children[0]))
        if self.declared is not None:
            raise GraphParseError(f'vertices declared twice, line {lt.meta.line}')
        self.declared = n

    def adjacency(self, lt: lark.Tree) -> None:
        u, *targets = [tok2int(cast(lark.Token, t)) for t in lt.children]
        self.statements.append([u] + targets)

    def build(self) -> Graph:
        mentioned = max((max(stmt) for stmt in self.statements), default=-1)
        if self.declared is None:
            vertices = mentioned + 1
        elif mentioned >= self.declared:
            raise GraphParseError(f'vertex {mentioned} mentioned, but only {self.declared} vertices declared')
        else:
            vertices = self.declared
        if vertices > MAX_VERTICES:
            raise GraphParseError(f'{vertices} vertices is more than the limit of {MAX_VERTICES}')
        g = Graph.empty(vertices)
        for u, *targets in self.statements:
            for v in targets:
                g.add_edge(u, v)
        return g


GRAPH_PARSER = lark.Lark(graph_grammar, parser='lalr', start='start', propagate_positions=True)


def parse_graph(text: str) -> Graph:
    try:
        lark_tree: lark.Tree = GRAPH_PARSER.parse(text)
    except lark.exceptions.LarkError as e:
        raise GraphParseError(str(e)) from e
    builder = GraphBuilder()
    for statement in cast(List[lark.Tree], lark_tree.children):
        builder.visit(statement)
    try:
        g = builder.build()
    except GraphError as e:
        raise GraphParseError(str(e)) from e
    log.debug('parsed graph with %d vertices', g.vertices)
    return g


def read_graph(src: Union[str, IO[str]]) -> Graph:
    if isinstance(src, str):
        return parse_graph(src)
    elif isinstance(src, io.TextIOBase):
        try:
            text = src.read()
        except UnicodeDecodeError as e:
            raise GraphParseError(f'graph source is not text: {e}') from e
        return parse_graph(text)
    raise TypeError('unknown type for graph source')
