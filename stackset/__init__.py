__all__ = [
    # modules
    'util', 'graph', 'parser',

    # core symbols
    'StackSet', 'INITIAL_CAPACITY',
    'StackSetError', 'EmptyStackSetError', 'DuplicateKeyError',

    # graph
    'Graph', 'GraphError', 'find_back_edge', 'find_cycle', 'has_cycle', 'random_graph',
    'GraphParseError', 'parse_graph',
]

from .core import *
from .graph import Graph, GraphError, find_back_edge, find_cycle, has_cycle, random_graph
from .parser import GraphParseError, parse_graph
