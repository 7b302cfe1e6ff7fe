import logging
import sys
from typing import List, Optional, Any

import colorama
from termcolor import colored

from .core import StackSet
from .graph import Graph, find_back_edge, pop_cycle, random_graph
from .parser import read_graph, GraphParseError
from .util.emitters import Emitter

log = logging.getLogger('stackset.analysis')

EXIT_ACYCLIC = 0
EXIT_CYCLIC = 1
EXIT_PARSE_ERROR = 2


class CycleReport:
    """
        writes what cycle detection finds in g

        color is None to let termcolor decide from the environment
    """

    def __init__(self, g: Graph, emitter: Emitter, color: Optional[bool] = None):
        self.g = g
        self.emitter = emitter
        self.color = color

    def paint(self, s: str, *colors: str, **colorskw: Any) -> str:
        return colored(s, *colors, no_color=self.color is False, force_color=self.color is True, **colorskw)

    def run(self) -> bool:
        g = self.g
        emit = self.emitter.emit
        nedges = sum(len(nbrs) for nbrs in g.edges)
        emit(f'graph: {g.vertices} vertices, {nedges} edges')

        path: StackSet[int] = StackSet()
        e = find_back_edge(g, path)
        if e is None:
            emit(self.paint('no cycle', 'green', attrs=['bold']))
            return False

        u, v = e
        cycle = pop_cycle(path, e)
        emit(self.paint('cycle found', 'red', attrs=['bold']))
        with self.emitter.indentation():
            for a, b in zip(cycle, cycle[1:]):
                emit(f'{a} -> {b}')
            emit(self.paint(f'{u} -> {v}', 'red') + '    (back edge)')
        if not path.is_empty():
            emit(f'entered from {path.top()} at depth {len(path)}')
        return True


def main(main_args: Optional[List[str]] = None) -> int:
    import argparse
    from argparse import RawTextHelpFormatter

    parser = argparse.ArgumentParser(description='Detect cycles in a directed graph',
                                     formatter_class=RawTextHelpFormatter)

    parser.add_argument('graph', metavar='GRAPH_IN', type=argparse.FileType(), nargs='?',
                        help='input graph file, "-" for stdin')
    parser.add_argument('-o', '--output', dest='output', type=str, default=None,
                        help='write the report to this file instead of stdout')
    parser.add_argument('--color', type=str, choices=['always', 'auto', 'never'], default='auto',
                        help='colorize the report')
    parser.add_argument('--random', dest='random', type=int, metavar='N', default=None,
                        help='analyze a random graph on N vertices instead of GRAPH_IN')
    parser.add_argument('--p', dest='p', type=float, default=.1,
                        help='edge probability of the random graph')
    parser.add_argument('--seed', dest='seed', type=int, default=None,
                        help='seed for the random graph')
    parser.add_argument('--acyclic', dest='acyclic', action='store_true', default=False,
                        help='only draw edges u -> v with u < v')

    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help='verbosity level.  repeat for more (-vv) ')

    args = parser.parse_args(args=main_args)

    logging.basicConfig(format="stackset [%(levelname)s]: %(message)s",
                        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbosity, 2)])

    if args.color != 'never':
        colorama.init()

    if args.random is not None:
        g = random_graph(args.random, args.p, seed=args.seed, acyclic=args.acyclic)
    elif args.graph is not None:
        try:
            with args.graph:
                g = read_graph(args.graph)
        except GraphParseError as e:
            log.error('failed to parse graph: %s', e)
            return EXIT_PARSE_ERROR
    else:
        parser.print_help()
        return EXIT_PARSE_ERROR

    color = {'always': True, 'never': False}.get(args.color)
    emitter = Emitter()
    with emitter.write_to(args.output if args.output is not None else sys.stdout):
        found = CycleReport(g, emitter, color=color).run()
    return EXIT_CYCLIC if found else EXIT_ACYCLIC


if __name__ == '__main__':
    sys.exit(main())
