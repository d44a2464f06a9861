import sys

from colorama import Fore, Style
import utils


def print_graph(graph):
    """Thread-safe dump of the edge list and in-degree table to stderr.
    Symbols with no successors are left out of the edge list but always
    appear in the in-degree table."""
    with utils.PRINT_LOCK:
        lines = [Style.BRIGHT + '== Edges ==' + Style.RESET_ALL]
        for symbol in sorted(graph.symbols):
            succ = graph.successors(symbol)
            if not succ:
                continue
            targets = ', '.join(sorted(succ))
            lines.append(Fore.CYAN + symbol + Style.RESET_ALL + f' -> {targets}')

        lines.append(Style.BRIGHT + '== In-degree ==' + Style.RESET_ALL)
        for symbol, count in sorted(graph.in_degrees().items()):
            color = Fore.GREEN if count == 0 else Fore.YELLOW
            lines.append(f'{symbol}: ' + color + str(count) + Style.RESET_ALL)
        print('\n'.join(lines), file=sys.stderr, flush=True)


def print_result(result):
    # stdout only ever carries the order itself
    if result.success:
        print(result.order, flush=True)
    else:
        with utils.PRINT_LOCK:
            print(Fore.RED + f'ERROR: {result.message}' + Style.RESET_ALL, file=sys.stderr, flush=True)
