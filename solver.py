import argparse
import time
import requests
from colorama import Fore

import utils
from utils import DEFAULT_TIMEOUT, log_with_time, vlog
from alphabet import infer_alphabet_order
from report import print_result
from wordlist import load_words

# Exit codes
EXIT_OK = 0
EXIT_INVALID_ORDER = 1
EXIT_NO_INPUT = 2


def build_parser():
    parser = argparse.ArgumentParser(
        description="Alien alphabet solver - infer the order of an unknown alphabet from a sorted word list."
    )
    parser.add_argument(
        "--words",
        nargs="+",
        default=None,
        help="Words in dictionary order (e.g. --words wrt wrf er ett rftt)",
    )
    parser.add_argument("--file", type=str, default=None, help="Text file with one word per line, in dictionary order")
    parser.add_argument("--url", type=str, default=None, help="URL of a word list with one word per line, in dictionary order")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for --url (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument("--verbose", action="store_true", help="Show the constraint graph and processing details")
    parser.add_argument("--log-run", action="store_true", help="Save the words and result to a dated JSON log file")
    return parser


def run_solver(argv=None):
    """Parse ``argv``, run the engine and print the order. Returns the exit code."""
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    # --file wins over --url, which wins over --words
    try:
        words = load_words(args.words, path=args.file, url=args.url, timeout=args.timeout)
    except FileNotFoundError:
        log_with_time(f"Could not find word file: {args.file}", color=Fore.RED)
        return EXIT_NO_INPUT
    # RequestException subclasses OSError, so it must come before the generic read error
    except requests.RequestException as e:
        log_with_time(f"Could not download word list: {e}", color=Fore.RED)
        return EXIT_NO_INPUT
    except (OSError, UnicodeDecodeError) as e:
        log_with_time(f"Could not read word file {args.file}: {e}", color=Fore.RED)
        return EXIT_NO_INPUT

    if not words:
        log_with_time("No words supplied. Use --words, --file or --url.", color=Fore.RED)
        return EXIT_NO_INPUT

    t0 = time.time()
    vlog(f"Inferring order from {len(words)} words")
    result = infer_alphabet_order(words, verbose=args.verbose)
    vlog("Inference finished", t0)

    print_result(result)

    if args.log_run:
        utils.log_run_to_file(words, result)

    return EXIT_OK if result.success else EXIT_INVALID_ORDER


def main():
    raise SystemExit(run_solver())
