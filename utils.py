# --- utils.py ---

import time
import threading
import json
import sys
from colorama import Fore, Style, init
import os

init()

# Directory for --log-run output
LOGS_DIR = 'logs'

# Seconds to wait for a remote word list
DEFAULT_TIMEOUT = 10

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` to stderr with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", file=sys.stderr, flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def log_run_to_file(words, result, logs_dir=None):
    """Append the input words and the engine result to a dated JSON file in the logs directory.
    Returns the path of the log file."""
    logs_dir = logs_dir or os.path.join(os.getcwd(), LOGS_DIR)
    os.makedirs(logs_dir, exist_ok=True)
    log_file = os.path.join(logs_dir, f"run_{time.strftime('%Y-%m-%d')}.json")

    log_data = {"runs": []}

    # If file exists, keep earlier runs
    if os.path.exists(log_file):
        try:
            with open(log_file, 'r') as f:
                existing = json.load(f)
            if isinstance(existing, dict) and isinstance(existing.get("runs"), list):
                log_data = existing
        except (OSError, ValueError):
            log_with_time(f"Could not read {log_file}; starting a new log.", color=Fore.YELLOW)

    log_data["runs"].append({
        "time": time.strftime('%H:%M:%S'),
        "words": list(words),
        "result": result.to_dict(),
    })

    with open(log_file, 'w') as f:
        json.dump(log_data, f, indent=2, ensure_ascii=False)
    log_with_time(f"Run logged to {log_file}", color=Fore.GREEN)
    return log_file
