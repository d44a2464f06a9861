# --- wordlist.py ---
# Word sources for the CLI: inline arguments, a local file, or a remote list.

import time
from typing import Iterable, List, Optional

import requests

from utils import DEFAULT_TIMEOUT, log_with_time, vlog


def normalize_word(word: Optional[str]) -> str:
    """Trim surrounding whitespace and lower-case. Blank input gives ''."""
    if word is None or not word.strip():
        return ''
    # str.lower() applies full case mapping, so a few letters such as 'İ'
    # lower to two code points
    return word.strip().lower()


def normalize_words(words: Iterable[str]) -> List[str]:
    normalized = (normalize_word(w) for w in words)
    return [w for w in normalized if w]


def split_lines(text: str) -> List[str]:
    """Split on '\\n', '\\r\\n' and '\\r' only; other Unicode line breaks stay inside words."""
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def read_word_file(path: str) -> List[str]:
    """Read one word per line, dropping a leading UTF-8 byte-order mark.

    Raises OSError if ``path`` cannot be opened and UnicodeDecodeError if it is
    not valid UTF-8.
    """
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        return split_lines(f.read())


def fetch_word_list(url: str, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    t0 = time.time()
    log_with_time(f"⟳ Downloading word list from {url}…")
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    lines = split_lines(resp.text)
    vlog(f"Word list downloaded ({len(lines)} lines)", t0)
    return lines


def load_words(words: Optional[Iterable[str]] = None, path: Optional[str] = None,
               url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    """
    Collect the ordered word list from the first available source: ``path``,
    then ``url``, then the inline ``words``. Every word is normalized and blank
    entries are dropped; the relative order is kept as given.
    """
    if path is not None:
        raw = read_word_file(path)
    elif url is not None:
        raw = fetch_word_list(url, timeout=timeout)
    else:
        raw = words or []
    return normalize_words(raw)
