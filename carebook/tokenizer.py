"""
Splits an argument string on field prefixes.

    >>> m = tokenize("1 n/Alice Tan p/9123", "n/", "p/")
    >>> m.preamble, m.value("n/"), m.value("p/")
    ('1', 'Alice Tan', '9123')

A prefix counts only at the start of the string or after whitespace, so an
address like ``Blk 5 a/b`` is not split at ``a/b`` unless ``a/`` is
preceded by a space.
"""
import re
from collections import defaultdict
from typing import Dict, List, Optional

from carebook.errors import ParseError


class ArgumentMultimap:
    def __init__(self, preamble: str = ""):
        self.preamble = preamble
        self._values: Dict[str, List[str]] = defaultdict(list)

    def put(self, prefix: str, value: str):
        self._values[prefix].append(value)

    def value(self, prefix: str) -> Optional[str]:
        """Last value given for ``prefix``, or None."""
        vals = self._values.get(prefix)
        return vals[-1] if vals else None

    def all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))

    def __contains__(self, prefix: str) -> bool:
        return bool(self._values.get(prefix))

    def verify_no_duplicate_prefixes(self, *prefixes: str):
        dupes = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if dupes:
            raise ParseError("Multiple values specified for the following single-valued field(s): "
                             + " ".join(dupes))


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    if not prefixes:
        return ArgumentMultimap(args.strip())
    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?:^|(?<=\s))({alternatives})")
    matches = list(pattern.finditer(args))

    first = matches[0].start() if matches else len(args)
    multimap = ArgumentMultimap(args[:first].strip())
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        multimap.put(m.group(1), args[m.end():end].strip())
    return multimap


def parse_index(raw: str) -> int:
    """One-based positive index."""
    raw = raw.strip()
    if not raw.isdigit() or not raw.isascii() or int(raw) < 1:
        raise ParseError(f"Index must be a positive integer, got '{raw}'.")
    return int(raw)
