"""Line classifier: structural questions about a single line of C-like text.

Every predicate works on plain substrings of one trimmed line. Nothing here
tokenizes, so text inside string literals or longer identifiers can match.
Those false positives are part of the heuristic and are kept as they are.
"""

from __future__ import annotations

# Characters C's isspace() accepts
C_WHITESPACE = " \t\n\v\f\r"

LINE_COMMENT = "//"

LOOP_MARKERS = ("for(", "for (", "while(", "while (", "do{", "do {")
ALLOCATION_MARKERS = ("malloc(", "malloc (")


def trim_line(line: str) -> str:
    """Strip leading whitespace, C ``isspace`` style."""
    return line.lstrip(C_WHITESPACE)


def is_skippable(trimmed: str) -> bool:
    """Empty lines and ``//`` comment lines are never classified."""
    return not trimmed or trimmed.startswith(LINE_COMMENT)


def is_loop_start(line: str) -> bool:
    return any(marker in line for marker in LOOP_MARKERS)


def is_function_start(line: str) -> bool:
    """Look for ``type name(``: whitespace somewhere before the first ``(``.

    A bare call such as ``foo(x);`` has no whitespace before its parenthesis
    and is rejected. ``if (x)`` is accepted; the scanner only asks this
    question outside of function bodies.
    """
    open_paren = line.find("(")
    if open_paren < 0:
        return False
    return any(ch in C_WHITESPACE for ch in line[:open_paren])


def extract_function_name(line: str) -> str:
    """Return the second whitespace-separated token, cut at its first ``(``.

    ``int main(void) {`` gives ``main``. Leading parentheses of the token are
    kept and the cut happens at the first ``(`` after them, so ``if (x) {``
    gives ``(x)``. An empty string is returned when there is no second token.
    """
    tokens = line.split()
    if len(tokens) < 2:
        return ""
    token = tokens[1]
    body = token.lstrip("(")
    cut = body.find("(")
    if cut < 0:
        return token
    return token[:len(token) - len(body) + cut]


def is_recursive_call(line: str, func_name: str) -> bool:
    """True if ``func_name`` is called on this line.

    Only the first occurrence of the name is inspected, and it counts as a
    call when the next non-whitespace character is ``(``. A line that holds
    the name together with ``{`` is taken for the definition and rejected.
    """
    if not func_name:
        return False

    call_pos = line.find(func_name)
    if call_pos < 0:
        return False

    if "{" in line:
        return False

    after_name = line[call_pos + len(func_name):].lstrip(C_WHITESPACE)
    return after_name.startswith("(")


def is_malloc_call(line: str) -> bool:
    return any(marker in line for marker in ALLOCATION_MARKERS)


def is_array_declaration(line: str) -> bool:
    """A ``[`` ... ``]`` pair with something other than whitespace inside.

    Any subscript matches, ``a[i]`` as well as ``int arr[10]``; the
    classifier does not look at declaration context.
    """
    open_bracket = line.find("[")
    if open_bracket < 0:
        return False

    close_bracket = line.find("]", open_bracket)
    if close_bracket < 0:
        return False

    inside = line[open_bracket + 1:close_bracket]
    return any(ch not in C_WHITESPACE for ch in inside)
