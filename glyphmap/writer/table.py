""" JavaScript lookup table of the automaton for embedding in web pages. """

import json

from glyphmap.automaton import Automaton
from .base import AutomatonDocumentWriter


def js_string(s:str) -> str:
    """ Return a JavaScript string literal. JSON allows raw line and paragraph separators inside strings,
        but older JavaScript parsers end the line there, so those two are escaped. """
    text = json.dumps(s, ensure_ascii=False)
    return text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


class TableWriter(AutomatonDocumentWriter):
    """ Writes an array indexed by state id. Each entry holds the label (l), the accepted output or null (a),
        and a Map from input character to target state id, or null if the state has no transitions (t). """

    def write_automaton(self, automaton:Automaton) -> str:
        entries = []
        for state in automaton.states():
            accept = "null" if state.accept is None else js_string(state.accept)
            edges = sorted((c, target) for target, c in automaton.outgoing(state.state_id).items())
            if edges:
                transitions = "new Map([" + ",".join([f"[{js_string(c)}, {target}]" for c, target in edges]) + "])"
            else:
                transitions = "null"
            entries.append(f"    {{l: {js_string(state.label)}, a: {accept}, t: {transitions}}}")
        return "let automaton = [\n" + ",\n".join(entries) + "\n];\n"
