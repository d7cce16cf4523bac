""" Graphviz diagram of the automaton with one cluster per layout section. """

from typing import Any, Mapping, NamedTuple

from glyphmap.automaton import Automaton
from .base import AutomatonDocumentWriter, escape_quotes, LogCallable

CONFIG_SECTION = "graphviz"  # Section of the CFG file with style overrides.


class GraphStyle(NamedTuple):
    """ Colors and shapes used in the diagram. Values are Graphviz attribute values. """

    cluster_style: str = "filled"
    cluster_bgcolor: str = "aliceblue"
    cluster_node_shape: str = "circle"
    cluster_node_bgcolor: str = "white"
    cluster_node_fontcolor: str = "black"
    intermediate_shape: str = "circle"
    intermediate_node_bgcolor: str = "black"
    intermediate_fontcolor: str = "white"
    start_bgcolor: str = "white"
    start_fontcolor: str = "black"
    start_shape: str = "ellipse"

    def with_options(self, options:Mapping[str, Any]) -> "GraphStyle":
        """ Return a copy with fields replaced by config <options>. Unknown names are an error. """
        unknown = set(options) - set(self._fields)
        if unknown:
            raise ValueError(f'Unknown graph style option(s): {", ".join(sorted(unknown))}')
        return self._replace(**{k: str(v) for k, v in options.items()})


def edge_label(c:str) -> str:
    if c == " ":
        return "space"
    return escape_quotes(c)


class GraphvizWriter(AutomatonDocumentWriter):

    def __init__(self, style:GraphStyle=None, log:LogCallable=None) -> None:
        super().__init__(log)
        self._style = style or GraphStyle()

    def write_automaton(self, automaton:Automaton) -> str:
        style = self._style
        lines = ["digraph G {"]
        for cluster_num, name in enumerate(automaton.section_names):
            lines += [f"\tsubgraph cluster_{cluster_num} {{",
                      f"\t\tstyle={style.cluster_style};",
                      f"\t\tbgcolor={style.cluster_bgcolor};",
                      f"\t\tnode [style=filled,shape={style.cluster_node_shape},"
                      f"fillcolor={style.cluster_node_bgcolor},fontcolor={style.cluster_node_fontcolor}];",
                      f'\t\tlabel="{escape_quotes(name)}";']
            for state in automaton.section_states(cluster_num):
                if state.is_accepting():
                    lines.append(f'\t\t{state.state_id:3} [label="{escape_quotes(state.accept)}"];')
            lines.append("\t}")
        lines.append(f"\tnode [style=filled,fillcolor={style.intermediate_node_bgcolor},"
                     f"fontcolor={style.intermediate_fontcolor},shape={style.intermediate_shape}];")
        for state in automaton.states():
            cur = state.state_id
            label = escape_quotes(state.label)
            if cur == automaton.start:
                lines.append(f"\t{cur:3} [style=filled,fillcolor={style.start_bgcolor},"
                             f'fontcolor={style.start_fontcolor},shape={style.start_shape},label="{label}"]')
            elif not state.is_accepting():
                lines.append(f'\t{cur:3}     \t[label="{label}"];')
            for target, c in automaton.outgoing(cur).items():
                lines.append(f'\t{cur:3} -> {target:3}\t[label="{edge_label(c)}"];')
        lines.append("}")
        return "\n".join(lines) + "\n"
