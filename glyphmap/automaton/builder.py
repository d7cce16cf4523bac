""" Module for folding layout sections into one shared-prefix automaton. """

import sys
from typing import Any, Callable, Iterable, List, Mapping, Tuple

from glyphmap.util.log import StreamLogger
from .graph import Automaton, SectionNotFoundError, START_LABEL, START_STATE, State

LogCallable = Callable[[str], Any]          # Receives diagnostic messages. Its return value is ignored.
SectionMapping = Mapping[str, str]          # Input key sequence -> output string, in the order to fold them in.
Section = Tuple[str, SectionMapping]        # A section name with its rules.
BuildResult = Tuple[Automaton, List[int]]   # The automaton with the boundary state id of each section.


class AutomatonBuilder:
    """ Grows one state graph section by section. The state counter lives here and nowhere else.
        Once build() is called, the states belong to the automaton and the builder refuses further rules and sections. """

    def __init__(self, log:LogCallable=None) -> None:
        if log is None:
            log = StreamLogger(sys.stderr).log
        self._log = log                                                # Diagnostic channel for conflicting rules.
        self._states = {START_STATE: State(START_STATE, START_LABEL)}  # All states allocated so far by id.
        self._transitions = {START_STATE: {}}                          # Outgoing transitions by state id, then character.
        self._last_id = START_STATE                                    # Most recently allocated state id.
        self._names = []                                               # Names of sections folded in so far.
        self._ranges = []                                              # Boundary (last allocated id) of each section.
        self._done = False                                             # Set once the automaton has been handed out.

    def _check_open(self) -> None:
        """ The automaton owns the state tables once it is built. Growing them after that would change it. """
        if self._done:
            raise RuntimeError("Automaton has already been built.")

    def _new_state(self, label:str) -> int:
        """ Allocate the next state id with an empty transition table. """
        self._last_id += 1
        state_id = self._last_id
        self._states[state_id] = State(state_id, label)
        self._transitions[state_id] = {}
        return state_id

    def _walk(self, seq:str) -> State:
        """ Follow <seq> from the start state, reusing existing transitions and creating states for the rest. """
        state_id = START_STATE
        for i, c in enumerate(seq):
            edges = self._transitions[state_id]
            target = edges.get(c)
            if target is None:
                target = edges[c] = self._new_state(seq[:i + 1])
            state_id = target
        return self._states[state_id]

    def add_rule(self, seq:str, output:str) -> bool:
        """ Make <seq> produce <output>. The first output registered for a sequence is kept.
            A different output for it is logged and ignored. Return True if the rule is now in effect. """
        self._check_open()
        state = self._walk(seq)
        if state.accept is None:
            state.accept = output
            return True
        if state.accept != output:
            self._log(f'Two different mappings after the same sequence "{seq}": '
                      f'keeping "{state.accept}", ignoring "{output}".')
            return False
        return True

    def add_section(self, name:str, mapping:SectionMapping) -> int:
        """ Fold every rule of one section into the graph and return the section's boundary id. """
        self._check_open()
        for seq, output in mapping.items():
            self.add_rule(seq, output)
        self._names.append(name)
        self._ranges.append(self._last_id)
        return self._last_id

    def build(self) -> Automaton:
        """ Hand the finished graph over to an immutable automaton. """
        self._done = True
        return Automaton(self._states, self._transitions, self._names, self._ranges)


def build(sections:Iterable[Section], log:LogCallable=None) -> BuildResult:
    """ Build one automaton from all <sections> in order. Return it with the boundary id of each section. """
    builder = AutomatonBuilder(log)
    for name, mapping in sections:
        builder.add_section(name, mapping)
    automaton = builder.build()
    return automaton, [*automaton.section_ranges]


def build_section(sections:Iterable[Section], name:str, log:LogCallable=None) -> BuildResult:
    """ Build an automaton from only the section called <name>.
        Raise SectionNotFoundError without building anything if no section has that name. """
    sections = [*sections]
    for section in sections:
        if section[0] == name:
            return build([section], log)
    raise SectionNotFoundError(name, [s_name for s_name, _ in sections])
