""" Module for the states and transition table of a built automaton, and for matching input against them. """

from bisect import bisect_left
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

START_STATE = 0       # Id of the start state shared by every section.
START_LABEL = "start"  # Diagnostic label of the start state.

Transition = Tuple[Tuple[int, str], int]  # ((source state id, input character), target state id).


class SectionNotFoundError(LookupError):
    """ Raised when a build is restricted to a section name that no producer defined. """

    def __init__(self, name:str, available:Sequence[str]=()) -> None:
        super().__init__(name)
        self.name = name            # Section name that was requested.
        self.available = available  # Names that would have been accepted.

    def __str__(self) -> str:
        msg = f'No section named "{self.name}".'
        if self.available:
            msg += ' Available sections: ' + ", ".join(f'"{s}"' for s in self.available)
        return msg


class State:
    """ One node of the automaton. Only the builder assigns the accept value. """

    __slots__ = ["state_id", "label", "accept"]

    def __init__(self, state_id:int, label:str, accept:str=None) -> None:
        self.state_id = state_id  # Unique non-negative id within one automaton.
        self.label = label        # Input characters consumed to get here from the start state.
        self.accept = accept      # Output produced when input ends here, or None if this is not a final state.

    def is_accepting(self) -> bool:
        return self.accept is not None

    def __repr__(self) -> str:
        return f'State{(self.state_id, self.label, self.accept)!r}'


class Automaton:
    """ Immutable deterministic state graph with bookkeeping for the sections folded into it. """

    def __init__(self, states:Dict[int, State], transitions:Dict[int, Dict[str, int]],
                 section_names:Sequence[str], section_ranges:Sequence[int], start=START_STATE) -> None:
        assert start in states
        assert len(section_names) == len(section_ranges)
        self._states = states                       # All states by id.
        self._transitions = transitions             # Outgoing transitions of each state id by input character.
        self._section_names = tuple(section_names)  # Names of the sections in the order they were folded in.
        self._section_ranges = tuple(section_ranges)  # Highest state id allocated by each section, in order.
        self._start = start                         # Id of the state every match begins from.

    def __len__(self) -> int:
        return len(self._states)

    @property
    def start(self) -> int:
        return self._start

    @property
    def section_names(self) -> Tuple[str, ...]:
        return self._section_names

    @property
    def section_ranges(self) -> Tuple[int, ...]:
        return self._section_ranges

    def state(self, state_id:int) -> State:
        """ Return the state with <state_id>. A missing id is a broken automaton and raises KeyError. """
        return self._states[state_id]

    def states(self) -> List[State]:
        """ Return every state in order of id. """
        return [self._states[i] for i in sorted(self._states)]

    def target(self, state_id:int, c:str) -> Optional[int]:
        """ Return the state reached from <state_id> on character <c>, or None if there is no such transition. """
        return self._transitions[state_id].get(c)

    def transitions(self) -> Iterator[Transition]:
        """ Yield the whole transition table sorted by source state id, then by character. """
        for state_id in sorted(self._transitions):
            edges = self._transitions[state_id]
            for c in sorted(edges):
                yield (state_id, c), edges[c]

    def outgoing(self, state_id:int) -> Dict[int, str]:
        """ Return the character leading to each state directly reachable from <state_id>, sorted by target id.
            Every non-start state has exactly one incoming transition, so no target is listed twice. """
        edges = self._transitions[state_id]
        return {target: c for c, target in sorted(edges.items(), key=lambda item: item[1])}

    def section_bounds(self, index:int) -> range:
        """ Return the range of state ids allocated while section <index> was folded in.
            It is empty when the section only reused states created by earlier sections. """
        if not 0 <= index < len(self._section_ranges):
            raise IndexError(f'Section index {index} out of range.')
        lower = self._section_ranges[index - 1] if index else START_STATE
        return range(lower + 1, self._section_ranges[index] + 1)

    def section_states(self, index:int) -> List[State]:
        """ Return the states created by section <index> in order of id. """
        return [self._states[i] for i in self.section_bounds(index)]

    def section_of(self, state_id:int) -> Optional[int]:
        """ Return the index of the section that created <state_id>, or None for the start state. """
        if state_id == self._start:
            return None
        if state_id not in self._states:
            raise KeyError(state_id)
        return bisect_left(self._section_ranges, state_id)

    def run(self, text:str) -> Optional[str]:
        """ Walk one transition per character of <text> from the start state.
            Return the output of the final state, or None if the walk falls off the graph or ends on a
            non-final state. A matched empty output is returned as "", never as None. """
        state_id = self._start
        for c in text:
            state_id = self._transitions[state_id].get(c)
            if state_id is None:
                return None
        return self._states[state_id].accept
