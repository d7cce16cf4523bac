""" Package for the shared-prefix automaton that recognizes typed key sequences.

    Every rule of every layout section is one path through the same state graph. Sections are folded in one at a
    time, and a (state, character) pair that already has a transition is always followed rather than rebuilt, so
    sequences with a common prefix share the states for that prefix no matter which section they came from.
    State ids are allocated in increasing order, which lets each section be described by the last id it allocated.

    Matching is single-path: one current state, starting at state 0, and the walk fails as soon as a character has
    no transition. The construction never produces two transitions for one (state, character) pair, so there is
    never more than one path to follow. """

from .builder import AutomatonBuilder, build, build_section
from .graph import Automaton, SectionNotFoundError, START_STATE, State
