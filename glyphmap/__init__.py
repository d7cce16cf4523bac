""" Package for turning keyboard layouts into input-method documents and a queryable automaton.

    compose - Layout producers build many of their outputs by stacking combining marks on a base letter.
    Wherever Unicode has a precomposed character for the result, it is used instead of the loose marks.

    layout - Each built-in layout is a producer that writes named sections of "key sequence -> output" rules.
    Duplicate key sequences within a section are logged and dropped; the first one wins.

    automaton - All sections are folded, in order, into one shared-prefix state graph. Common prefixes share
    states even across sections, and the range of state ids each section added is recorded so the graph can be
    split back up by section. Typed sequences are matched against it by walking one transition per character.

    writer - Document formats for downstream consumers: a plain listing, an Emacs Quail package, a Vim mapping
    function, a Graphviz diagram of the automaton, and a JavaScript lookup table.

    __main__ - The first command-line argument chooses an entry point (write, query or sections). """

from glyphmap.glyphmap import Glyphmap
from glyphmap.options import GlyphmapOptions
