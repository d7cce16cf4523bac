""" Vim script function that installs buffer-local insert mode mappings. """

from glyphmap.layout import LayoutWriter
from .base import LayoutDocumentWriter, snake_case

# Characters that Vim's mapping commands would otherwise treat as syntax, in key notation.
_KEY_NOTATION = {" ": "<Space>", "<": "<lt>", "|": "<Bar>", "\\": "<Bslash>"}


def key_notation(s:str) -> str:
    return "".join([_KEY_NOTATION.get(c, c) for c in s])


class VimWriter(LayoutDocumentWriter):

    def write(self, layout:LayoutWriter) -> str:
        metadata = layout.metadata
        lines = [f'" {metadata.language} ({metadata.language_code})',
                 f'" {metadata.description}',
                 f"function! Kbdmap_{snake_case(metadata.language)}()"]
        for name, keymap in layout.sections:
            lines.append(f'   " {name}')
            for seq, output in keymap.items():
                if not output:
                    # An empty right-hand side would make the command a listing instead of a mapping.
                    lines.append(f"   inoremap <buffer> {key_notation(seq)} <Nop>")
                else:
                    lines.append(f"   inoremap <buffer> {key_notation(seq)} {key_notation(output)}")
        lines.append("endfunction")
        return "\n".join(lines) + "\n"
