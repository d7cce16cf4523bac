""" Plain text listing of every rule, grouped by section. """

from glyphmap.layout import LayoutWriter
from .base import LayoutDocumentWriter


class ListWriter(LayoutDocumentWriter):

    def write(self, layout:LayoutWriter) -> str:
        metadata = layout.metadata
        lines = [f"{metadata.language} ({metadata.language_code})",
                 metadata.description,
                 "----------------"]
        for name, keymap in layout.sections:
            lines.append(f"  {name}")
            for seq, output in keymap.items():
                lines.append(f"    〈{seq}〉 → 〈{output}〉")
        return "\n".join(lines) + "\n"
