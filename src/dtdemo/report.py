"""
Text rendering of demo sections.
"""

from typing import List, Optional, TextIO
import sys

from dtdemo.sections import FOOTER, TITLE, Section


def render_sections(sections: List[Section]) -> str:
    """Render sections as one block of text, framed by the title and footer banners."""
    out = [TITLE, ""]
    for section in sections:
        out.append(section.title)
        out.extend(section.lines)
        out.append("")
    out.append(FOOTER)
    out.append("")
    return "\n".join(out)


def print_sections(sections: List[Section], stream: Optional[TextIO] = None) -> None:
    """Pretty-print sections to `stream` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    print(render_sections(sections), file=stream)
