"""
Entry routine: declare the sample values, print every section, wait for Enter.

Command-line arguments are ignored. Conversion failures are not caught;
they end the process with the interpreter's usual traceback and exit status.
"""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO

from dtdemo.report import print_sections
from dtdemo.sections import build_sections
from dtdemo.values import build_catalog

logger = logging.getLogger(__name__)

PAUSE_PROMPT = "Press Enter to exit..."


def main(*, now: Optional[datetime] = None, pause: bool = True, stream: Optional[TextIO] = None) -> None:
    """
    Print the whole demo, then wait for Enter.

    Args:
        now: Clock reading for the date/time samples (defaults to datetime.now())
        pause: Wait for Enter after printing
        stream: Where the demo text goes (defaults to sys.stdout)

    NOTE:
        The pause prompt goes through input(), so it is written to the real
        stdout and read from stdin regardless of `stream`.
        End of input (closed or redirected stdin) ends the pause normally.

    Raises:
        ConversionError: If a demonstrated conversion fails
    """
    if stream is None:
        stream = sys.stdout

    catalog = build_catalog(now=now)
    sections = build_sections(catalog)
    logger.debug("built %d sections", len(sections))

    print_sections(sections, stream=stream)

    if pause:
        try:
            input(PAUSE_PROMPT)
        except EOFError:
            logger.debug("stdin closed, skipping pause")
