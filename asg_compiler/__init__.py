"""
Assignment Compiler
===================
A single-pass translator from one `name = expression` statement to
stack-machine-style x86 assembly (NASM syntax).

Architecture:
    ┌───────────┐    ┌─────────────┐    ┌─────────────┐    ┌───────────┐
    │ Statement │───>│  Lookahead  │───>│ Translator  │───>│  Emitter  │
    │ (text)    │    │ (1 char)    │    │ (rec. desc.)│    │ (asm text)│
    └───────────┘    └─────────────┘    └─────────────┘    └───────────┘

    - lookahead.py: one character of lookahead over any character iterable
    - parser.py:    one method per grammar production, emitting as it parses
    - emitter.py:   instruction text, declaration set, function table,
                    target profiles
"""

__version__ = "0.1.0"

from .lookahead import LookaheadSource
from .emitter import TranslationContext, TARGET_PROFILES, DEFAULT_TARGET
from .parser import Translator, ParseError


def compile_source(source: str, *, target: str = DEFAULT_TARGET) -> str:
    """Compile one newline-terminated statement to assembly text.

    Args:
        source: Statement text, e.g. "x=(a+b)*c\\n".
        target: Target profile name ('linux32' or 'linux64').

    Returns:
        The complete assembly program.

    Raises:
        ParseError: on the first syntax error. Nothing is returned in that
        case; partial output is discarded with the context.
    """
    context = TranslationContext(target=target)
    return Translator(source, context).process()
