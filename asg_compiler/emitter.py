"""
Code emitter and symbol collector for the assignment compiler.

Appends x86 assembly (NASM syntax) to the output program as the
translator recognizes constructs, and collects the two tables that are
written out once, after the exit sequence:

  - variables:  one zero-initialized data cell per distinct name
  - functions:  called name -> placeholder body (a bare return)

Register usage convention:
  - primary   (eax / rax): holds the current value
  - secondary (ebx / rbx): holds the left operand popped for a binary op
  - the machine stack holds pending left operands (push primary, pop secondary)

Output layout:
    section .text
    global _start
    _start:
            <body>
            <exit sequence>
    <function blocks>
    section .data
    <variable cells>
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)

INDENT = "        "


# ──────────────────────────────────────────────
# Target profiles
# ──────────────────────────────────────────────

TARGET_PROFILES = {
    "linux32": {
        "primary": "eax",
        "secondary": "ebx",
        "cell": "dd",
        "sign_extend": "cdq",
        "exit": ["mov     eax, 1", "int     0x80"],
        "description": "32-bit Linux (int 0x80 syscalls)",
    },
    "linux64": {
        "primary": "rax",
        "secondary": "rbx",
        "cell": "dq",
        "sign_extend": "cqo",
        "exit": ["mov     rax, 60", "syscall"],
        "description": "64-bit Linux (syscall instruction)",
    },
}

DEFAULT_TARGET = "linux32"
ENTRY_LABEL = "_start"
PLACEHOLDER_BODY = ["ret"]


class TranslationContext:
    """Output program plus declaration set and function table for one statement."""

    def __init__(self, target: str = DEFAULT_TARGET):
        if target not in TARGET_PROFILES:
            logger.warning("Unknown target %r, using %s", target, DEFAULT_TARGET)
            target = DEFAULT_TARGET
        self.target = target
        self.profile = TARGET_PROFILES[target]
        self.primary: str = self.profile["primary"]
        self.secondary: str = self.profile["secondary"]

        self.lines: List[str] = []
        # dicts keep first-seen order, which makes the trailing sections stable
        self.variables: Dict[str, str] = {}
        self.functions: Dict[str, List[str]] = {}

    # ── Output helpers ────────────────────────

    def emit_line(self, text: str):
        """Emit one instruction line, indented."""
        logger.debug("emit: %s", text)
        self.lines.append(f"{INDENT}{text}")

    def emit_label(self, label: str):
        self.lines.append(f"{label}:")

    def emit_blank(self):
        self.lines.append("")

    # ── Symbol collection ─────────────────────

    def declare_variable(self, name: str):
        """Record a zero-initialized cell for name (idempotent)."""
        if name not in self.variables:
            logger.debug("declare variable %s", name)
        self.variables[name] = f"{name:<8}{self.profile['cell']}      0"

    def declare_function(self, name: str, body: Optional[List[str]] = None):
        """Bind name to a body; a repeated call overwrites the previous binding."""
        logger.debug("declare function %s", name)
        self.functions[name] = list(body if body is not None else PLACEHOLDER_BODY)

    # ── Instruction builders ──────────────────

    def load_literal(self, digit: str):
        self.emit_line(f"mov     {self.primary}, {digit}")

    def load_variable(self, name: str):
        self.emit_line(f"mov     {self.primary}, [{name}]")

    def store_variable(self, name: str):
        self.emit_line(f"mov     [{name}], {self.primary}")

    def call(self, name: str):
        self.emit_line(f"call    {name}")

    def clear_primary(self):
        self.emit_line(f"xor     {self.primary}, {self.primary}")

    def push_primary(self):
        self.emit_line(f"push    {self.primary}")

    def pop_secondary(self):
        self.emit_line(f"pop     {self.secondary}")

    def add(self):
        self.emit_line(f"add     {self.primary}, {self.secondary}")

    def subtract(self):
        """primary = secondary - primary.

        The left operand was pushed first, so it sits in the secondary
        register; subtract the other way round and negate.
        """
        self.emit_line(f"sub     {self.primary}, {self.secondary}")
        self.emit_line(f"neg     {self.primary}")

    def multiply(self):
        self.emit_line(f"imul    {self.primary}, {self.secondary}")

    def divide(self):
        """primary = secondary / primary (signed)."""
        # idiv divides edx:eax by its operand, so the dividend must move to primary
        self.emit_line(f"xchg    {self.primary}, {self.secondary}")
        self.emit_line(self.profile["sign_extend"])
        self.emit_line(f"idiv    {self.secondary}")

    # ── Program framing ───────────────────────

    def start(self):
        """Emit the fixed prelude: text section and entry label."""
        self.lines.append("section .text")
        self.lines.append(f"global {ENTRY_LABEL}")
        self.emit_label(ENTRY_LABEL)

    def finish(self) -> str:
        """Emit the exit sequence and trailing sections; return the program text."""
        for instr in self.profile["exit"]:
            self.emit_line(instr)

        for name, body in self.functions.items():
            self.emit_label(name)
            for instr in body:
                self.emit_line(instr)
            self.emit_blank()

        if self.variables:
            self.lines.append("section .data")
            self.lines.extend(self.variables.values())

        logger.info("Finished %s program: %d lines, %d variable(s), %d function(s)",
                    self.target, len(self.lines), len(self.variables),
                    len(self.functions))
        return "\n".join(self.lines) + "\n"
