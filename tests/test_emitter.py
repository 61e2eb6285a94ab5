"""
Tests for the code emitter / symbol collector.
"""

from asg_compiler.emitter import TranslationContext, TARGET_PROFILES, DEFAULT_TARGET


class TestEmission:
    def test_emit_line_is_indented(self):
        ctx = TranslationContext()
        ctx.emit_line("nop")
        assert ctx.lines == ["        nop"]

    def test_labels_are_not_indented(self):
        ctx = TranslationContext()
        ctx.emit_label("f")
        assert ctx.lines == ["f:"]

    def test_start_emits_prelude(self):
        ctx = TranslationContext()
        ctx.start()
        assert ctx.lines == ["section .text", "global _start", "_start:"]


class TestSymbolCollection:
    def test_declare_variable_idempotent(self):
        ctx = TranslationContext()
        ctx.declare_variable("x")
        ctx.declare_variable("x")
        assert list(ctx.variables) == ["x"]

    def test_declare_function_overwrites(self):
        ctx = TranslationContext()
        ctx.declare_function("f", ["nop", "ret"])
        ctx.declare_function("f")
        assert ctx.functions == {"f": ["ret"]}

    def test_placeholder_body_not_shared(self):
        ctx = TranslationContext()
        ctx.declare_function("f")
        ctx.functions["f"].append("nop")
        ctx.declare_function("g")
        assert ctx.functions["g"] == ["ret"]


class TestFinish:
    def test_no_data_section_without_variables(self):
        ctx = TranslationContext()
        ctx.start()
        asm = ctx.finish()
        assert "section .data" not in asm
        assert asm.endswith("int     0x80\n")

    def test_function_blocks_then_variables(self):
        ctx = TranslationContext()
        ctx.start()
        ctx.declare_function("f")
        ctx.declare_variable("x")
        lines = ctx.finish().rstrip("\n").split("\n")
        assert lines[-5:] == ["f:", "        ret", "", "section .data", "x       dd      0"]

    def test_exit_sequence_per_target(self):
        for name, profile in TARGET_PROFILES.items():
            ctx = TranslationContext(target=name)
            lines = ctx.finish().rstrip("\n").split("\n")
            assert [l.strip() for l in lines] == profile["exit"]


class TestTargets:
    def test_default_target(self):
        assert TranslationContext().target == DEFAULT_TARGET == "linux32"

    def test_unknown_target_falls_back(self, caplog):
        ctx = TranslationContext(target="m68k")
        assert ctx.target == DEFAULT_TARGET
        assert "Unknown target" in caplog.text

    def test_register_names(self):
        ctx = TranslationContext(target="linux64")
        assert (ctx.primary, ctx.secondary) == ("rax", "rbx")
