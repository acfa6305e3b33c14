"""
End-to-end CLI pipeline tests

Tests the full pipeline: markdown sources → stages → HTML fragments and
highlight.css on disk.
"""

import pytest
from pathlib import Path
from argparse import Namespace
import tempfile

from markfolio.__main__ import (
    env_check,
    sources_collect,
    html_render,
    stylesheet_write,
    results_report,
)
from markfolio.models import ProgramState, pipeline


POST = """# Hello, World!

Thanks for reading. !![Saved](toast:success)!!

```python
print("hi")
```
"""

ABOUT = """## About me

| Skill | Level |
|-------|-------|
| Python | !![Expert](badge:green:star)!! |
"""


def content_make(root: Path) -> None:
    """Lay out a small content tree"""
    (root / "posts").mkdir()
    (root / "posts" / "hello.md").write_text(POST, encoding="utf-8")
    (root / "about.md").write_text(ABOUT, encoding="utf-8")
    (root / "notes.txt").write_text("not markdown", encoding="utf-8")


class TestFullPipeline:
    """Test a complete run"""

    def test_renders_tree(self):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            content_make(Path(indir))
            state = ProgramState(inputdir=Path(indir), outputdir=Path(outdir), verbosity=0)

            final = pipeline(state, env_check, sources_collect, html_render, stylesheet_write, results_report)

            assert final.envOK is True
            assert final.renderResult['status'] is True
            assert len(final.renderResult['files']) == 2
            assert final.renderResult['directive_count'] == 2

            hello = (Path(outdir) / "posts" / "hello.html").read_text()
            assert '<h1 id="hello-world-">' in hello
            assert 'data-ui-type="toast"' in hello
            assert '<pre class="language-python">' in hello

            about = (Path(outdir) / "about.html").read_text()
            assert '<div class="markdown-table-container"><table>' in about
            assert 'class="markdown-ui-badge"' in about

            assert not (Path(outdir) / "notes.html").exists()

            css = (Path(outdir) / "highlight.css").read_text()
            assert ".code-block-wrapper" in css

    def test_pattern_and_subdir(self):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            content_make(Path(indir))
            state = ProgramState(
                inputdir=Path(indir),
                outputdir=Path(outdir),
                pattern="posts/*.md",
                outputSubdir="site",
                verbosity=0,
            )

            final = pipeline(state, env_check, sources_collect, html_render)

            assert final.renderResult['files'] == [str(Path(outdir) / "site" / "posts" / "hello.html")]
            assert not (Path(outdir) / "site" / "about.html").exists()

    def test_theme_changes_stylesheet(self):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            content_make(Path(indir))
            dark = pipeline(
                ProgramState(inputdir=Path(indir), outputdir=Path(outdir) / "dark", verbosity=0),
                env_check, stylesheet_write,
            )
            light = pipeline(
                ProgramState(inputdir=Path(indir), outputdir=Path(outdir) / "light", theme="light", verbosity=0),
                env_check, stylesheet_write,
            )

            assert dark.stylesheetFile.read_text() != light.stylesheetFile.read_text()


class TestStageFailures:
    """Test stages that stop the run"""

    def test_missing_inputdir(self):
        with tempfile.TemporaryDirectory() as outdir:
            state = ProgramState(inputdir=Path(outdir) / "nope", outputdir=Path(outdir), verbosity=0)
            with pytest.raises(SystemExit) as exc:
                env_check(state)
            assert exc.value.code == 1

    def test_unknown_theme(self, capsys):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            state = ProgramState(inputdir=Path(indir), outputdir=Path(outdir), theme="neon", verbosity=0)
            with pytest.raises(SystemExit) as exc:
                env_check(state)
            assert exc.value.code == 1
            assert "Available themes:" in capsys.readouterr().err

    def test_no_sources(self):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            state = env_check(ProgramState(inputdir=Path(indir), outputdir=Path(outdir), verbosity=0))
            with pytest.raises(SystemExit) as exc:
                sources_collect(state)
            assert exc.value.code == 1

    def test_report_without_result(self):
        with pytest.raises(SystemExit):
            results_report(ProgramState(verbosity=0))


class TestProgramState:
    """Test state construction and copying"""

    def test_from_namespace_drops_unknown_options(self):
        options = Namespace(pattern="*.md", theme="light", verbosity=2, json=False, saveinputmeta=True)
        state = ProgramState.state_createFromNamespace(options, Path("in"), Path("out"))

        assert state.pattern == "*.md"
        assert state.theme == "light"
        assert state.verbosity == 2
        assert state.inputdir == Path("in")
        assert not hasattr(state, "json")

    def test_copy_is_independent(self):
        state = ProgramState(theme="light")
        clone = state.copy()
        clone.theme = "default"
        assert state.theme == "light"
