#!/usr/bin/env python3
"""
markfolio - Markdown rendering for a portfolio site

Batch-renders a directory of markdown content files (posts, project
READMEs, ...) into HTML fragments, using the same renderer the site uses
at request time, and writes the highlight stylesheet for the chosen theme.

As with the rest of the ChRIS family of tools, the app is wrapped as a
ChRIS "plugin": it takes an input directory and an output directory.

Usage:
    markfolio inputdir/ outputdir/ [--pattern '**/*.md'] [--theme default]

    Each matched source is written to outputdir/ as <name>.html, keeping its
    path relative to inputdir, plus one highlight.css.

Examples:
    # Render every markdown file under content/
    markfolio content/ build/

    # Only posts, light code theme, verbose
    markfolio content/ build/ --pattern 'posts/*.md' --theme light -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import render, directives_find, __version__, LOG, state_connectToLogger
from .lib.theme import Theme, ThemeError, themes_listAvailable
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                       _      __       _ _
   _ __ ___   __ _ _ _| | __ / _| ___ | (_) ___
  | '_ ` _ \ / _` | '__| |/ /| |_ / _ \| | |/ _ \
  | | | | | | (_| | |  |   < |  _| (_) | | | (_) |
  |_| |_| |_|\__,_|_|  |_|\_\|_|  \___/|_|_|\___/

  Markdown rendering for a portfolio site
"""

# Define CLI arguments
parser = ArgumentParser(
    description="markfolio - render markdown content files to HTML fragments",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern", default="**/*.md", type=str, help="Glob selecting markdown sources (relative to inputdir)"
)

parser.add_argument(
    "--theme", default="default", type=str, help="Theme whose Pygments style is used for highlight.css"
)

parser.add_argument(
    "--themesDir",
    default=None,
    type=str,
    help="Directory containing themes. Defaults to package themes/ dir",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the rendered fragments",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve paths.

    Returns:
        ProgramState with added fields:
            - themeLoaded: Theme used for the stylesheet
            - htmlOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the input directory or the theme is missing
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not Path(state.inputdir).is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    try:
        state.themeLoaded = Theme(state.theme, state.themesDir)
    except ThemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        available = ", ".join(themes_listAvailable(state.themesDir)) or "none"
        print(f"Available themes: {available}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    LOG(f"Theme: {state.themeLoaded.name}", level=2)

    state.htmlOutputdir = Path(state.outputdir) / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def sources_collect(inputstate: ProgramState) -> ProgramState:
    """
    Find the markdown sources to render.

    Returns:
        ProgramState with added field:
            - sourceFiles: sorted files matching pattern under inputdir

    Exits:
        1 if nothing matches
    """
    state = inputstate.copy()

    inputdir = Path(state.inputdir)
    state.sourceFiles = sorted(p for p in inputdir.glob(state.pattern) if p.is_file())

    if not state.sourceFiles:
        print(f"Error: No sources match '{state.pattern}' in {inputdir}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Found {len(state.sourceFiles)} markdown sources", level=1)
    return state


def html_render(inputstate: ProgramState) -> ProgramState:
    """
    Render every source to an HTML fragment.

    Output paths mirror the source paths relative to inputdir, with the
    suffix replaced by .html.

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool
                - files: List[str] of written fragments
                - directive_count: int, directives found across all sources

    Exits:
        1 if a source cannot be read or a fragment cannot be written
    """
    state = inputstate.copy()

    LOG("Rendering markdown...", level=1)

    inputdir = Path(state.inputdir)
    written = []
    directive_count = 0

    for source_file in state.sourceFiles:
        try:
            source = source_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading {source_file}: {e}", file=sys.stderr)
            sys.exit(1)

        found = directives_find(source)
        directive_count += len(found)
        LOG(f"{source_file.name}: {len(source)} characters, {len(found)} directives", level=2)

        target = state.htmlOutputdir / source_file.relative_to(inputdir).with_suffix(".html")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(render(source), encoding="utf-8")
        except OSError as e:
            print(f"Error writing {target}: {e}", file=sys.stderr)
            sys.exit(1)

        LOG(f"Wrote {target}", level=3)
        written.append(str(target))

    state.renderResult = {
        "status": True,
        "files": written,
        "directive_count": directive_count,
    }
    return state


def stylesheet_write(inputstate: ProgramState) -> ProgramState:
    """
    Write highlight.css for the theme's Pygments style.

    Returns:
        ProgramState with added field:
            - stylesheetFile: path of the stylesheet

    Exits:
        1 if the theme's Pygments style is unknown
    """
    state = inputstate.copy()

    try:
        css = state.themeLoaded.stylesheet_generate(appsettings.highlight_selector)
    except ThemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    state.stylesheetFile = state.htmlOutputdir / "highlight.css"
    state.stylesheetFile.write_text(css, encoding="utf-8")
    LOG(f"Wrote {state.stylesheetFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display rendering results.

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Rendering successful!", level=1)
    LOG(f"  Fragments:  {len(state.renderResult['files'])}", level=1)
    LOG(f"  Directives: {state.renderResult['directive_count']}", level=1)
    LOG(f"  Stylesheet: {state.stylesheetFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="markfolio - markdown content renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a directory of markdown to HTML fragments.

    Orchestrates the pipeline:
        1. env_check: Validate paths and load the theme
        2. sources_collect: Glob the markdown sources
        3. html_render: Render each source
        4. stylesheet_write: Write highlight.css
        5. results_report: Display results to user
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, sources_collect, html_render, stylesheet_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
