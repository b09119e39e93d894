"""CLI entrypoint: Typer app definition and command registration"""

import typer

from revdiff.cli.commands import (
    commit_cmd, compare_cmd, diff_cmd, history_cmd, init_cmd, stats_cmd, words_cmd,
)


app = typer.Typer(name="revdiff", no_args_is_help=True, help="Line and word level diffs of document revisions")

app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="words")(words_cmd)
app.command(name="init")(init_cmd)
app.command(name="commit")(commit_cmd)
app.command(name="history")(history_cmd)
app.command(name="compare")(compare_cmd)
