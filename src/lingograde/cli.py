"""CLI entry point for lingograde."""

from pathlib import Path
from typing import Optional

import click

from lingograde.engine.diff import FeedbackStatus, FeedbackToken

_COLORS = {
    FeedbackStatus.CORRECT: "green",
    FeedbackStatus.WRONG: "red",
    FeedbackStatus.MISSING: "red",
}


def render_diff(tokens: list[FeedbackToken]) -> str:
    """Color a diff for the terminal: green for correct, red otherwise."""
    return "".join(
        click.style(t.char, fg=_COLORS[t.status], underline=t.status is FeedbackStatus.MISSING)
        for t in tokens
    )


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a config.yaml (default: ~/.lingograde/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path]) -> None:
    """lingograde: grade typed answers for language practice."""
    from lingograde.config.settings import Settings
    from lingograde.engine.evaluator import Evaluator

    ctx.ensure_object(dict)
    ctx.obj["evaluator"] = Evaluator(settings=Settings.load(config_path))


@main.command()
@click.argument("user_answer")
@click.argument("correct_answer")
@click.option(
    "--tolerance",
    type=click.Choice(["strict", "normal", "lenient"]),
    default=None,
    help="Typo tolerance (default from config)",
)
@click.pass_context
def check(ctx: click.Context, user_answer: str, correct_answer: str, tolerance: Optional[str]) -> None:
    """Grade USER_ANSWER against CORRECT_ANSWER ('/' separates variants)."""
    result = ctx.obj["evaluator"].check_typed(user_answer, correct_answer, tolerance)

    verdict = click.style("correct", fg="green") if result.passed else click.style("wrong", fg="red")
    click.echo(f"  {verdict}  similarity={result.similarity:.2f}  answer={result.matched_answer}")
    if result.diff:
        click.echo(f"  {render_diff(result.diff)}")
    for item in result.feedback:
        click.echo(f"  [{item.severity}] {item.message}")
        if item.suggestion:
            click.echo(f"          {item.suggestion}")
    ctx.exit(0 if result.passed else 1)


@main.command()
@click.argument("user_answer")
@click.argument("correct_answer")
@click.pass_context
def diff(ctx: click.Context, user_answer: str, correct_answer: str) -> None:
    """Show a character diff of USER_ANSWER against one CORRECT_ANSWER."""
    tokens = ctx.obj["evaluator"].diff(user_answer, correct_answer)
    click.echo(render_diff(tokens))


@main.command()
@click.argument("sentence")
@click.argument("correct_answer")
@click.option("--fallback", default=None, help="Prompt text to mask if the answer is not found")
@click.pass_context
def mask(ctx: click.Context, sentence: str, correct_answer: str, fallback: Optional[str]) -> None:
    """Hide CORRECT_ANSWER inside SENTENCE for a cloze exercise."""
    click.echo(ctx.obj["evaluator"].mask(sentence, correct_answer, fallback=fallback))


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show effective settings."""
    import yaml

    settings = ctx.obj["evaluator"].settings
    click.echo(yaml.dump(settings.model_dump(mode="json"), default_flow_style=False), nl=False)
