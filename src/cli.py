"""Click CLI: collects text and credentials, runs comparisons, shows analytics."""

import asyncio
import logging
import os
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from config.config_loader import AppConfig, load_config
from src.acquisition import GENERIC_FAILURE_MESSAGE
from src.models import MODEL_CLASSES, OPEN_SOURCE, PROPRIETARY, RATING_CATEGORIES, Credentials, SessionState
from src.output import (
    column_label,
    print_analytics,
    print_model_options,
    print_summaries,
    print_text_stats,
)
from src.session import (
    generate_summaries,
    new_session,
    record_comparison,
    select_model,
    session_analytics,
    set_credential,
    set_preference,
    set_rating,
    set_text,
    use_sample_text,
)
from src.source_file import parse_file
from src.text_input import SAMPLE_TEXT

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)

_CREDENTIAL_PROVIDERS = {OPEN_SOURCE: "huggingface", PROPRIETARY: "openai"}
_CREDENTIAL_PROMPTS = {OPEN_SOURCE: "Hugging Face API key", PROPRIETARY: "OpenAI API key"}
_RECOVERY_ACTIONS = ["retry", "keys", "models", "quit"]


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _resolve_source_text(
    text: str | None,
    source_file: str | None,
    use_sample: bool,
) -> tuple[str | None, dict]:
    """Returns (text, front matter). --file beats --text beats --sample; None means ask."""
    if source_file:
        return parse_file(Path(source_file))
    if text:
        return text, {}
    if use_sample:
        return SAMPLE_TEXT, {}
    return None, {}


def _initial_credentials(config: AppConfig, open_source_key: str | None, proprietary_key: str | None) -> Credentials:
    """CLI option wins, then the environment variable named in settings."""
    keys = {OPEN_SOURCE: open_source_key, PROPRIETARY: proprietary_key}
    for model_class, provider in _CREDENTIAL_PROVIDERS.items():
        if not keys[model_class]:
            env_name = config.providers[provider].api_key_env
            keys[model_class] = os.environ.get(env_name, "").strip()
    return Credentials(open_source_key=keys[OPEN_SOURCE], proprietary_key=keys[PROPRIETARY])


def _prompt_missing_credentials(state: SessionState) -> None:
    current = {OPEN_SOURCE: state.credentials.open_source_key, PROPRIETARY: state.credentials.proprietary_key}
    for model_class in MODEL_CLASSES:
        if not current[model_class].strip():
            key = click.prompt(_CREDENTIAL_PROMPTS[model_class], hide_input=True)
            set_credential(state, model_class, key)


def _prompt_credentials(state: SessionState) -> None:
    for model_class in MODEL_CLASSES:
        key = click.prompt(_CREDENTIAL_PROMPTS[model_class], hide_input=True)
        set_credential(state, model_class, key)


def _prompt_models(state: SessionState, config: AppConfig) -> None:
    options = {OPEN_SOURCE: config.open_source_models, PROPRIETARY: config.proprietary_models}
    defaults = {OPEN_SOURCE: config.defaults.open_source_model, PROPRIETARY: config.defaults.proprietary_model}
    for model_class in MODEL_CLASSES:
        ids = [opt.id for opt in options[model_class]]
        current = getattr(state, f"{model_class}_model")
        model_id = click.prompt(
            f"{model_class.replace('_', '-').title()} model",
            type=click.Choice(ids),
            default=current if current in ids else defaults[model_class],
        )
        select_model(state, model_class, model_id)


def _prompt_text(state: SessionState) -> None:
    text = click.prompt("Paste text to summarize (blank for sample text)", default="", show_default=False)
    if text.strip():
        set_text(state, text)
    else:
        use_sample_text(state)


def _collect_ratings(state: SessionState) -> None:
    for model_class in MODEL_CLASSES:
        label = column_label(model_class, getattr(state, f"{model_class}_model"))
        console.print(f"\n[bold]Rate the {label} summary[/bold]")
        for category in RATING_CATEGORIES:
            value = click.prompt(f"  {category.title()} (1-5)", type=click.IntRange(1, 5))
            set_rating(state, model_class, category, value)


def _collect_preference(state: SessionState) -> None:
    choice = click.prompt(
        "Which summary do you prefer?",
        type=click.Choice([OPEN_SOURCE, PROPRIETARY]),
    )
    set_preference(state, choice)


def _run_session(state: SessionState, config: AppConfig) -> None:
    """Run comparisons until the user stops. Returns after the last analytics view."""
    while True:
        _prompt_missing_credentials(state)
        if not state.text.strip():
            _prompt_text(state)
        print_text_stats(state.text)

        with console.status("Generating summaries..."):
            ok = asyncio.run(generate_summaries(state, config))

        if not ok:
            console.print(f"[bold red]Error:[/bold red] {state.error}")
            if state.error != GENERIC_FAILURE_MESSAGE:
                # Missing input: prompted again at the top of the loop
                continue
            action = click.prompt(
                "Retry, change keys, change models, or quit?",
                type=click.Choice(_RECOVERY_ACTIONS),
                default="quit",
            )
            if action == "quit":
                return
            if action == "keys":
                _prompt_credentials(state)
            elif action == "models":
                _prompt_models(state, config)
            continue

        print_summaries(state.summaries)
        _collect_ratings(state)
        _collect_preference(state)
        comparison = record_comparison(state)

        print_analytics(session_analytics(state), comparison.open_source_model, comparison.proprietary_model)

        if not click.confirm("\nCompare another text?", default=False):
            return
        set_text(state, "")


@click.command()
@click.option("--text", default=None, help="Text to summarize")
@click.option("--file", "source_file", type=click.Path(exists=True), help="Read text from a .md/.txt file")
@click.option("--sample", "use_sample", is_flag=True, help="Start with the built-in sample text")
@click.option("--open-source-model", default=None, help="Hugging Face model id (default: from config)")
@click.option("--proprietary-model", default=None, help="Proprietary model id (default: from config)")
@click.option("--open-source-key", default=None, help="Hugging Face API key (default: from environment)")
@click.option("--proprietary-key", default=None, help="OpenAI API key (default: from environment)")
@click.option("--list-models", is_flag=True, help="Show the known models and exit")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def main(
    text: str | None,
    source_file: str | None,
    use_sample: bool,
    open_source_model: str | None,
    proprietary_model: str | None,
    open_source_key: str | None,
    proprietary_key: str | None,
    list_models: bool,
    verbose: bool,
) -> None:
    """Summary Showdown -- compare open-source and proprietary summaries.

    \b
    Examples:
      python -m src.cli --sample
      python -m src.cli --file article.md
      python -m src.cli --text "..." --open-source-model google/pegasus-xsum
      python -m src.cli --list-models
    """
    load_dotenv()
    _setup_logging(verbose)

    try:
        config = load_config()
    except FileNotFoundError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        sys.exit(1)

    if list_models:
        print_model_options(config)
        return

    source_text, meta = _resolve_source_text(text, source_file, use_sample)

    state = new_session(config, _initial_credentials(config, open_source_key, proprietary_key))

    # CLI flags win over front matter
    os_model = open_source_model or meta.get("open_source_model")
    prop_model = proprietary_model or meta.get("proprietary_model")
    if os_model:
        select_model(state, OPEN_SOURCE, os_model)
    if prop_model:
        select_model(state, PROPRIETARY, prop_model)

    if source_text:
        set_text(state, source_text)

    console.print(
        f"\n[bold cyan]Summary Showdown[/bold cyan] -- "
        f"{column_label(OPEN_SOURCE, state.open_source_model)} vs "
        f"{column_label(PROPRIETARY, state.proprietary_model)}\n"
    )

    _run_session(state, config)


if __name__ == "__main__":
    main()
