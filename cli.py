from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List
import typer
from rich.console import Console
from rich.table import Table

from config import SETTINGS
from translator.decoders import TranslationResult
from translator.errors import TranslatorError
from translator.factory import build_translator, get_available_engines
from translator.microsoft import MicrosoftTranslator
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _run_async(coro):
    return asyncio.run(coro)


@app.command(help="Translate one or more texts using the selected engine")
def translate(
    texts: List[str] = typer.Argument(..., help="Texts to translate"),
    engine: str = typer.Option("google", "--engine", "-e"),
    source: str = typer.Option(SETTINGS.default_source_lang, "--source", "-s", help="Source language code or 'auto'"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--target", "-t"),
    key: str | None = typer.Option(None, help="Override the engine API key"),
    endpoint: str | None = typer.Option(None, help="Google web endpoint variant: en or cn"),
    region: str | None = typer.Option(None, help="Microsoft resource region"),
    proxy: str | None = typer.Option(None, help="Proxy URL"),
    timeout: float | None = typer.Option(None, help="Request timeout in seconds"),
    log_file: Path | None = typer.Option(None, help="Write debug logs to this file"),
) -> None:
    configure_logging(log_file)
    try:
        translator = build_translator(
            engine,
            api_key=key,
            endpoint=endpoint,
            region=region,
            proxy=proxy,
            timeout=timeout,
        )
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)

    params = _build_params(engine, source, target)

    async def runner() -> List[TranslationResult]:
        if isinstance(translator, MicrosoftTranslator) and len(texts) > 1:
            return await translator.translate_batch(texts, params)
        return [await translator.translate(text, params) for text in texts]

    try:
        results = _run_async(runner())
    except TranslatorError as exc:
        console.print(f"[red]{exc.__class__.__name__}: {exc}[/red]")
        raise typer.Exit(code=1)

    failed = False
    for result in results:
        if result.ok:
            console.print(result.text)
        else:
            failed = True
            console.print(f"[red]error {result.error_code}: {result.error_message}[/red]")
    if failed:
        raise typer.Exit(code=1)


@app.command(help="List the available translation engines")
def engines() -> None:
    table = Table("Engine", "Description")
    for name, label in get_available_engines().items():
        table.add_row(name, label)
    console.print(table)


def _build_params(engine: str, source: str, target: str) -> dict[str, str]:
    engine = engine.lower()
    auto = source.lower() == "auto"
    if engine == "google":
        return {"sl": source, "tl": target}
    if engine == "google_v2":
        return {"target": target} if auto else {"source": source, "target": target}
    return {"to": target} if auto else {"from": source, "to": target}


if __name__ == "__main__":
    app()
