import asyncio
import sys

import typer

from csvq.config import settings
from csvq.domain.exceptions import CSVQError
from csvq.logging import logger, get_run_id

DEFAULT_CSV_URL = "https://raw.githubusercontent.com/plotly/datasets/master/2014_world_gdp_with_codes.csv"

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    CSV to questions CLI.
    """
    pass

@app.command(name="generate")
def generate(csv_url: str = typer.Argument(DEFAULT_CSV_URL, help="Publicly reachable CSV URL")):
    """
    Download a CSV, summarize it and print generated questions.
    """
    from csvq.services.questions_service import QuestionsService

    print(f"📊 Processing CSV from: {csv_url}")
    print("⏳ This may take a moment to download, parse, and generate questions...\n")

    try:
        result = asyncio.run(QuestionsService().generate(csv_url))
    except CSVQError as e:
        logger.error(f"Pipeline failed: {e.message}")
        print(f"❌ Failed: {e.message}")
        raise typer.Exit(code=1)

    if not result.success or not result.questions:
        reason = result.failure_reason or "no questions found in output"
        print(f"❌ No questions were generated ({reason})")
        print("💡 Make sure OPENAI_API_KEY is set in the environment or .env")
        raise typer.Exit(code=1)

    print("✅ Generated questions:")
    print("=" * 50)
    for i, question in enumerate(result.questions, 1):
        print(f"{i}. {question}")
    print("=" * 50)
    print(f"🎯 Generated {len(result.questions)} questions from CSV data")

@app.command(name="doctor")
def doctor():
    """
    Check configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []

    print("\n🩺 CSVQ Doctor\n")

    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Run ID: {get_run_id()}")

    print("\n[Configuration]")
    api_key_ok = bool(
        settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.get_secret_value()
    )
    if api_key_ok:
        print("  OPENAI_API_KEY:        ✅ Set")
    else:
        print("  OPENAI_API_KEY:        ❌ Missing")
        failures.append("OPENAI_API_KEY is not set; add it to .env")

    print(f"  OPENAI_MODEL_AGENT:    {settings.OPENAI_MODEL_AGENT}")
    print(f"  QUESTION_AGENT_NAME:   {settings.QUESTION_AGENT_NAME}")
    print(f"  HTTP_TIMEOUT:          {settings.HTTP_TIMEOUT}s")
    print(f"  MIN_GENERATED_CHARS:   {settings.MIN_GENERATED_CHARS}")
    print(f"  MIN_QUESTION_CHARS:    {settings.MIN_QUESTION_CHARS}")
    print(f"  MAX_QUESTIONS:         {settings.MAX_QUESTIONS}")

    print(f"\n{'─' * 50}")
    if failures:
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    print("Result: all good ✅\n")

if __name__ == "__main__":
    app()
