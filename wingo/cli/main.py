import json
import os
import sys

import requests
import typer
import uvicorn
from loguru import logger

from wingo.config import settings
from wingo.errors import PredictionError
from wingo.services import PredictionService


app = typer.Typer()
BASE = os.getenv("API_BASE", f"http://127.0.0.1:{settings.port}")


@app.command()
def serve(host: str = typer.Option(None), port: int = typer.Option(None)):
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    uvicorn.run("wingo.api.main:app", host=host or settings.host, port=port or settings.port,
                log_level=settings.log_level.lower())


@app.command()
def predict():
    r = requests.get(f"{BASE}/api/predict", timeout=30)
    typer.echo(json.dumps(r.json(), ensure_ascii=False, indent=2))


@app.command("predict-local")
def predict_local():
    """Run one prediction cycle in-process, without the HTTP server."""
    try:
        data = PredictionService().generate_prediction()
    except PredictionError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
