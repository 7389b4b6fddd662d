"""
Human Logic Main module - CLI and HTTP API
"""

import json
import logging
from typing import Any, Dict, List, Optional
import time

import typer
import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRouter
from pydantic import BaseModel, Field

from humanlogic.config import Settings, load_settings
from humanlogic.error_msg import HumanLogicError
from humanlogic.features import Feature, FeatureRegistry, OperationResult
from humanlogic.tables import OPERATIONS
from humanlogic.version import get_version

# Module-level logger
logger = logging.getLogger("humanlogic.main")


# Create CLI app with Typer
app = typer.Typer(
    name="humanlogic",
    help="Human Logic - fuzzy common sense logic calculator",
    add_completion=False,
)


# Request models
class EvaluateRequest(BaseModel):
    expression: str = Field(..., description="Expression such as 'TRUE and not MAYBE'")


class DominanceRequest(BaseModel):
    values: Dict[str, float] = Field(
        default_factory=dict, description="Category-keyed fuzzy values"
    )


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""
    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8  # Enough for '9999000ms'

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:  # up to 9999.999s
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def setup_logging(debug: bool = False, verbose: bool = False, level: Optional[str] = None) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    elif level:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.INFO
    formatter = ElapsedMsFormatter('%(elapsed)s %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)

    # Keep server access logs out of the way unless debugging
    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else logging.WARNING)


def _settings_or_exit() -> Settings:
    try:
        return load_settings()
    except HumanLogicError as e:
        setup_logging(False)
        logger.error("Invalid configuration: %s", e)
        raise typer.Exit(code=1)


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("%s failed: %s", feature_name, result.error or "Unknown error")
        raise typer.Exit(code=1)
    return result.data


def _echo_result(data: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(data, indent=2))
        return
    typer.echo(data["value"])
    if data["kind"] == "logic":
        typer.echo(f"category: {data['category'] or 'none (invalid value)'}")


def _parse_assignments(assignments: List[str]) -> Dict[str, float]:
    values: Dict[str, float] = {}
    for assignment in assignments:
        key, sep, raw = assignment.partition("=")
        if not sep:
            logger.error("Expected CATEGORY=VALUE, got '%s'", assignment)
            raise typer.Exit(code=1)
        try:
            values[key.strip()] = float(raw)
        except ValueError:
            logger.error("Not a number: '%s'", raw)
            raise typer.Exit(code=1)
    return values


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the Human Logic version"""
    setup_logging(False, level=_settings_or_exit().log_level)
    data = _handle_cli_result("version", _feature_or_exit("version").handler())
    typer.echo(f"Human Logic version: {data['version']}")


@app.command("eval")
def evaluate(
    expression: str = typer.Argument(..., help="Expression, e.g. 'TRUE and not MAYBE'"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Evaluate a logical expression"""
    setup_logging(debug, verbose, _settings_or_exit().log_level)
    result = _feature_or_exit("evaluate").handler(expression=expression)
    _echo_result(_handle_cli_result("evaluate", result), as_json)


@app.command()
def table(
    operation: str = typer.Argument(..., help="One of: not, and, or"),
    vector: bool = typer.Option(
        False, "--vector", help="Compute the table with the fuzzy vector operators"
    ),
) -> None:
    """Print the truth table of a logical operation"""
    setup_logging(False, level=_settings_or_exit().log_level)
    result = _feature_or_exit("truth-table").handler(operation=operation, vector=vector)
    data = _handle_cli_result("truth-table", result)
    typer.echo(data["markdown"])


@app.command()
def dominance(
    assignments: List[str] = typer.Argument(..., help="CATEGORY=VALUE pairs, e.g. TRUE=0.4 MAYBE=0.2"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    """Normalize a vector and show its dominating category"""
    setup_logging(False, level=_settings_or_exit().log_level)
    result = _feature_or_exit("dominance").handler(values=_parse_assignments(assignments))
    _echo_result(_handle_cli_result("dominance", result), as_json)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind the API server"),
    port: Optional[int] = typer.Option(None, help="Port to bind the API server"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
):
    """Start the Human Logic API server"""
    settings = _settings_or_exit()
    setup_logging(debug, level=settings.log_level)
    host = host or settings.host
    port = port or settings.port

    logger.info(
        f"Starting Human Logic API server version {get_version()} on {host}:{port}"
    )
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(create_app(settings), host=host, port=port)


# ----------------- API Endpoints -----------------


def _run_feature(feature_name: str, **kwargs: Any) -> Any:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{feature_name} feature not found",
        )
    try:
        result = feature.handler(**kwargs)
    except Exception as e:
        logger.error("Error in %s endpoint: %s", feature_name, str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.error or "An error occurred",
        )
    return result.data


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application"""
    settings = settings or load_settings()

    api = FastAPI(
        title="Human Logic API",
        description="Fuzzy common sense logic over HTTP",
        version=get_version(),
    )
    api.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API router for versioned endpoints
    router = APIRouter(prefix="/api/v1")

    @router.get("/version")
    async def get_version_endpoint():
        """Get Human Logic version"""
        return _run_feature("version")

    @router.post("/evaluate")
    async def evaluate_endpoint(request: EvaluateRequest):
        """Evaluate a logical expression"""
        return _run_feature("evaluate", expression=request.expression)

    @router.get("/truth-table/{operation}")
    async def truth_table_endpoint(operation: str, vector: bool = False):
        """Truth table of a logical operation"""
        if operation not in OPERATIONS:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown operation: {operation}",
            )
        return _run_feature("truth-table", operation=operation, vector=vector)

    @router.post("/dominance")
    async def dominance_endpoint(request: DominanceRequest):
        """Dominating category of a category-keyed vector"""
        return _run_feature("dominance", values=request.values)

    api.include_router(router)
    return api


# FastAPI app with default settings for external ASGI servers
api_app = create_app(Settings())


if __name__ == "__main__":
    app()
