import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from databases import Database
from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich import print
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse
from starlette.routing import Route

from app import config
from app.html.order_form import OrderForm
from orders.models import Order, ValidationError
from orders.repository import OrderRepository, create_db
from orders.services import (
    get_current_order,
    set_cake_type,
    set_fillings,
    set_name,
)


logger = logging.getLogger(__name__)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    # basicConfig is a no-op after the first call
    logging.getLogger().setLevel(level)


def render(request: Request, order: Order, error: str | None = None) -> str:
    templates: Environment = request.app.state.templates
    return OrderForm(order, environment=templates, error=error).render()


@aHTMLResponse
async def homepage(request: Request) -> str:
    order = await get_current_order(repository=request.app.state.repo)
    return render(request, order)


@aHTMLResponse
async def submit_name(request: Request) -> str | tuple[str, int]:
    repo: OrderRepository = request.app.state.repo
    async with request.form() as form:
        value = str(form.get("name", ""))
    try:
        order = await set_name(value, repository=repo)
    except ValidationError as e:
        order = await get_current_order(repository=repo)
        return render(request, order, error=str(e)), 400
    return render(request, order)


async def submit_cake_type(request: Request) -> RedirectResponse:
    async with request.form() as form:
        value = str(form.get("cakeType", ""))
    if value:
        await set_cake_type(value, repository=request.app.state.repo)
    else:
        logger.info("No cake type submitted, order left as is")
    return RedirectResponse("/", status_code=302)


async def submit_fillings(request: Request) -> RedirectResponse:
    async with request.form() as form:
        values = [str(f) for f in form.getlist("fillings")]
    await set_fillings(values, repository=request.app.state.repo)
    return RedirectResponse("/", status_code=302)


def create_app(conf: config.Config | None = None) -> Starlette:
    conf = config.Config() if conf is None else conf
    configure_logging(conf.log_level)
    db = Database(conf.db_url)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        await db.connect()
        try:
            await create_db(db)
            print(f"Connected to [bold]{conf.db_url}[/bold] ({conf.env.value})")
            yield
        finally:
            await db.disconnect()
            print("Disconnected from the database.")

    app = Starlette(
        debug=True if conf.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/name", submit_name, methods=["POST"]),
            Route("/cake-type", submit_cake_type, methods=["POST"]),
            Route("/fillings", submit_fillings, methods=["POST"]),
        ],
        lifespan=lifespan,
    )

    app.state.config = conf
    app.state.repo = OrderRepository(db)
    app.state.templates = Environment(
        loader=FileSystemLoader(conf.html_dir),
        autoescape=select_autoescape(),
    )
    return app


app = create_app()
