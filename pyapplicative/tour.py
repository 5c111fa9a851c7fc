"""
A runnable walk through applicative functors, one section per idea.

Each section is a function of TourSettings returning the text it renders,
registered under a name with the @section decorator.
"""
import argparse
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
import os
import sys
import time

from immutabledict import immutabledict
from pydantic import ValidationError

from .applicative import lift_a2, lift_a3
from .array import Array
from .config import TourSettings, configure_logging
from .container import Container
from .curry import curry_n
from .display import heading, law_table, show
from .either import Either, Left, Right, either
from .functor import map  # pylint:disable=redefined-builtin
from .io import IO
from .laws import check_applicative, equal_by
from .maybe import Just, Maybe, Nothing
from .task import Task
from .validation import V

logger = logging.getLogger(__name__)

type Section = Callable[[TourSettings], str]

_registry: dict[str, Section] = {}


class TourException(Exception):
    """
    Raised for an unknown or duplicated section name
    """


def section(name: str) -> Callable[[Section], Section]:
    """
    Decorator registering a tour section under name
    """
    def decorator(func: Section) -> Section:
        if name in _registry:
            raise TourException(f"Tour section {name} duplicated")
        _registry[name] = func
        return func
    return decorator


def sections() -> immutabledict[str, Section]:
    """
    All registered sections, in tour order
    """
    return immutabledict(_registry)


add = curry_n(lambda a, b: a + b)


@section("containers")
def containers(settings: TourSettings) -> str:
    """
    Applying a function in one container to a value in another
    """
    return (heading("Applying functors to each other", settings.color)
            + show("Container.of(add(2)) * Container.of(3)",
                   Container.of(add(2)) * Container.of(3))
            + show("Container.of(2).map(add).ap(Container.of(3))",
                   Container.of(2).map(add).ap(Container.of(3)))
            + show("map(add, Container.of(2)) * Container.of(3)",
                   map(add, Container.of(2)) * Container.of(3))
            + show("(add & Container.of(2)) * Container.of(3)",
                   (add & Container.of(2)) * Container.of(3)))


@section("maybe")
def maybe_section(settings: TourSettings) -> str:
    """
    Absence propagates through ap without calling the function
    """
    calls: list[tuple[int, int]] = []

    def counted_add(a: int, b: int) -> int:
        calls.append((a, b))
        return a + b

    tracked = curry_n(counted_add)
    present = Maybe.of(tracked) * Maybe.of(2) * Maybe.of(3)
    absent = Maybe.of(tracked) * Maybe.of(None) * Maybe.of(2)
    return (heading("Maybe: coordination with absence", settings.color)
            + show("Maybe.of(add) * Maybe.of(2) * Maybe.of(3)", present)
            + show("Maybe.of(add) * Maybe.of(None) * Maybe.of(2)", absent)
            + f"  add was called {len(calls)} time(s)\n")


@dataclass(frozen=True)
class Page:
    """ A page rendered from two independently fetched resources """
    destinations: tuple[str, ...]
    events: tuple[str, ...]


def render_page(destinations: tuple[str, ...]) \
    -> Callable[[tuple[str, ...]], Page]:
    """ Curried page renderer """
    return lambda events: Page(destinations, events)


def _fetch(resource: tuple[str, ...], delay_ms: int) -> tuple[str, ...]:
    time.sleep(delay_ms / 1000.0)
    return resource


DESTINATIONS = ("Lisbon", "Kyoto", "Oaxaca")
EVENTS = ("Fado night", "Gion Matsuri", "Guelaguetza")


def fetch_page(executor: ThreadPoolExecutor, delay_ms: int) -> Task[Page]:
    """
    Both fetches are operands of ap, so they run side by side
    """
    return (Task.of(render_page)
            * Task.spawn(_fetch, DESTINATIONS, delay_ms, executor=executor)
            * Task.spawn(_fetch, EVENTS, delay_ms, executor=executor))


def fetch_page_sequentially(executor: ThreadPoolExecutor,
                            delay_ms: int) -> Task[Page]:
    """
    The second fetch is built inside chain, so it waits for the first
    """
    return \
        Task.spawn(_fetch, DESTINATIONS, delay_ms, executor=executor) >> (
            lambda destinations:
        Task.spawn(_fetch, EVENTS, delay_ms, executor=executor).map(
            render_page(destinations)))


def _timed(task: Task[Page]) -> tuple[Either, float]:
    start = time.perf_counter()
    outcome = task.run(timeout=30)
    return outcome, time.perf_counter() - start


@section("task")
def task_section(settings: TourSettings) -> str:
    """
    Independent operands of ap run concurrently
    """
    with ThreadPoolExecutor(max_workers=settings.workers) as executor:
        parallel, parallel_s = _timed(
            fetch_page(executor, settings.fetch_delay_ms))
        sequential, sequential_s = _timed(
            fetch_page_sequentially(executor, settings.fetch_delay_ms))
    logger.info("parallel %.3fs, sequential %.3fs", parallel_s, sequential_s)
    return (heading("Task: independent fetches", settings.color)
            + show("Task.of(render_page) * fetch(destinations) * fetch(events)",
                   parallel)
            + f"      took {parallel_s:.2f}s\n"
            + show("fetch(destinations) >> (lambda d: fetch(events).map(...))",
                   sequential)
            + f"      took {sequential_s:.2f}s\n")


@dataclass(frozen=True)
class User:
    """ A signed-in user """
    email: str
    password: str
    remember_me: bool


sign_in = curry_n(lambda email, password, remember_me:
                  User(email, password, remember_me))

FORM = immutabledict({"email": "ada@example.com", "password": "hunter2"})


def get_val(field: str) -> IO[str]:
    """ Reads a form field when run """
    return IO(lambda: FORM[field])


@section("io")
def io_section(settings: TourSettings) -> str:
    """
    Deferred effects combined with ap, run once at the end
    """
    program = (IO.of(sign_in) * get_val("email") * get_val("password")
               * IO.of(False))
    return (heading("IO: reading a form", settings.color)
            + show("IO.of(sign_in) * get_val('email') * get_val('password')"
                   " * IO.of(False)", program)
            + show("(...).run()", program.run()))


@section("lift")
def lift_section(settings: TourSettings) -> str:
    """
    lift_a2 / lift_a3 hide the map and ap calls
    """
    return (heading("Lifting functions", settings.color)
            + show("lift_a2(add, Maybe.of(2), Maybe.of(3))",
                   lift_a2(add, Maybe.of(2), Maybe.of(3)))
            + show("lift_a2(add, Right(2), Left('no number'))",
                   lift_a2(add, Right(2), Left("no number")))
            + show("lift_a3(sign_in, get_val('email'), get_val('password'),"
                   " IO.of(False)).run()",
                   lift_a3(sign_in, get_val("email"), get_val("password"),
                           IO.of(False)).run()))


def check_email(form: dict) -> Either[str, str]:
    """ Right(email) when it looks like an address """
    email = form.get("email", "")
    return Right(email) if "@" in email else Left("invalid email")


def check_name(form: dict) -> Either[str, str]:
    """ Right(name) when present """
    name = form.get("name", "")
    return Right(name) if name.strip() else Left("name required")


def create_user(email: str) -> Callable[[str], dict]:
    """ Curried user record constructor """
    return lambda name: {"email": email, "name": name}


def validate_first(form: dict) -> Either[str, dict]:
    """ Stops at the first failing check """
    return Either.of(create_user) * check_email(form) * check_name(form)


def validate_all(form: dict) -> V[Array[str], dict]:
    """ Collects the errors of every failing check """
    def lift(e: Either[str, str]) -> V[Array[str], str]:
        return either(V.fail, V.pure, e)
    return V.of(create_user) * lift(check_email(form)) * lift(check_name(form))


FORMS = (
    {"email": "ada@example.com", "name": "Ada"},
    {"email": "ada-at-example.com", "name": "Ada"},
    {"email": "nobody", "name": " "},
)


@section("validation")
def validation_section(settings: TourSettings) -> str:
    """
    Either keeps the first failure, V keeps all of them
    """
    text = heading("Validation: first failure vs all failures", settings.color)
    for form in FORMS:
        text += show(f"validate_first({form})", validate_first(form))
        text += show(f"validate_all({form})", validate_all(form))
    return text


@section("laws")
def laws_section(settings: TourSettings) -> str:
    """
    Law checks for every container
    """
    def inc(x: int) -> int:
        return x + 1

    def dbl(x: int) -> int:
        return x * 2

    by_run = equal_by(lambda io: io.run())
    by_task = equal_by(lambda t: t.run(timeout=5))
    checks = (
        ("Container", check_applicative(Container.pure, inc, dbl, 3)),
        ("Maybe", check_applicative(Maybe.pure, inc, dbl, 3)),
        ("Either", check_applicative(Either.pure, inc, dbl, 3)),
        ("Array", check_applicative(Array.pure, inc, dbl, 3)),
        ("V", check_applicative(V.pure, inc, dbl, 3)),
        ("IO", check_applicative(IO.pure, inc, dbl, 3, by_run)),
        ("Task", check_applicative(Task.pure, inc, dbl, 3, by_task)),
    )
    text = heading("Laws", settings.color)
    for name, results in checks:
        text += law_table(name, results, settings.color)
    return text


LOCAL_STORAGE = immutabledict({"player1": "Albert", "player2": "Theresa"})


def get_from_cache(key: str) -> IO[str | None]:
    """ Reads a value from local storage when run """
    return IO(lambda: LOCAL_STORAGE.get(key))


def start_game(p1: str) -> Callable[[str], str]:
    """ Curried game announcer """
    return lambda p2: f"{p1} vs {p2}"


def safe_add(a: Maybe[int], b: Maybe[int]) -> Maybe[int]:
    """ Adds two possibly absent numbers """
    return lift_a2(add, a, b)


@section("exercises")
def exercises(settings: TourSettings) -> str:
    """
    Worked answers to the chapter exercises
    """
    game = lift_a2(start_game, get_from_cache("player1"),
                   get_from_cache("player2"))
    return (heading("Exercises", settings.color)
            + show("safe_add(Just(2), Just(3))", safe_add(Just(2), Just(3)))
            + show("safe_add(Just(2), Nothing)", safe_add(Just(2), Nothing))
            + show("map(add, Just(2)) * Just(3)", map(add, Just(2)) * Just(3))
            + show("lift_a2(start_game, get_from_cache('player1'),"
                   " get_from_cache('player2')).run()", game.run()))


def run_tour(settings: TourSettings) -> str:
    """
    Renders the chosen sections, or all of them, in tour order
    """
    registered = sections()
    unknown = [name for name in settings.sections if name not in registered]
    if unknown:
        raise TourException(f"Unknown tour section(s): {', '.join(unknown)}")
    chosen = settings.sections or tuple(registered)
    text = ""
    for name in chosen:
        logger.info("section %s", name)
        text += registered[name](settings) + "\n"
    return text


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    """
    Command line options; anything left unset falls back to the environment
    """
    parser = argparse.ArgumentParser(
        prog="pyapplicative",
        description="Walk through applicative functors by example.")
    parser.add_argument("-s", "--section", action="append", dest="sections",
                        metavar="NAME",
                        help=f"section to show, repeatable "
                             f"({', '.join(sections())})")
    parser.add_argument("--no-color", action="store_false", dest="color",
                        default=None, help="plain text output")
    parser.add_argument("--log-level", dest="log_level")
    parser.add_argument("--workers", type=int, dest="workers")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None,
         environ: Mapping[str, str] | None = None) -> int:
    """
    Prints the tour; returns the process exit code
    """
    args = parse_args(argv)
    overrides = {key: value for key, value in vars(args).items()
                 if value is not None}
    try:
        env_settings = TourSettings.from_env(
            os.environ if environ is None else environ)
        settings = TourSettings.model_validate(
            env_settings.model_dump() | overrides)
    except ValidationError as ex:
        print(ex, file=sys.stderr)
        return 2
    configure_logging(settings.log_level)
    try:
        print(run_tour(settings), end="")
    except TourException as ex:
        print(ex, file=sys.stderr)
        return 2
    return 0
