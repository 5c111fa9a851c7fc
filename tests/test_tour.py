"""Tests for the tour sections and command line entry point."""

import pytest

from pyapplicative import Array, Just, Left, Nothing, Right, V
from pyapplicative.config import TourSettings
from pyapplicative.display import heading, law_table
from pyapplicative.laws import LawResult
from pyapplicative import tour

PLAIN = TourSettings(color=False, fetch_delay_ms=0)


def test_sections_are_registered_in_order():
    assert tuple(tour.sections()) == (
        "containers", "maybe", "task", "io", "lift", "validation", "laws",
        "exercises")


def test_duplicate_section_is_rejected():
    with pytest.raises(tour.TourException):
        tour.section("maybe")(lambda settings: "")


def test_containers_section_shows_results():
    text = tour.containers(PLAIN)
    assert "Container(5)" in text
    assert "\x1b[" not in text


def test_maybe_section_never_calls_add_on_absence():
    text = tour.maybe_section(PLAIN)
    assert "Just(5)" in text
    assert "Nothing" in text
    assert "add was called 1 time(s)" in text


def test_fetch_page_renders_both_resources(executor):
    page = tour.fetch_page(executor, 0).run(timeout=5)
    assert page == Right(tour.Page(tour.DESTINATIONS, tour.EVENTS))
    assert tour.fetch_page_sequentially(executor, 0).run(timeout=5) == page


def test_validate_first_and_all():
    good, bad_email, all_bad = tour.FORMS
    assert tour.validate_first(good) == Right(
        {"email": "ada@example.com", "name": "Ada"})
    assert tour.validate_first(bad_email) == Left("invalid email")
    assert tour.validate_first(all_bad) == Left("invalid email")
    assert tour.validate_all(bad_email) == V.fail("invalid email")
    assert tour.validate_all(all_bad).errors \
        == Array.make("invalid email", "name required")


def test_exercises():
    assert tour.safe_add(Just(2), Just(3)) == Just(5)
    assert tour.safe_add(Just(2), Nothing) == Nothing
    game = tour.lift_a2(tour.start_game, tour.get_from_cache("player1"),
                        tour.get_from_cache("player2"))
    assert game.run() == "Albert vs Theresa"


def test_sign_in_program():
    user = tour.lift_a3(tour.sign_in, tour.get_val("email"),
                        tour.get_val("password"), tour.IO.of(True)).run()
    assert user == tour.User("ada@example.com", "hunter2", True)


def test_laws_section_reports_every_container():
    text = tour.laws_section(PLAIN)
    for name in ("Container", "Maybe", "Either", "Array", "V", "IO", "Task"):
        assert f"{name} laws" in text
    assert "NO" not in text


def test_run_tour_selected_sections():
    settings = TourSettings(color=False, sections=("lift", "io"))
    text = tour.run_tour(settings)
    assert text.index("Lifting functions") < text.index("IO: reading a form")
    assert "Laws" not in text


def test_run_tour_unknown_section():
    with pytest.raises(tour.TourException, match="nope"):
        tour.run_tour(TourSettings(sections=("nope",)))


def test_main_prints_the_tour(capsys):
    code = tour.main(["--section", "containers", "--no-color"], environ={})
    assert code == 0
    assert "Container(5)" in capsys.readouterr().out


def test_main_reads_environment(capsys):
    code = tour.main([], environ={"PYAPPLICATIVE_SECTIONS": "maybe",
                                  "PYAPPLICATIVE_COLOR": "0"})
    out = capsys.readouterr().out
    assert code == 0
    assert "Maybe: coordination with absence" in out
    assert "Applying functors" not in out


def test_main_unknown_section_exit_code(capsys):
    assert tour.main(["-s", "nope"], environ={}) == 2
    assert "nope" in capsys.readouterr().err


def test_main_invalid_setting_exit_code(capsys):
    assert tour.main(["--workers", "0"], environ={}) == 2
    assert "workers" in capsys.readouterr().err


def test_main_invalid_environment_setting_exit_code(capsys):
    assert tour.main([], environ={"PYAPPLICATIVE_WORKERS": "zero"}) == 2
    assert "workers" in capsys.readouterr().err


def test_heading_and_law_table_plain():
    assert heading("Title", color=False) == "Title\n=====\n"
    table = law_table("Just", [LawResult("identity", True, Just(1), Just(1))],
                      color=False)
    assert "Just laws" in table
    assert "identity" in table
    assert "yes" in table
