"""Validated input readers."""

import pytest

from road_network.adapters.console import ScriptedConsole
from road_network.io.prompts import Prompter
from road_network.network.cities import CityDirectory


def make_prompter(*answers):
    console = ScriptedConsole(list(answers))
    return Prompter(console), console


class TestReadInt:
    def test_returns_first_value_in_range(self):
        prompter, console = make_prompter("0", "25", "abc", "", "3.5", "7", "8")
        assert prompter.read_int("Choice: ", 1, 9) == 7
        assert console.remaining == 1
        errors = [line for line in console.lines if line.startswith("Invalid input")]
        assert len(errors) == 5
        assert errors[0] == "Invalid input. Please enter a number between 1 and 9."

    def test_accepts_bounds_and_whitespace(self):
        prompter, _ = make_prompter(" 1 ")
        assert prompter.read_int("Choice: ", 1, 9) == 1
        prompter, _ = make_prompter("9")
        assert prompter.read_int("Choice: ", 1, 9) == 9

    def test_prompt_repeated_on_each_attempt(self):
        prompter, console = make_prompter("x", "2")
        prompter.read_int("Pick: ", 1, 3)
        assert console.lines.count("Pick: ") == 2

    def test_exhausted_input_raises_eof(self):
        prompter, _ = make_prompter("42")
        with pytest.raises(EOFError):
            prompter.read_int("Choice: ", 1, 9)


class TestReadFloat:
    def test_rejects_negative_and_garbage(self):
        prompter, console = make_prompter("-1", "ten", "nan", "inf", "5.50")
        assert prompter.read_float("Amount: ", 0) == 5.5
        assert console.lines.count("Invalid input. Please enter a number >= 0.") == 4

    def test_zero_is_allowed(self):
        prompter, _ = make_prompter("0")
        assert prompter.read_float("Amount: ", 0) == 0.0


class TestReadCityName:
    @pytest.fixture
    def cities(self):
        directory = CityDirectory()
        directory.add("Kigali")
        directory.add("Huye")
        return directory

    def test_rejects_empty_numeric_and_duplicate(self, cities):
        prompter, console = make_prompter("   ", "Zone 3", " kigali ", "  Musanze  ")
        assert prompter.read_city_name("Name: ", cities) == "Musanze"
        assert "Error: City name cannot be empty." in console.lines
        assert "Error: City name cannot contain numbers." in console.lines
        assert "Error: City 'kigali' already exists." in console.lines

    def test_rejects_spaced_hyphen(self, cities):
        prompter, console = make_prompter("Huye - Town", "Huye-Town")
        assert prompter.read_city_name("Name: ", cities) == "Huye-Town"
        assert (
            "Error: City name cannot contain a hyphen next to a space." in console.lines
        )

    def test_excluded_city_may_keep_its_name(self, cities):
        prompter, _ = make_prompter("HUYE")
        assert prompter.read_city_name("Name: ", cities, exclude_index=2) == "HUYE"

    def test_read_text_strips(self):
        prompter, _ = make_prompter("  Huye \t")
        assert prompter.read_text("City: ") == "Huye"
