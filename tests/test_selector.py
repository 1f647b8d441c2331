from flagset.converters import INT, PATH, STRING
from flagset.exceptions import NoCandidateMatched
from flagset.group import FlagGroup, FlagSpec
from flagset.outcome import Converted, Failure
from flagset.selector import select_group


def test_first_matching_candidate_wins():
    first = FlagGroup("first", FlagSpec("--run", "-r"), [STRING])
    second = FlagGroup("second", FlagSpec("--run", "-r"), [STRING])
    outcome = select_group([first, second], ("--run", "x"))
    assert outcome.value.name == "first"


def test_falls_through_on_conversion_failure():
    numeric = FlagGroup("numeric", FlagSpec("--set"), [INT])
    textual = FlagGroup("textual", FlagSpec("--set"), [STRING])
    assert select_group([numeric, textual], ("--set", "5")).value.name == "numeric"
    outcome = select_group([numeric, textual], ("--set", "five"))
    assert outcome.value.name == "textual"
    assert outcome.value.values == ("five",)


def test_falls_through_on_arity_failure():
    pair = FlagGroup("pair", FlagSpec("--p"), [PATH, PATH])
    single = FlagGroup("single", FlagSpec("--p"), [PATH])
    assert select_group([pair, single], ("--p", "a")).value.name == "single"


def test_leftovers_do_not_cause_fallthrough():
    single = FlagGroup("single", FlagSpec("--p"), [STRING])
    pair = FlagGroup("pair", FlagSpec("--p"), [STRING, STRING])
    outcome = select_group([single, pair], ("--p", "a", "b"))
    assert isinstance(outcome, Converted)
    assert outcome.value.name == "single"
    assert outcome.remaining == ("b",)


def test_no_candidate_matched():
    groups = [
        FlagGroup("a", FlagSpec("--a"), [INT]),
        FlagGroup("b", FlagSpec("--b"), [INT]),
    ]
    outcome = select_group(groups, ("--a", "x"))
    assert isinstance(outcome, Failure)
    error = outcome.error
    assert isinstance(error, NoCandidateMatched)
    assert len(error.failures) == 2
    assert error.failures[0].message == "Parsing flag --a failed."
    assert error.failures[1].message == "Could not parse flag: --a"
    assert "Could not parse flag: --a" in error.describe()


def test_no_candidates():
    outcome = select_group([], ("--a",))
    assert isinstance(outcome.error, NoCandidateMatched)
    assert outcome.error.failures == []
