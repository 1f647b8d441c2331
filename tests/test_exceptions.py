from flagset.exceptions import (
    ArityError,
    ConversionError,
    FlagNotRecognized,
    FlagsetError,
    NoCandidateMatched,
    ParseError,
    PermutationExhausted,
    TrailingArgumentsError,
)


def test_with_context_keeps_chain():
    inner = ConversionError("x", "int")
    outer = inner.with_context("Could not convert type int").with_context(
        "Parsing flag --n failed."
    )
    assert outer.trace() == [
        "Parsing flag --n failed.",
        "Could not convert type int",
        'Could not convert "x" to a int',
    ]
    assert outer.root is inner
    assert outer.__cause__.__cause__ is inner


def test_describe():
    error = ArityError().with_context("outer")
    assert error.describe() == "outer\n  caused by: Missing arguments"


def test_hierarchy():
    for error in (
        ArityError(),
        ConversionError("a", "int"),
        FlagNotRecognized("--x"),
        PermutationExhausted("int", []),
        NoCandidateMatched([]),
        TrailingArgumentsError("x"),
    ):
        assert isinstance(error, ParseError)
        assert isinstance(error, FlagsetError)


def test_conversion_error_detail():
    error = ConversionError("70000", "uint16", "above 65535")
    assert error.message == 'Could not convert "70000" to a uint16: above 65535'


def test_permutation_exhausted_wraps_last_failure():
    failures = [ArityError(), ConversionError("a", "int")]
    error = PermutationExhausted("int, string", failures)
    assert error.cause is failures[-1]
    assert error.message == "No ordering of (int, string) matched after 2 rotation(s)"


def test_no_candidate_matched_lists_failures():
    error = NoCandidateMatched([FlagNotRecognized("--a"), FlagNotRecognized(None)])
    assert "Could not parse flag: --a" in error.message
    assert error.describe().splitlines() == [
        error.message,
        "  - Could not parse flag: --a",
        "  - Could not parse empty flags",
    ]
