from argweave.parser import ArgParser, ParseReport


def test_defaults_initialize_without_tokens():
    parser = ArgParser("test")
    parser.add_string_argument("name").set_default("anon")
    parser.add_int_argument("count").set_default(5)
    parser.add_flag("verbose").set_default(True)

    assert parser.parse([]) is True
    for name in ("name", "count", "verbose"):
        assert parser.is_initialized(name)
    assert parser.get_string("name") == "anon"
    assert parser.get_int("count") == 5
    assert parser.get_flag("verbose") is True


def test_missing_required_value_is_soft_failure():
    parser = ArgParser("test")
    parser.add_string_argument("name")
    parser.add_int_argument("count").set_default(1)

    assert parser.parse(["--count=2"]) is False
    assert parser.get_int("count") == 2
    assert parser.last_report.uninitialized == ["name"]
    assert not parser.last_report.ok


def test_flags_are_never_required():
    parser = ArgParser("test")
    parser.add_flag("verbose")
    assert parser.parse([]) is True
    assert not parser.is_initialized("verbose")


def test_all_failures_are_collected():
    parser = ArgParser("test")
    parser.add_string_argument("first")
    parser.add_int_argument("numbers").set_multi_value(3)
    parser.add_string_argument("second")
    parser.add_string_argument("tags").set_multi_value(1)

    assert parser.parse(["--numbers=1", "--tags", "x"]) is False
    report = parser.last_report
    assert report.insufficient == ["numbers"]
    assert report.uninitialized == ["first", "second"]
    assert report.describe() == (
        "too few values for: numbers; missing values for: first, second"
    )
    assert parser.check_multi_values() is False
    assert parser.check_values() is False


def test_multi_value_without_minimum_needs_one_value():
    parser = ArgParser("test")
    parser.add_string_argument("tags").set_multi_value()

    assert parser.parse([]) is False
    assert parser.last_report.uninitialized == ["tags"]
    assert parser.last_report.insufficient == []
    assert parser.parse(["--tags=a"]) is True


def test_multi_value_default_replicated_to_minimum():
    parser = ArgParser("test")
    parser.add_int_argument("retries").set_multi_value(3).set_default(1)

    assert parser.get_values("retries") == [1, 1, 1]
    assert parser.parse([]) is True


def test_multi_value_default_without_minimum_stores_nothing():
    parser = ArgParser("test")
    parser.add_string_argument("tags").set_multi_value().set_default("x")

    assert parser.get_values("tags") == []
    assert parser.is_initialized("tags")
    assert parser.get_string("tags") == ""
    assert parser.parse([]) is True


def test_default_before_multi_value_sets_single_value():
    parser = ArgParser("test")
    parser.add_string_argument("tags").set_default("x").set_multi_value(2)

    assert parser.get_values("tags") == []
    assert parser.get_string("tags") == "x"
    assert parser.parse([]) is False
    assert parser.last_report.insufficient == ["tags"]


def test_parse_report_defaults():
    report = ParseReport()
    assert report.ok
    assert report.describe() == ""
    assert ParseReport(help_requested=True, uninitialized=["x"]).ok
