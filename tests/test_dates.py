from portfolio_app.builder.dates import DateFormatter


def test_build_without_day():
    assert DateFormatter.build("2024", "3", "") == "03/2024"


def test_build_with_day():
    assert DateFormatter.build("2024", "3", "5") == "03/05/2024"


def test_build_needs_month_and_year():
    assert DateFormatter.build("", "3", "5") == ""
    assert DateFormatter.build("2024", "", "") == ""


def test_parse():
    assert DateFormatter.parse("03/2024") == {"month": "03", "day": "", "year": "2024"}
    assert DateFormatter.parse("03/05/2024") == {"month": "03", "day": "05", "year": "2024"}
    assert DateFormatter.parse("") == {"month": "", "day": "", "year": ""}
    assert DateFormatter.parse("2024-03-05") == {"month": "", "day": "", "year": ""}


def test_format():
    assert DateFormatter.format("03/2024") == "Mar 2024"
    assert DateFormatter.format("03/05/2024") == "Mar 5 2024"
    assert DateFormatter.format("12/31/1999") == "Dec 31 1999"
    assert DateFormatter.format("") == ""
    assert DateFormatter.format(None) == ""


def test_format_out_of_range_month_shows_year_only():
    assert DateFormatter.format("13/2024") == "2024"
    assert DateFormatter.format("00/05/2024") == "2024"
    assert DateFormatter.format("ab/2024") == "2024"
