"""Month/day/year strings used by experience, education and certification dates."""

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


class DateFormatter:
    """Stored dates are ``MM/YYYY`` or ``MM/DD/YYYY``; the day is optional."""

    @staticmethod
    def parse(date_string):
        if not date_string:
            return {"month": "", "day": "", "year": ""}

        parts = date_string.split("/")
        if len(parts) == 2:
            return {"month": parts[0], "day": "", "year": parts[1]}
        if len(parts) == 3:
            return {"month": parts[0], "day": parts[1], "year": parts[2]}
        return {"month": "", "day": "", "year": ""}

    @classmethod
    def format(cls, date_string):
        """``"03/2024"`` -> ``"Mar 2024"``, ``"03/05/2024"`` -> ``"Mar 5 2024"``."""
        parsed = cls.parse(date_string)
        month, day, year = parsed["month"], parsed["day"], parsed["year"]
        if not month or not year:
            return ""

        try:
            month_name = MONTH_NAMES[int(month) - 1] if 1 <= int(month) <= 12 else ""
        except ValueError:
            month_name = ""
        if not month_name:
            # unreadable month: the year is all that can be shown
            return year

        if day:
            try:
                day = str(int(day))
            except ValueError:
                pass
            return f"{month_name} {day} {year}"
        return f"{month_name} {year}"

    @staticmethod
    def build(year, month, day=""):
        if not year or not month:
            return ""

        mm = month.rjust(2, "0")
        dd = day.rjust(2, "0") if day else ""
        if dd:
            return f"{mm}/{dd}/{year}"
        return f"{mm}/{year}"


def format_date(date_string):
    return DateFormatter.format(date_string)
